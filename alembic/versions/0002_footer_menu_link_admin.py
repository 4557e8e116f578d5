"""footer menu links and admin accounts

Revision ID: 0002_footer_link_admin
Revises: 0001_menu
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0002_footer_link_admin"
down_revision = "0001_menu"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("footer_items") as batch_op:
        batch_op.add_column(sa.Column("menu_item_name", sa.String(length=200), nullable=True))
        batch_op.add_column(sa.Column("menu_category_id", sa.String(length=64), nullable=True))

    op.create_table(
        "admin_users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
    )
    op.create_index("ix_admin_users_username", "admin_users", ["username"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_admin_users_username", table_name="admin_users")
    op.drop_table("admin_users")
    with op.batch_alter_table("footer_items") as batch_op:
        batch_op.drop_column("menu_category_id")
        batch_op.drop_column("menu_item_name")
