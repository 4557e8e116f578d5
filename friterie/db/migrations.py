"""Lightweight schema migrations for SQLite databases."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)

FOOTER_LINK_COLUMNS: tuple[str, ...] = ("menu_item_name", "menu_category_id")

INDEX_STATEMENTS: tuple[str, ...] = (
    "CREATE INDEX IF NOT EXISTS idx_menu_items_category ON menu_items(category_id)",
    'CREATE INDEX IF NOT EXISTS idx_categories_order ON categories("order")',
    'CREATE INDEX IF NOT EXISTS idx_menu_items_order ON menu_items(category_id, "order")',
    'CREATE INDEX IF NOT EXISTS idx_footer_items_order ON footer_items("order")',
    "CREATE INDEX IF NOT EXISTS idx_footer_items_visible ON footer_items(visible)",
)


def _sqlite_column_names(connection: Connection, table_name: str) -> set[str]:
    """Return column names for a SQLite table using PRAGMA table_info."""
    rows = connection.execute(text(f"PRAGMA table_info({table_name});")).mappings().all()
    return {str(row["name"]) for row in rows}


def _sqlite_table_names(connection: Connection) -> set[str]:
    rows = connection.execute(text("SELECT name FROM sqlite_master WHERE type='table';")).all()
    return {str(row[0]) for row in rows}


def ensure_sqlite_schema(engine: Engine) -> None:
    """Bring databases created before footer menu links existed up to date."""
    if engine.dialect.name != "sqlite":
        return

    with engine.begin() as connection:
        table_names = _sqlite_table_names(connection)

        if "footer_items" in table_names:
            footer_columns = _sqlite_column_names(connection, "footer_items")
            for column in FOOTER_LINK_COLUMNS:
                if column not in footer_columns:
                    connection.execute(text(f"ALTER TABLE footer_items ADD COLUMN {column} TEXT"))
                    logger.info("[BOOTSTRAP] added footer_items.%s", column)

        for statement in INDEX_STATEMENTS:
            table_name = statement.split(" ON ")[1].split("(")[0]
            if table_name in table_names:
                connection.execute(text(statement))
