"""Footer entry helpers.

Footer entries may point at a menu item by ``(menu_category_id,
menu_item_name)``. The pair is a soft reference checked by
``validate_menu_link`` on every write, never by the database.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from friterie.core.errors import NotFoundError, ValidationError
from friterie.models.footer import FooterItem
from friterie.services.menu_service import get_category, menu_item_exists

logger = logging.getLogger(__name__)

OPTIONAL_TEXT_FIELDS: tuple[str, ...] = ("description", "icon", "link", "menu_item_name", "menu_category_id")


def validate_menu_link(db: Session, menu_category_id: str | None, menu_item_name: str | None) -> None:
    """Check a footer -> menu item link; both parts or neither."""
    if not menu_category_id and not menu_item_name:
        return
    if not menu_category_id or not menu_item_name:
        raise ValidationError("Both menu_item_name and menu_category_id are required when linking to a menu item")
    if get_category(db, menu_category_id) is None:
        raise ValidationError("Menu category not found")
    if not menu_item_exists(db, menu_category_id, menu_item_name):
        raise ValidationError("Menu item not found in the specified category")


def list_footer_items(db: Session, *, visible_only: bool) -> list[FooterItem]:
    query = select(FooterItem)
    if visible_only:
        query = query.where(FooterItem.visible.is_(True))
    return list(db.scalars(query.order_by(FooterItem.order.asc(), FooterItem.id.asc())).all())


def get_footer_item(db: Session, item_id: int) -> FooterItem | None:
    return db.get(FooterItem, item_id)


def require_footer_item(db: Session, item_id: int) -> FooterItem:
    item = get_footer_item(db, item_id)
    if item is None:
        raise NotFoundError("Footer item not found")
    return item


def create_footer_item(
    db: Session,
    *,
    title: str,
    description: str | None = None,
    icon: str | None = None,
    link: str | None = None,
    menu_item_name: str | None = None,
    menu_category_id: str | None = None,
    visible: bool = True,
) -> FooterItem:
    """Validate the menu link and append the entry at the end of the footer."""
    validate_menu_link(db, menu_category_id, menu_item_name)
    max_order = db.scalar(select(func.max(FooterItem.order)))
    item = FooterItem(
        title=title,
        description=description or None,
        icon=icon or None,
        link=link or None,
        menu_item_name=menu_item_name or None,
        menu_category_id=menu_category_id or None,
        order=0 if max_order is None else max_order + 1,
        visible=visible,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("[FOOTER] item created id=%s", item.id)
    return item


def update_footer_item(db: Session, item_id: int, changes: dict[str, Any]) -> FooterItem:
    """Apply a partial update.

    ``changes`` holds only the fields sent by the caller; ``None`` clears an
    optional field. The menu link is validated on the merged result so a
    half-updated pair can never be stored.
    """
    item = require_footer_item(db, item_id)

    menu_category_id = changes.get("menu_category_id", item.menu_category_id) or None
    menu_item_name = changes.get("menu_item_name", item.menu_item_name) or None
    if "menu_category_id" in changes or "menu_item_name" in changes:
        validate_menu_link(db, menu_category_id, menu_item_name)

    if changes.get("title") is not None:
        item.title = changes["title"]
    for field in OPTIONAL_TEXT_FIELDS:
        if field in changes:
            setattr(item, field, changes[field] or None)
    if changes.get("visible") is not None:
        item.visible = bool(changes["visible"])

    db.commit()
    db.refresh(item)
    return item


def delete_footer_item(db: Session, item_id: int) -> bool:
    item = get_footer_item(db, item_id)
    if item is None:
        return False
    db.delete(item)
    db.commit()
    logger.info("[FOOTER] item deleted id=%s", item_id)
    return True


def reorder_footer_items(db: Session, ids: list[int]) -> None:
    """Assign ``order = index`` across the whole footer in one transaction."""
    try:
        for index, item_id in enumerate(ids):
            db.execute(update(FooterItem).where(FooterItem.id == item_id).values(order=index))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
