"""Category and menu item helpers shared by the API and the storefront."""

from __future__ import annotations

import logging
import re
import unicodedata
from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from friterie.core.errors import ConflictError, NotFoundError, ValidationError
from friterie.models.menu import Category, MenuItem

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH: int = 50
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify_label(label: str) -> str:
    """Derive a category id: ``"Frites & Snacks"`` -> ``"frites-snacks"``."""
    folded = unicodedata.normalize("NFKD", label).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM.sub("-", folded.lower()).strip("-")
    slug = slug[:SLUG_MAX_LENGTH].strip("-")
    if not slug:
        raise ValidationError("Category label must contain at least one letter or digit")
    return slug


def _next_order(db: Session, *criteria: Any, column: Any) -> int:
    max_order = db.scalar(select(func.max(column)).where(*criteria))
    return 0 if max_order is None else max_order + 1


# Categories


def list_categories(db: Session) -> list[Category]:
    return list(db.scalars(select(Category).order_by(Category.order.asc(), Category.id.asc())).all())


def list_categories_with_items(db: Session) -> list[Category]:
    """Return categories in display order with their items eagerly loaded."""
    return list(
        db.scalars(
            select(Category)
            .options(selectinload(Category.items))
            .order_by(Category.order.asc(), Category.id.asc())
        ).all()
    )


def get_category(db: Session, category_id: str) -> Category | None:
    return db.get(Category, category_id)


def require_category(db: Session, category_id: str) -> Category:
    category = get_category(db, category_id)
    if category is None:
        raise NotFoundError("Category not found")
    return category


def create_category(db: Session, label: str) -> Category:
    """Create a category at the end of the display order.

    The id is derived from the label; an existing id is a conflict, never
    overwritten or suffixed.
    """
    clean_label = label.strip()
    if not clean_label:
        raise ValidationError("Category label cannot be empty")
    category_id = slugify_label(clean_label)
    if get_category(db, category_id) is not None:
        raise ConflictError("Category with this name already exists")

    category = Category(
        id=category_id,
        label=clean_label,
        order=_next_order(db, column=Category.order),
    )
    db.add(category)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("Category with this name already exists") from exc
    db.refresh(category)
    logger.info("[MENU] category created id=%s order=%s", category.id, category.order)
    return category


def update_category(db: Session, category_id: str, *, label: str | None = None) -> Category:
    """Update the label only; the id stays stable."""
    category = require_category(db, category_id)
    if label is not None:
        clean_label = label.strip()
        if not clean_label:
            raise ValidationError("Category label cannot be empty")
        category.label = clean_label
        db.commit()
        db.refresh(category)
    return category


def delete_category(db: Session, category_id: str) -> bool:
    """Delete a category; its items go with it through the FK cascade."""
    category = get_category(db, category_id)
    if category is None:
        return False
    db.delete(category)
    db.commit()
    logger.info("[MENU] category deleted id=%s", category_id)
    return True


def reorder_categories(db: Session, ids: list[str]) -> None:
    """Assign ``order = index`` to the listed categories in one transaction.

    Categories missing from ``ids`` keep their previous order value.
    """
    try:
        for index, category_id in enumerate(ids):
            db.execute(update(Category).where(Category.id == category_id).values(order=index))
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


# Items


def list_items(db: Session, category_id: str) -> list[MenuItem]:
    return list(
        db.scalars(
            select(MenuItem)
            .where(MenuItem.category_id == category_id)
            .order_by(MenuItem.order.asc(), MenuItem.id.asc())
        ).all()
    )


def get_item(db: Session, category_id: str, item_id: int) -> MenuItem | None:
    """Return the item only when it belongs to ``category_id``."""
    item = db.get(MenuItem, item_id)
    if item is None or item.category_id != category_id:
        return None
    return item


def require_item(db: Session, category_id: str, item_id: int) -> MenuItem:
    require_category(db, category_id)
    item = get_item(db, category_id, item_id)
    if item is None:
        raise NotFoundError("Item not found")
    return item


def create_item(
    db: Session,
    category_id: str,
    *,
    name: str,
    description: str,
    price: str,
    image: str | None = None,
    highlight: bool = False,
) -> MenuItem:
    """Append an item at the end of its category."""
    require_category(db, category_id)
    item = MenuItem(
        category_id=category_id,
        name=name,
        description=description,
        price=price,
        image=image or None,
        highlight=highlight,
        order=_next_order(db, MenuItem.category_id == category_id, column=MenuItem.order),
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("[MENU] item created id=%s category=%s", item.id, category_id)
    return item


def update_item(db: Session, category_id: str, item_id: int, changes: dict[str, Any]) -> MenuItem:
    """Apply a partial update; ``image=None`` clears the picture."""
    item = require_item(db, category_id, item_id)
    for field in ("name", "description", "price", "highlight"):
        if field in changes and changes[field] is not None:
            setattr(item, field, changes[field])
    if "image" in changes:
        item.image = changes["image"] or None
    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, category_id: str, item_id: int) -> None:
    item = require_item(db, category_id, item_id)
    db.delete(item)
    db.commit()
    logger.info("[MENU] item deleted id=%s category=%s", item_id, category_id)


def reorder_items(db: Session, category_id: str, item_ids: list[int]) -> None:
    """Assign ``order = index`` within one category in a single transaction.

    Ids belonging to another category are ignored; omitted items keep their
    previous order value.
    """
    try:
        for index, item_id in enumerate(item_ids):
            db.execute(
                update(MenuItem)
                .where(MenuItem.id == item_id, MenuItem.category_id == category_id)
                .values(order=index)
            )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def menu_item_exists(db: Session, category_id: str, item_name: str) -> bool:
    """Case-insensitive lookup of an item name inside one category."""
    count = db.scalar(
        select(func.count(MenuItem.id)).where(
            MenuItem.category_id == category_id,
            func.lower(MenuItem.name) == func.lower(item_name),
        )
    )
    return bool(count)
