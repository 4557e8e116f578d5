"""Starter menu for empty databases."""

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from friterie.models.footer import FooterItem
from friterie.models.menu import Category
from friterie.services.footer_service import create_footer_item
from friterie.services.menu_service import create_category, create_item

logger = logging.getLogger(__name__)

STARTER_MENU: list[dict] = [
    {
        "label": "Frites",
        "items": [
            {"name": "Petite frite", "description": "Frites fraîches cuites deux fois", "price": "3,00 €"},
            {
                "name": "Grande frite",
                "description": "Frites fraîches cuites deux fois",
                "price": "4,00 € - 5,00 €",
                "highlight": True,
            },
        ],
    },
    {
        "label": "Snacks",
        "items": [
            {"name": "Fricadelle", "description": "La classique", "price": "3,50 €"},
            {"name": "Boulette", "description": "Boulette maison sauce tomate", "price": "4,50 €"},
        ],
    },
    {
        "label": "Sauces",
        "items": [
            {"name": "Andalouse", "description": "Sauce maison", "price": "0,80 €"},
        ],
    },
]

STARTER_FOOTER: list[dict] = [
    {"title": "Nous trouver", "description": "Plan d'accès", "icon": "map-pin", "link": "/contact"},
    {
        "title": "Notre best-seller",
        "icon": "star",
        "menu_category_id": "frites",
        "menu_item_name": "Grande frite",
    },
]


def ensure_seed_data(session: Session) -> bool:
    """Fill an empty database with a starter menu and footer.

    Returns:
        bool: True when rows were inserted.
    """
    if session.scalar(select(func.count(Category.id))):
        return False

    for category_data in STARTER_MENU:
        category = create_category(session, category_data["label"])
        for item_data in category_data["items"]:
            create_item(session, category.id, **item_data)

    if not session.scalar(select(func.count(FooterItem.id))):
        for footer_data in STARTER_FOOTER:
            create_footer_item(session, **footer_data)

    logger.info("[BOOTSTRAP] starter menu inserted (%s categories)", len(STARTER_MENU))
    return True
