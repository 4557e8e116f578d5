"""Application models package."""

from friterie.models.admin_user import AdminUser
from friterie.models.footer import FooterItem
from friterie.models.menu import Category, MenuItem

__all__ = ["AdminUser", "Category", "FooterItem", "MenuItem"]
