"""Schema exports."""

from friterie.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ResetPasswordRequest,
    ResetRequest,
    VerifyResponse,
)
from friterie.schemas.footer import FooterItemCreate, FooterItemRead, FooterItemUpdate, FooterReorderRequest
from friterie.schemas.menu import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    CategoryWithItems,
    MenuItemCreate,
    MenuItemRead,
    MenuItemUpdate,
    ReorderRequest,
    SuccessResponse,
)
from friterie.schemas.status import RestaurantStatus, StatusUpdateResponse

__all__ = [
    "ChangePasswordRequest",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ResetPasswordRequest",
    "ResetRequest",
    "VerifyResponse",
    "FooterItemCreate",
    "FooterItemRead",
    "FooterItemUpdate",
    "FooterReorderRequest",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "CategoryWithItems",
    "MenuItemCreate",
    "MenuItemRead",
    "MenuItemUpdate",
    "ReorderRequest",
    "SuccessResponse",
    "RestaurantStatus",
    "StatusUpdateResponse",
]
