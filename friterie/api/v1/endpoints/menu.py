"""Menu categories, items and ordering endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from friterie.auth import require_admin
from friterie.core.errors import NotFoundError, store_failure
from friterie.db.session import get_db
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
from friterie.services import menu_service

router: APIRouter = APIRouter()
admin_only = [Depends(require_admin)]


@router.get("", response_model=list[CategoryWithItems])
def read_menu(db: Session = Depends(get_db)):
    """Public menu: every category with its items, both in display order."""
    return menu_service.list_categories_with_items(db)


@router.get("/categories", response_model=list[CategoryRead])
def read_categories(db: Session = Depends(get_db)):
    return menu_service.list_categories(db)


@router.post(
    "/categories",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    with store_failure("Failed to create category"):
        return menu_service.create_category(db, payload.label)


@router.get("/categories/{category_id}", response_model=CategoryWithItems)
def read_category(category_id: str, db: Session = Depends(get_db)):
    return menu_service.require_category(db, category_id)


@router.put("/categories/{category_id}", response_model=CategoryRead, dependencies=admin_only)
def update_category(category_id: str, payload: CategoryUpdate, db: Session = Depends(get_db)):
    with store_failure("Failed to update category"):
        return menu_service.update_category(db, category_id, label=payload.label)


@router.delete("/categories/{category_id}", response_model=SuccessResponse, dependencies=admin_only)
def delete_category(category_id: str, db: Session = Depends(get_db)) -> SuccessResponse:
    with store_failure("Failed to delete category"):
        deleted = menu_service.delete_category(db, category_id)
    if not deleted:
        raise NotFoundError("Category not found")
    return SuccessResponse()


@router.get("/categories/{category_id}/items", response_model=list[MenuItemRead])
def read_items(category_id: str, db: Session = Depends(get_db)):
    menu_service.require_category(db, category_id)
    return menu_service.list_items(db, category_id)


@router.post(
    "/categories/{category_id}/items",
    response_model=MenuItemRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=admin_only,
)
def create_item(category_id: str, payload: MenuItemCreate, db: Session = Depends(get_db)):
    with store_failure("Failed to create item"):
        return menu_service.create_item(db, category_id, **payload.model_dump())


@router.get("/categories/{category_id}/items/{item_id}", response_model=MenuItemRead)
def read_item(category_id: str, item_id: int, db: Session = Depends(get_db)):
    return menu_service.require_item(db, category_id, item_id)


@router.put("/categories/{category_id}/items/{item_id}", response_model=MenuItemRead, dependencies=admin_only)
def update_item(category_id: str, item_id: int, payload: MenuItemUpdate, db: Session = Depends(get_db)):
    with store_failure("Failed to update item"):
        return menu_service.update_item(db, category_id, item_id, payload.model_dump(exclude_unset=True))


@router.delete(
    "/categories/{category_id}/items/{item_id}",
    response_model=SuccessResponse,
    dependencies=admin_only,
)
def delete_item(category_id: str, item_id: int, db: Session = Depends(get_db)) -> SuccessResponse:
    with store_failure("Failed to delete item"):
        menu_service.delete_item(db, category_id, item_id)
    return SuccessResponse()


@router.post("/reorder", response_model=SuccessResponse, dependencies=admin_only)
def reorder(payload: ReorderRequest, db: Session = Depends(get_db)) -> SuccessResponse:
    """Rewrite ``order`` to each id's position in ``ids``; ids left out keep their old rank."""
    with store_failure("Failed to reorder"):
        if payload.type == "categories":
            menu_service.reorder_categories(db, payload.ids)
        else:
            menu_service.reorder_items(db, payload.category_id, payload.ids)
    return SuccessResponse()
