"""Footer entry endpoints."""

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from friterie.auth import get_current_admin, require_admin
from friterie.core.errors import NotFoundError, store_failure
from friterie.db.session import get_db
from friterie.schemas.footer import FooterItemCreate, FooterItemRead, FooterItemUpdate, FooterReorderRequest
from friterie.schemas.menu import SuccessResponse
from friterie.services import footer_service

router: APIRouter = APIRouter()
admin_only = [Depends(require_admin)]


@router.get("", response_model=list[FooterItemRead])
def read_footer(request: Request, db: Session = Depends(get_db)):
    """Admins see hidden entries too; visitors only get visible ones."""
    visible_only = get_current_admin(request) is None
    return footer_service.list_footer_items(db, visible_only=visible_only)


@router.post("", response_model=FooterItemRead, status_code=status.HTTP_201_CREATED, dependencies=admin_only)
def create_footer_item(payload: FooterItemCreate, db: Session = Depends(get_db)):
    with store_failure("Failed to create footer item"):
        return footer_service.create_footer_item(db, **payload.model_dump())


@router.post("/reorder", response_model=SuccessResponse, dependencies=admin_only)
def reorder_footer(payload: FooterReorderRequest, db: Session = Depends(get_db)) -> SuccessResponse:
    with store_failure("Failed to reorder footer items"):
        footer_service.reorder_footer_items(db, payload.ids)
    return SuccessResponse()


@router.get("/{item_id}", response_model=FooterItemRead)
def read_footer_item(item_id: int, db: Session = Depends(get_db)):
    return footer_service.require_footer_item(db, item_id)


@router.put("/{item_id}", response_model=FooterItemRead, dependencies=admin_only)
def update_footer_item(item_id: int, payload: FooterItemUpdate, db: Session = Depends(get_db)):
    with store_failure("Failed to update footer item"):
        return footer_service.update_footer_item(db, item_id, payload.model_dump(exclude_unset=True))


@router.delete("/{item_id}", response_model=SuccessResponse, dependencies=admin_only)
def delete_footer_item(item_id: int, db: Session = Depends(get_db)) -> SuccessResponse:
    with store_failure("Failed to delete footer item"):
        deleted = footer_service.delete_footer_item(db, item_id)
    if not deleted:
        raise NotFoundError("Footer item not found")
    return SuccessResponse()
