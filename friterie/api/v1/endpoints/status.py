"""Restaurant open/closed status endpoints."""

from fastapi import APIRouter, Depends, Request

from friterie.auth import require_admin
from friterie.core.errors import store_failure
from friterie.schemas.status import RestaurantStatus, StatusUpdateResponse

router: APIRouter = APIRouter()


@router.get("", response_model=RestaurantStatus, response_model_by_alias=True)
def read_status(request: Request) -> RestaurantStatus:
    return request.app.state.status_store.get()


@router.put(
    "",
    response_model=StatusUpdateResponse,
    response_model_by_alias=True,
    dependencies=[Depends(require_admin)],
)
def update_status(payload: RestaurantStatus, request: Request) -> StatusUpdateResponse:
    with store_failure("Failed to update status"):
        saved = request.app.state.status_store.set(payload)
    return StatusUpdateResponse(status=saved)
