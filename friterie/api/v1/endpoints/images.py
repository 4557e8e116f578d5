"""Public listing of menu pictures."""

from fastapi import APIRouter

from friterie.core.config import settings
from friterie.services.image_service import list_images

router: APIRouter = APIRouter()


@router.get("", response_model=list[str])
def read_images() -> list[str]:
    return list_images(settings.images_dir)
