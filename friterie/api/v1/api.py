"""API v1 router composition."""

from fastapi import APIRouter

from friterie.api.v1.endpoints import auth, footer, images, menu, status

api_router: APIRouter = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(menu.router, prefix="/menu", tags=["menu"])
api_router.include_router(footer.router, prefix="/footer", tags=["footer"])
api_router.include_router(status.router, prefix="/status", tags=["status"])
api_router.include_router(images.router, prefix="/images", tags=["images"])
