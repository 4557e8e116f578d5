"""FastAPI entrypoint for the friterie menu site."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from friterie.api.v1.api import api_router
from friterie.core.config import settings
from friterie.core.errors import ApiError, DomainError, error_payload
from friterie.db import session as db_session
from friterie.db.base import Base
from friterie.db.migrations import ensure_sqlite_schema
from friterie.db.seed import ensure_seed_data
from friterie.services.auth_service import ensure_default_admin
from friterie.services.password_reset import ResetTokenStore
from friterie.services.rate_limit import RateLimiter
from friterie.services.session_store import SessionStore
from friterie.services.status_service import StatusStore
from friterie.services.sweeper import PeriodicSweeper

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")
app.mount("/images", StaticFiles(directory=settings.images_dir, check_dir=False), name="images")

app.state.sessions = SessionStore()
app.state.reset_tokens = ResetTokenStore()
app.state.rate_limiter = RateLimiter()
app.state.status_store = StatusStore(settings.status_file)
app.state.sweeper = None


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_payload(exc.message))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, ApiError):
        content = error_payload(str(exc.detail), exc.details, exc.extra)
    else:
        content = error_payload(str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'][1:]) or 'body'}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_payload("Invalid request body", details),
    )


@app.on_event("startup")
async def startup() -> None:
    Base.metadata.create_all(bind=db_session.engine)
    ensure_sqlite_schema(db_session.engine)
    with db_session.SessionLocal() as session:
        try:
            if settings.seed_menu:
                ensure_seed_data(session)
            admin_present = ensure_default_admin(session)
            logger.info("[BOOTSTRAP] default admin present before startup: %s", "yes" if admin_present else "no")
        except Exception:
            logger.exception("[BOOTSTRAP] Seed/bootstrap failed; continuing startup.")

    if settings.sweeper_enabled:
        sweeper = PeriodicSweeper([app.state.sessions, app.state.reset_tokens, app.state.rate_limiter])
        sweeper.start()
        app.state.sweeper = sweeper
        logger.info("[SWEEP] background sweeper started")


@app.on_event("shutdown")
async def shutdown() -> None:
    sweeper: PeriodicSweeper | None = app.state.sweeper
    if sweeper is not None:
        await sweeper.stop()
        app.state.sweeper = None


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
