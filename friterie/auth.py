"""Cookie session and rate-limit dependencies for admin routes."""

from __future__ import annotations

from fastapi import Request, Response, status

from friterie.core.config import settings
from friterie.core.errors import ApiError
from friterie.services.rate_limit import RateLimiter, client_ip
from friterie.services.session_store import Session, SessionStore


def _sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_current_admin(request: Request) -> Session | None:
    """Return the live admin session behind the cookie, if any."""
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        return None
    return _sessions(request).get(session_id)


def require_admin(request: Request) -> Session:
    """Reject requests without a valid admin session."""
    current = get_current_admin(request)
    if current is None:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Unauthorized")
    return current


def enforce_rate_limit(request: Request) -> None:
    """Count one attempt for the caller IP; blocked callers get a 429."""
    limiter: RateLimiter = request.app.state.rate_limiter
    result = limiter.check(client_ip(request))
    if result.allowed:
        return
    retry_after = result.retry_after or 0
    raise ApiError(
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too many attempts. Please try again later.",
        extra={"retryAfter": retry_after},
        headers={"Retry-After": str(retry_after)},
    )


def set_session_cookie(response: Response, session: Session) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.session_id,
        max_age=int(session.duration.total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
    )
