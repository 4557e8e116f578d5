"""Admin login, logout and password endpoints."""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from friterie.auth import (
    clear_session_cookie,
    enforce_rate_limit,
    get_current_admin,
    require_admin,
    set_session_cookie,
)
from friterie.core.errors import store_failure
from friterie.db.session import get_db
from friterie.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ResetPasswordRequest,
    ResetRequest,
    VerifyResponse,
)
from friterie.services import auth_service
from friterie.services.rate_limit import client_ip
from friterie.services.session_store import Session as AdminSession

router: APIRouter = APIRouter()

RESET_REQUEST_MESSAGE = "If the account exists, a reset link has been issued."


@router.post("/login", response_model=LoginResponse, dependencies=[Depends(enforce_rate_limit)])
def login(payload: LoginRequest, request: Request, response: Response, db: Session = Depends(get_db)) -> LoginResponse:
    sessions = request.app.state.sessions
    session_id = auth_service.authenticate(db, sessions, payload.username, payload.password, payload.remember_me)
    request.app.state.rate_limiter.reset(client_ip(request))
    set_session_cookie(response, sessions.get(session_id))
    return LoginResponse(username=payload.username)


@router.post("/logout", response_model=MessageResponse)
def logout(request: Request, response: Response) -> MessageResponse:
    current = get_current_admin(request)
    if current is not None:
        request.app.state.sessions.delete(current.session_id)
    clear_session_cookie(response)
    return MessageResponse(message="Logged out")


@router.get("/verify", response_model=VerifyResponse)
def verify(request: Request):
    current = get_current_admin(request)
    if current is None:
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"authenticated": False})
    return VerifyResponse(authenticated=True, username=current.username)


@router.post("/change-password", response_model=MessageResponse, dependencies=[Depends(enforce_rate_limit)])
def change_password(
    payload: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current: AdminSession = Depends(require_admin),
) -> MessageResponse:
    with store_failure("Failed to change password"):
        auth_service.change_password(db, current.username, payload.current_password, payload.new_password)
    return MessageResponse(message="Password changed")


@router.post("/reset-request", response_model=MessageResponse, dependencies=[Depends(enforce_rate_limit)])
def reset_request(payload: ResetRequest, request: Request, db: Session = Depends(get_db)) -> MessageResponse:
    auth_service.request_password_reset(db, request.app.state.reset_tokens, payload.username)
    return MessageResponse(message=RESET_REQUEST_MESSAGE)


@router.post("/reset-password", response_model=MessageResponse, dependencies=[Depends(enforce_rate_limit)])
def reset_password(payload: ResetPasswordRequest, request: Request, db: Session = Depends(get_db)) -> MessageResponse:
    with store_failure("Failed to reset password"):
        auth_service.reset_password(db, request.app.state.reset_tokens, payload.token, payload.new_password)
    return MessageResponse(message="Password has been reset")
