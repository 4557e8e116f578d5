"""Admin account provisioning and authentication."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from friterie.core.config import settings
from friterie.core.errors import InvalidCredentialsError, ValidationError
from friterie.core.security import hash_password, validate_new_password, verify_password
from friterie.models.admin_user import AdminUser
from friterie.services.password_reset import ResetTokenStore
from friterie.services.session_store import SessionStore

logger = logging.getLogger(__name__)


def get_admin(db: Session, username: str) -> AdminUser | None:
    return db.scalar(select(AdminUser).where(AdminUser.username == username).limit(1))


def ensure_default_admin(db: Session) -> bool:
    """Ensure the configured admin account exists.

    Returns:
        bool: True when the account existed before this call.
    """
    if get_admin(db, settings.admin_username) is not None:
        logger.info("[BOOTSTRAP] Admin exists")
        return True

    db.add(AdminUser(username=settings.admin_username, password_hash=hash_password(settings.admin_password)))
    db.commit()
    logger.warning(
        "[SECURITY] Admin account %r created from ADMIN_PASSWORD. Change the password after first login.",
        settings.admin_username,
    )
    return False


def authenticate(
    db: Session,
    sessions: SessionStore,
    username: str,
    password: str,
    remember_me: bool = False,
) -> str:
    """Check the admin credentials and open a session.

    Unknown usernames and wrong passwords raise the same error so callers
    cannot probe which usernames exist.
    """
    admin = get_admin(db, username) if username == settings.admin_username else None
    if admin is None or not verify_password(password, admin.password_hash):
        logger.info("[AUTH] rejected login for username=%r", username)
        raise InvalidCredentialsError()
    logger.info("[AUTH] admin %r logged in (remember_me=%s)", username, remember_me)
    return sessions.create(username, remember_me=remember_me)


def _store_password(db: Session, admin: AdminUser, new_password: str) -> None:
    admin.password_hash = hash_password(new_password)
    db.commit()


def change_password(db: Session, username: str, current_password: str, new_password: str) -> None:
    """Replace the admin password after re-checking the current one."""
    admin = get_admin(db, username)
    if admin is None or not verify_password(current_password, admin.password_hash):
        raise ValidationError("Current password is incorrect")
    validate_new_password(new_password)
    _store_password(db, admin, new_password)
    logger.info("[AUTH] password changed for %r", username)


def request_password_reset(db: Session, tokens: ResetTokenStore, username: str) -> str | None:
    """Issue a reset token for the admin; other usernames silently get nothing.

    The reset link is written to the log, which is the out-of-band channel.
    """
    if username != settings.admin_username or get_admin(db, username) is None:
        logger.info("[AUTH] reset requested for unknown username")
        return None
    token = tokens.generate(username)
    logger.warning(
        "[AUTH] Password reset link: %s/admin/reset-password?token=%s",
        settings.public_base_url.rstrip("/"),
        token,
    )
    return token


def reset_password(db: Session, tokens: ResetTokenStore, token: str, new_password: str) -> str:
    """Set a new password from a reset token, then burn the token."""
    username = tokens.validate(token)
    if username is None:
        raise ValidationError("Invalid or expired reset token")
    validate_new_password(new_password)
    admin = get_admin(db, username)
    if admin is None:
        raise ValidationError("Invalid or expired reset token")
    _store_password(db, admin, new_password)
    tokens.consume(token)
    logger.info("[AUTH] password reset for %r", username)
    return username
