"""Password hashing utilities."""

from passlib.context import CryptContext

from friterie.core.config import settings
from friterie.core.errors import ValidationError

MIN_PASSWORD_LENGTH: int = 8
BCRYPT_MAX_BYTES: int = 72

pwd_context: CryptContext = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def validate_new_password(password: str) -> None:
    """Reject passwords that cannot be stored safely."""
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValidationError(f"Password exceeds bcrypt {BCRYPT_MAX_BYTES}-byte limit")


def hash_password(password: str) -> str:
    """Hash a plaintext password after checking its length."""
    validate_new_password(password)
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against its hash.

    A mismatch returns ``False``; a malformed hash raises ``ValueError``.
    """
    return pwd_context.verify(plain_password, hashed_password)
