import pytest

from friterie.core.errors import ValidationError
from friterie.core.security import hash_password, validate_new_password, verify_password


def test_hash_and_verify_roundtrip() -> None:
    hashed = hash_password("frites-maison")

    assert hashed.startswith("$2b$10$")
    assert verify_password("frites-maison", hashed) is True
    assert verify_password("frites-surgelees", hashed) is False


@pytest.mark.parametrize("password", ["short", "é" * 37])
def test_rejects_unstorable_passwords(password: str) -> None:
    with pytest.raises(ValidationError):
        validate_new_password(password)
    with pytest.raises(ValidationError):
        hash_password(password)


def test_malformed_hash_raises() -> None:
    with pytest.raises(ValueError):
        verify_password("frites-maison", "not-a-bcrypt-hash")
