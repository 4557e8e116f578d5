"""Shared SQLAlchemy base declarative class and model imports."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for ORM models."""


# Import model modules so metadata is populated before create_all.
from friterie.models import admin_user as _admin_user  # noqa: E402,F401
from friterie.models import footer as _footer  # noqa: E402,F401
from friterie.models import menu as _menu  # noqa: E402,F401
