"""SQLAlchemy ORM models."""

from userauth.models.account import Account
from userauth.models.base import Base

__all__ = ["Account", "Base"]
