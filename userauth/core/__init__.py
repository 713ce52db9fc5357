"""Core app configuration, database and security."""

from userauth.core.config import get_settings, settings
from userauth.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
