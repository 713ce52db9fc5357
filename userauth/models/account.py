"""ORM model for registered accounts (credentials and login metadata)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func, true

from userauth.models.base import Base


class Account(Base):
    """
    Account used for username/password login and JWT issuance.

    username and email are stored lowercase; the unique indexes on them are
    the source of truth for case-insensitive uniqueness.
    """

    __tablename__ = "accounts"
    # AUTOINCREMENT on SQLite so ids of deleted rows are not handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    last_login_at = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
