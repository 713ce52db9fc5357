"""Credential store: account persistence on top of a SQLAlchemy session."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import or_, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from userauth.core.errors import ConflictError, StoreError
from userauth.models import Account

logger = logging.getLogger(__name__)

DUPLICATE_ACCOUNT_MESSAGE = "Username or email already exists"


def normalize_identity(value: str) -> str:
    """Canonical form of a username or email: trimmed and lowercase."""
    return value.strip().lower()


class CredentialStore:
    """
    Account lookups and writes used by the auth service.

    Every identifier is passed through normalize_identity before it is compared
    or written. Storage failures surface as StoreError, except unique-constraint
    violations on insert, which surface as ConflictError.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Credential store %s failed", operation)
            raise StoreError("Database error", cause=e) from e

    def find_by_identifier(self, identifier: str, active_only: bool = True) -> Account | None:
        """
        Find an account by email when identifier contains '@', otherwise by username.

        Usernames never contain '@', so at most one row can match.
        """
        ident = normalize_identity(identifier)
        column = Account.email if "@" in ident else Account.username
        with self._translate_errors("find_by_identifier"):
            query = self.session.query(Account).filter(column == ident)
            if active_only:
                query = query.filter(Account.is_active.is_(True))
            return query.first()

    def exists_by_username_or_email(self, username: str, email: str) -> bool:
        """True if any account, active or not, already uses the username or the email."""
        with self._translate_errors("exists_by_username_or_email"):
            row = (
                self.session.query(Account.id)
                .filter(
                    or_(
                        Account.username == normalize_identity(username),
                        Account.email == normalize_identity(email),
                    )
                )
                .first()
            )
        return row is not None

    def get_active_by_id(self, account_id: int) -> Account | None:
        with self._translate_errors("get_active_by_id"):
            return (
                self.session.query(Account)
                .filter(Account.id == account_id, Account.is_active.is_(True))
                .first()
            )

    def create(self, username: str, email: str, password_hash: str) -> Account:
        """
        Insert a new account and return it with server defaults loaded.

        The unique indexes decide races between concurrent registrations: the
        losing insert raises ConflictError even if it passed the pre-check.
        """
        if not password_hash:
            raise ValueError("password_hash must be non-empty")
        account = Account(
            username=normalize_identity(username),
            email=normalize_identity(email),
            password_hash=password_hash,
            is_active=True,
        )
        try:
            self.session.add(account)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Account insert rejected by unique constraint")
            raise ConflictError(DUPLICATE_ACCOUNT_MESSAGE, cause=e) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Credential store create failed")
            raise StoreError("Database error", cause=e) from e
        with self._translate_errors("create"):
            self.session.refresh(account)
        return account

    def touch_last_login(self, account_id: int) -> datetime | None:
        """
        Set last_login_at to now. Best effort: on failure log and return None.
        """
        now = datetime.now(UTC)
        try:
            self.session.query(Account).filter(Account.id == account_id).update(
                {Account.last_login_at: now}
            )
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.warning(
                "Could not update last login",
                extra={"account_id": account_id},
                exc_info=True,
            )
            return None
        return now

    def list_accounts(self) -> list[Account]:
        """All accounts, newest first."""
        with self._translate_errors("list_accounts"):
            return (
                self.session.query(Account)
                .order_by(Account.created_at.desc(), Account.id.desc())
                .all()
            )

    def delete_all(self) -> int:
        """
        Delete every account and restart id sequencing. Irreversible.

        Returns the number of accounts removed.
        """
        table = Account.__tablename__
        with self._translate_errors("delete_all"):
            dialect = self.session.get_bind().dialect.name
            deleted = self.session.query(Account).count()
            if dialect == "postgresql":
                self.session.execute(text(f"TRUNCATE TABLE {table} RESTART IDENTITY"))
            else:
                self.session.query(Account).delete(synchronize_session=False)
                if dialect == "sqlite":
                    self.session.execute(
                        text("DELETE FROM sqlite_sequence WHERE name = :name"),
                        {"name": table},
                    )
            self.session.commit()
        logger.warning("All accounts deleted", extra={"deleted_count": deleted})
        return deleted
