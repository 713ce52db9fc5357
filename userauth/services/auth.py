"""Registration, login and token-to-profile resolution."""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

import jwt

from userauth.core.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from userauth.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_BYTES,
    USERNAME_MAX_LEN,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from userauth.models import Account
from userauth.services.credential_store import (
    DUPLICATE_ACCOUNT_MESSAGE,
    CredentialStore,
    normalize_identity,
)

if TYPE_CHECKING:
    from userauth.core.config import Settings

logger = logging.getLogger(__name__)

# local@domain.tld: no whitespace, exactly one @, at least one dot after it.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Same message for unknown user and wrong password (no user enumeration).
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@dataclass(frozen=True)
class AuthResult:
    """Issued bearer token plus the account it was issued for."""

    token: str
    account: Account


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    return hash_password("not-a-real-password", rounds=rounds)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def _require_utf8(**fields: str) -> None:
    """Raise ValidationError for the first value that cannot be encoded as UTF-8 (e.g. lone surrogates)."""
    for name, value in fields.items():
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValidationError(f"Invalid {name}", cause=e) from e


def register(
    store: CredentialStore,
    settings: "Settings",
    username: str | None,
    email: str | None,
    password: str | None,
) -> AuthResult:
    """
    Create an account and issue a token for it.

    Input is validated before the store is touched. Usernames may not contain
    '@', which keeps login by username and login by email unambiguous. The
    existence check is an early exit only; the store's unique constraint
    decides concurrent races.
    """
    username = (username or "").strip()
    email = (email or "").strip()
    if not username or not email or not password:
        raise ValidationError("Username, email, and password are required")
    _require_utf8(username=username, email=email, password=password)
    if "@" in username:
        raise ValidationError("Username must not contain '@'")
    if not is_valid_email(email):
        raise ValidationError("Invalid email format")
    if len(username) > USERNAME_MAX_LEN:
        raise ValidationError(f"Username must be at most {USERNAME_MAX_LEN} characters")
    if len(email) > EMAIL_MAX_LEN:
        raise ValidationError(f"Email must be at most {EMAIL_MAX_LEN} characters")
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValidationError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")

    username = normalize_identity(username)
    email = normalize_identity(email)

    if store.exists_by_username_or_email(username, email):
        logger.info("Registration rejected: duplicate identity", extra={"outcome": "conflict"})
        raise ConflictError(DUPLICATE_ACCOUNT_MESSAGE)

    password_hash = hash_password(password, rounds=settings.BCRYPT_ROUNDS)
    account = store.create(username, email, password_hash)
    token = create_access_token(account.id, account.username, settings)
    logger.info("Account registered", extra={"account_id": account.id, "outcome": "success"})
    return AuthResult(token=token, account=account)


def login(
    store: CredentialStore,
    settings: "Settings",
    identifier: str | None,
    password: str | None,
) -> AuthResult:
    """Verify username-or-email and password against an active account; issue a token."""
    identifier = (identifier or "").strip()
    if not identifier or not password:
        raise ValidationError("Username and password are required")
    _require_utf8(username=identifier, password=password)

    account = store.find_by_identifier(identifier, active_only=True)
    if account is None:
        # Spend the same bcrypt work as a real check.
        verify_password(password, _dummy_hash(settings.BCRYPT_ROUNDS))
        logger.info("Login failed", extra={"outcome": "failure"})
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, account.password_hash):
        logger.info("Login failed", extra={"outcome": "failure"})
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    # Read before touching: a failed update rolls back and expires the instance.
    account_id, username = account.id, account.username
    store.touch_last_login(account_id)
    token = create_access_token(account_id, username, settings)
    logger.info("Login succeeded", extra={"account_id": account_id, "outcome": "success"})
    return AuthResult(token=token, account=account)


def account_id_from_token(token: str | None, settings: "Settings") -> int:
    """Validate a bearer token and return the account id in its sub claim."""
    if not token:
        raise AuthenticationError("No token provided")
    try:
        payload = decode_access_token(token, settings)
        return int(payload["sub"])
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid token", cause=e) from e
    except (KeyError, TypeError, ValueError) as e:
        raise AuthenticationError("Invalid token", cause=e) from e


def resolve_profile(store: CredentialStore, settings: "Settings", token: str | None) -> Account:
    """Return the active account a token was issued for."""
    account_id = account_id_from_token(token, settings)
    account = store.get_active_by_id(account_id)
    if account is None:
        raise NotFoundError("User not found")
    return account


def list_accounts(store: CredentialStore) -> list[Account]:
    return store.list_accounts()


def reset_accounts(store: CredentialStore, settings: "Settings") -> int:
    """Delete all accounts. Refused unless ALLOW_USER_RESET is set outside prod."""
    if not settings.user_reset_enabled:
        raise NotFoundError("Not found")
    return store.delete_all()
