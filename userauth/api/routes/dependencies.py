"""Shared route dependencies: credential store and current account."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from userauth.core.config import Settings, get_settings
from userauth.core.database import get_db
from userauth.models import Account
from userauth.services import auth as auth_service
from userauth.services.credential_store import CredentialStore

security = HTTPBearer(auto_error=False)


def get_store(db: Annotated[Session, Depends(get_db)]) -> CredentialStore:
    """Dependency: credential store bound to the request's DB session."""
    return CredentialStore(db)


def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[CredentialStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Account:
    """Dependency: require a valid Bearer JWT for an active account.

    Raises AuthenticationError (401) for a missing or invalid token and
    NotFoundError (404) when the account no longer exists.
    """
    token = credentials.credentials if credentials is not None else None
    return auth_service.resolve_profile(store, settings, token)
