"""Account listing and the administrative reset endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from userauth.api.routes.dependencies import get_store
from userauth.core.config import Settings, get_settings
from userauth.schemas.auth import AccountProfile, ResetResponse, UsersListResponse
from userauth.services import auth as auth_service
from userauth.services.credential_store import CredentialStore

router = APIRouter()


# TODO: put behind get_current_account once clients send a token for the user list.
@router.get("", response_model=UsersListResponse)
def list_users(
    store: Annotated[CredentialStore, Depends(get_store)],
) -> UsersListResponse:
    """List all accounts, newest first (no password hashes)."""
    accounts = auth_service.list_accounts(store)
    return UsersListResponse(
        total_users=len(accounts),
        users=[AccountProfile.model_validate(a) for a in accounts],
    )


@router.api_route("/reset", methods=["DELETE", "POST"], response_model=ResetResponse)
def reset_users(
    store: Annotated[CredentialStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> ResetResponse:
    """
    Delete every account and restart id numbering. For test environments only:
    returns 404 unless ALLOW_USER_RESET=true and APP_ENV is not prod.
    """
    auth_service.reset_accounts(store, settings)
    return ResetResponse()
