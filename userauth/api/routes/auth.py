"""Registration, login and profile endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from userauth.api.routes.dependencies import get_current_account, get_store
from userauth.core.config import Settings, get_settings
from userauth.models import Account
from userauth.schemas.auth import (
    AccountProfile,
    AccountSummary,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
)
from userauth.services import auth as auth_service
from userauth.services.credential_store import CredentialStore

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    store: Annotated[CredentialStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RegisterResponse:
    """
    Create an account and return a JWT for it.
    Username and email are case-insensitive and must both be unused.
    """
    result = auth_service.register(
        store, settings, body.username, body.email, body.password
    )
    return RegisterResponse(
        token=result.token,
        user=AccountSummary.model_validate(result.account),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    store: Annotated[CredentialStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LoginResponse:
    """
    Authenticate with username (or email) and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    result = auth_service.login(store, settings, body.username, body.password)
    return LoginResponse(
        token=result.token,
        user=AccountProfile.model_validate(result.account),
    )


@router.get(
    "/profile",
    response_model=ProfileResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def profile(
    account: Annotated[Account, Depends(get_current_account)],
) -> ProfileResponse:
    """Return the account the bearer token was issued for."""
    return ProfileResponse(user=AccountProfile.model_validate(account))
