"""Pydantic request/response schemas."""

from userauth.schemas.auth import (
    AccountProfile,
    AccountSummary,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    ResetResponse,
    UsersListResponse,
)
from userauth.schemas.health import HealthResponse

__all__ = [
    "AccountProfile",
    "AccountSummary",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "ProfileResponse",
    "RegisterRequest",
    "RegisterResponse",
    "ResetResponse",
    "UsersListResponse",
]
