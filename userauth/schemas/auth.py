"""Request/response schemas for auth and user endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Request fields are optional at the schema level so that missing values reach
# the auth service and are reported as a 400 with a single error message.


class RegisterRequest(BaseModel):
    """New account details."""

    username: str | None = Field(default=None, description="Username (stored lowercase)")
    email: str | None = Field(default=None, description="Email address (stored lowercase)")
    password: str | None = Field(default=None, description="Password")


class LoginRequest(BaseModel):
    """Credentials for login; username may also be the account email."""

    username: str | None = Field(default=None, description="Username or email")
    password: str | None = Field(default=None, description="Password")


class AccountSummary(BaseModel):
    """Public projection of an account returned after registration (no password hash)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    username: str
    email: str
    created_at: datetime | None = Field(default=None, alias="createdAt")


class AccountProfile(AccountSummary):
    """Public projection including the last successful login time."""

    last_login_at: datetime | None = Field(default=None, alias="lastLogin")


class RegisterResponse(BaseModel):
    """Token and account returned by POST /register."""

    message: str = "User registered successfully"
    token: str = Field(..., description="JWT bearer token")
    user: AccountSummary


class LoginResponse(BaseModel):
    """Token and account returned by POST /login."""

    message: str = "Login successful"
    token: str = Field(..., description="JWT bearer token")
    user: AccountProfile


class ProfileResponse(BaseModel):
    """Response for GET /profile."""

    user: AccountProfile


class UsersListResponse(BaseModel):
    """Response for GET /users."""

    model_config = ConfigDict(populate_by_name=True)

    total_users: int = Field(..., alias="totalUsers")
    users: list[AccountProfile]


class ResetResponse(BaseModel):
    """Response for the account reset endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = "All users deleted"
    total_users: int = Field(default=0, alias="totalUsers")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
