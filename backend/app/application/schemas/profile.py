"""Pydantic DTOs for the profile, auth-status and logout endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class ProfileUserResponse(UserResponse):
    created_at: datetime = Field(alias="createdAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class ProfileResponse(BaseModel):
    success: bool = True
    user: ProfileUserResponse


class ProfileUpdateResponse(BaseModel):
    success: bool = True
    user: UserResponse


class ProfileUpdate(BaseModel):
    """Both fields are required; blanks are rejected by ProfileService."""

    name: str = ""
    email: str = ""


class AuthStatusResponse(BaseModel):
    authenticated: bool
    user: UserResponse | None = None


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out successfully"


class ErrorResponse(BaseModel):
    error: str
