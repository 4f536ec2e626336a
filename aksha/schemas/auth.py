"""Auth request/response schemas."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    clerk_id: str = Field(min_length=1)
    session_id: str | None = None
    session_token: str | None = None


class UserProfile(BaseModel):
    """Backend user record; wire names are camelCase."""

    id: str = Field(alias="_id")
    clerk_id: str = Field(alias="clerkId")
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    profile_picture: str | None = Field(default=None, alias="profilePicture")

    model_config = {"populate_by_name": True}


class AuthStatus(BaseModel):
    authenticated: bool
