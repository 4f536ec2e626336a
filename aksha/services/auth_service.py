"""Auth service: identity exchange and local session."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from aksha.core.security import token_expired
from aksha.schemas.auth import UserProfile
from aksha.services.api_client import ApiClient, ApiError
from aksha.services.secure_store import AUTH_TOKEN_KEY, USER_DATA_KEY, SecureStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, api: ApiClient, store: SecureStore, api_prefix: str = "/api/v1") -> None:
        self.api = api
        self.store = store
        self.api_prefix = api_prefix

    async def login(
        self,
        clerk_id: str,
        session_id: str | None = None,
        session_token: str | None = None,
    ) -> UserProfile:
        """Exchange the identity-provider id for a backend token and cache the profile."""
        logger.info("Attempting login with clerk_id=%s", clerk_id)
        payload = {"clerkId": clerk_id}
        if session_id:
            payload["sessionId"] = session_id
        if session_token:
            payload["sessionToken"] = session_token

        data = await self.api.post(f"{self.api_prefix}/auth/login", payload)
        if not isinstance(data, dict) or not data.get("token"):
            raise ApiError("Login response missing token")

        try:
            profile = UserProfile.model_validate(data)
        except ValidationError as exc:
            raise ApiError(f"Login response has an invalid user record: {exc}") from exc

        self.store.set_item(AUTH_TOKEN_KEY, data["token"])
        self.store.set_item(USER_DATA_KEY, profile.model_dump_json(by_alias=True))
        return profile

    def get_current_user(self) -> UserProfile | None:
        """Profile saved at login, or None."""
        raw = self.store.get_item(USER_DATA_KEY)
        if not raw:
            return None
        try:
            return UserProfile.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as exc:
            logger.warning("Stored user data is unreadable: %s", exc)
            return None

    def logout(self) -> None:
        self.store.delete_item(AUTH_TOKEN_KEY)
        self.store.delete_item(USER_DATA_KEY)

    def is_authenticated(self) -> bool:
        token = self.store.get_item(AUTH_TOKEN_KEY)
        return bool(token) and not token_expired(token)

    async def get_profile(self) -> UserProfile:
        """Fetch the profile from the backend, which also verifies the token."""
        data = await self.api.get(f"{self.api_prefix}/users/profile")
        try:
            return UserProfile.model_validate(data)
        except ValidationError as exc:
            raise ApiError(f"Profile response is invalid: {exc}") from exc
