"""Authenticated JSON client for the Aksha backend."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from aksha.services.secure_store import AUTH_TOKEN_KEY, SecureStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when a backend call fails (network, non-2xx, or bad JSON)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """Sends the stored bearer token with every request.

    A 401 from the backend means the token is no longer valid, so it is
    cleared before the error is raised.
    """

    def __init__(
        self,
        base_url: str,
        store: SecureStore,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.store = store
        self.timeout = timeout
        self._transport = transport

    async def request(self, method: str, endpoint: str, json: Any = None) -> Any:
        headers = {"Content-Type": "application/json"}
        token = self.store.get_item(AUTH_TOKEN_KEY)
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, endpoint, json=json, headers=headers)
        except httpx.HTTPError as exc:
            raise ApiError(f"{method} {endpoint} failed: {exc}") from exc

        data = _parse_body(response)

        if not response.is_success:
            if response.status_code == 401:
                logger.info("Backend rejected the auth token; clearing it")
                self.store.delete_item(AUTH_TOKEN_KEY)
            message = data.get("message") if isinstance(data, dict) else None
            raise ApiError(message or "API request failed", status_code=response.status_code)

        if data is None and response.content:
            raise ApiError(f"{method} {endpoint} returned invalid JSON", status_code=response.status_code)
        return data

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, body: Any) -> Any:
        return await self.request("POST", endpoint, json=body)

    async def put(self, endpoint: str, body: Any) -> Any:
        return await self.request("PUT", endpoint, json=body)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
