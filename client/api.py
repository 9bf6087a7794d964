"""
API client for the GitHub REST API.

Every call is a coroutine on the UI event loop, so awaiting a response never
freezes the Pygame frame loop.
"""

import logging
from typing import Literal, Self
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from core.models.user import GithubUser
from core.ssl_config import get_ssl_context

logger = logging.getLogger(__name__)


class UserLookupError(RuntimeError):
    """A lookup failed: network error, unknown user, rate limit, bad payload."""


class APIClient:
    """Async API client for the GitHub users endpoint."""

    def __init__(
        self,
        endpoint: str,
        use_ssl: bool,
        auth_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize a new instance of the APIClient class.

        Args:
            endpoint: Host of the API
            use_ssl: Whether to use SSL
            auth_token: Personal access token, lifts the anonymous rate limit
            timeout: Timeout in seconds for each request
            transport: Custom httpx transport (tests)
        """
        protocol = "https" if use_ssl else "http"
        self.client = httpx.AsyncClient(
            base_url=f"{protocol}://{endpoint}",
            headers={
                "User-Agent": "Pygame Profile Finder :D",
                "Accept": "application/vnd.github+json",
            },
            timeout=timeout,
            verify=get_ssl_context() if use_ssl else True,
            transport=transport,
        )
        self.auth_token = auth_token

    def set_auth_token(self, token: str | None) -> None:
        self.auth_token = token

    async def _make_request(
        self, method: Literal["GET"], endpoint: str, headers: dict | None = None
    ) -> httpx.Response:
        """
        Do a request and turn any failure into a UserLookupError.

        Args:
            method: HTTP method
            endpoint: API endpoint or absolute URL
            headers: Extra headers to send
        """
        headers = headers or {}

        # token só vai para a própria API, nunca para o CDN de avatares
        if self.auth_token and endpoint.startswith("/"):
            headers["Authorization"] = f"Bearer {self.auth_token}"

        try:
            response = await self.client.request(method, endpoint, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response
            logger.error(f"{method} {endpoint} returned {status.status_code}")
            raise UserLookupError(f"{status.status_code} {status.reason_phrase}") from e
        except httpx.HTTPError as e:
            logger.error(f"Unexpected error for {method} {endpoint}: {e!r}")
            raise UserLookupError(str(e) or type(e).__name__) from e

        return response

    async def fetch_user(self, username: str) -> GithubUser:
        """
        Look up a GitHub user by login.

        Raises:
            UserLookupError: the user could not be fetched
        """
        # o login vira um único segmento: "#", "?", "/" e ".." não podem mudar a rota
        login = quote(username.strip(), safe="").replace(".", "%2E")
        response = await self._make_request("GET", f"/users/{login}")

        try:
            return GithubUser.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid user payload for {username!r}: {e}")
            raise UserLookupError(f"Invalid response for user {username!r}") from e

    async def fetch_avatar(self, url: str) -> bytes:
        """Download raw avatar image bytes from an absolute URL."""
        response = await self._make_request("GET", url)
        return response.content

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
