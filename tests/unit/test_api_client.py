from __future__ import annotations

import asyncio
from typing import Any, Dict

import httpx
import pytest

from client.api import APIClient, UserLookupError
from core.models.user import GithubUser


def _octocat_payload() -> Dict[str, Any]:
    return {
        "login": "octocat",
        "id": 583231,
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "html_url": "https://github.com/octocat",
        "name": "The Octocat",
        "company": "@github",
        "blog": "https://github.blog",
        "location": "San Francisco",
        "bio": None,
        "public_repos": 8,
        "followers": 9000,
        "following": 9,
    }


def _client(handler, **kwargs) -> APIClient:
    return APIClient("api.github.com", True, transport=httpx.MockTransport(handler), **kwargs)


def test_fetch_user_parses_profile():
    calls = {"last_request": None}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["last_request"] = request
        return httpx.Response(200, json=_octocat_payload())

    async def scenario():
        async with _client(handler) as api:
            return await api.fetch_user("octocat")

    user = asyncio.run(scenario())

    assert isinstance(user, GithubUser)
    assert user.display_name == "The Octocat"
    assert user.url == "https://github.com/octocat"
    assert user.avatar_url.startswith("https://avatars.githubusercontent.com/")
    assert user.followers == 9000

    request = calls["last_request"]
    assert request.url == "https://api.github.com/users/octocat"
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert "Authorization" not in request.headers


def test_display_name_falls_back_to_login():
    payload = _octocat_payload()
    payload["name"] = None

    assert GithubUser.model_validate(payload).display_name == "octocat"


def test_unknown_user_raises_status_line():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Not Found"})

    async def scenario():
        async with _client(handler) as api:
            await api.fetch_user("doesnotexist123")

    with pytest.raises(UserLookupError) as exc:
        asyncio.run(scenario())

    assert str(exc.value) == "404 Not Found"


def test_rate_limited_raises_status_line():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "API rate limit exceeded"})

    async def scenario():
        async with _client(handler) as api:
            await api.fetch_user("octocat")

    with pytest.raises(UserLookupError, match="403 Forbidden"):
        asyncio.run(scenario())


def test_network_error_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    async def scenario():
        async with _client(handler) as api:
            await api.fetch_user("octocat")

    with pytest.raises(UserLookupError, match="Name or service not known"):
        asyncio.run(scenario())


def test_invalid_payload_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"unexpected": True})

    async def scenario():
        async with _client(handler) as api:
            await api.fetch_user("octocat")

    with pytest.raises(UserLookupError, match="Invalid response"):
        asyncio.run(scenario())


def test_token_only_sent_to_the_api_host():
    seen: Dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen[request.url.host] = request
        if request.url.host == "api.github.com":
            return httpx.Response(200, json=_octocat_payload())
        return httpx.Response(200, content=b"\x89PNG fake")

    async def scenario():
        async with _client(handler, auth_token="ghp_secret") as api:
            user = await api.fetch_user("octocat")
            return await api.fetch_avatar(user.avatar_url)

    content = asyncio.run(scenario())

    assert content == b"\x89PNG fake"
    assert seen["api.github.com"].headers["Authorization"] == "Bearer ghp_secret"
    assert "Authorization" not in seen["avatars.githubusercontent.com"].headers


@pytest.mark.parametrize(
    "username, raw_path",
    [
        ("octo#cat", b"/users/octo%23cat"),
        ("octo?cat=1", b"/users/octo%3Fcat%3D1"),
        ("foo/repos", b"/users/foo%2Frepos"),
        ("../emojis", b"/users/%2E%2E%2Femojis"),
        ("  octocat  ", b"/users/octocat"),
    ],
)
def test_username_is_sent_as_a_single_path_segment(username, raw_path):
    seen: Dict[str, httpx.Request] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(404, json={"message": "Not Found"})

    async def scenario():
        async with _client(handler) as api:
            await api.fetch_user(username)

    with pytest.raises(UserLookupError, match="404 Not Found"):
        asyncio.run(scenario())

    assert seen["request"].url.raw_path == raw_path
    assert seen["request"].url.fragment == ""
