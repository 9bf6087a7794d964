from __future__ import annotations

from collections.abc import Callable
from typing import Any

from icecream import ic

from client.services.base import ServiceBase
from core.lifecycle import RequestLifecycle
from core.models.network import RequestState, RequestStatus
from core.models.user import GithubUser


class UserService(ServiceBase):
    """Looks up GitHub profiles for the search page."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.lifecycle = RequestLifecycle(
            self.api_client.fetch_user,
            self.app.initial_username,
            discard_stale=self.app.settings.discard_stale_results,
        )

    def register_state_callback(self, cb: Callable[[RequestState], Any]) -> None:
        self.lifecycle.subscribe(cb)

    @property
    def state(self) -> RequestState:
        return self.lifecycle.state

    @property
    def username(self) -> str | None:
        """Username of the lookup currently tracked, if any."""
        return self.lifecycle.identifier

    @property
    def user(self) -> GithubUser | None:
        if self.state.status == RequestStatus.RESOLVED:
            return self.state.data
        return None

    @property
    def is_loading(self) -> bool:
        return self.lifecycle.is_pending

    def search(self, username: str | None) -> None:
        ic(username)
        self.lifecycle.start(username.strip() if username else username)

    def clear(self) -> None:
        self.lifecycle.reset()

    def raise_for_fatal(self) -> None:
        self.lifecycle.raise_for_fatal()

    async def join(self) -> None:
        await self.lifecycle.join()
