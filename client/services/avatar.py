from __future__ import annotations

import io

import pygame

from client.services.base import ServiceBase
from core.constants import AVATAR_SIZE
from core.lifecycle import RequestLifecycle
from core.models.network import RequestState, RequestStatus


class AvatarService(ServiceBase):
    """Downloads the avatar of whichever user the search resolved to."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.lifecycle = RequestLifecycle(self._load_avatar, discard_stale=True)
        self.app.user_service.register_state_callback(self._on_user_state)

    async def _load_avatar(self, url: str) -> pygame.Surface:
        content = await self.api_client.fetch_avatar(url)
        image = pygame.image.load(io.BytesIO(content))
        return pygame.transform.smoothscale(image, (AVATAR_SIZE, AVATAR_SIZE))

    def _on_user_state(self, state: RequestState) -> None:
        if state.status == RequestStatus.RESOLVED and state.data is not None:
            self.lifecycle.start(state.data.avatar_url)
        elif self.lifecycle.state.status != RequestStatus.IDLE:
            self.lifecycle.reset()

    @property
    def image(self) -> pygame.Surface | None:
        """Avatar surface, or None while loading or after a failed download."""
        state = self.lifecycle.state
        if state.status == RequestStatus.RESOLVED:
            return state.data
        return None

    def raise_for_fatal(self) -> None:
        self.lifecycle.raise_for_fatal()

    async def join(self) -> None:
        await self.lifecycle.join()
