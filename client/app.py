"""
Profile finder client - application factory
"""

import asyncio

import pygame

from client.api import APIClient
from client.scenes import SCENES_MAP, Scenes
from client.services import AvatarService, UserService
from core.abstract import App
from core.config import Settings


class ClientApp(App):
    """Pygame client driven by an asyncio event loop."""

    screen: pygame.Surface
    clock: pygame.time.Clock
    current_scene: Scenes = Scenes.START
    running: bool = False
    user_service: UserService
    avatar_service: AvatarService

    def __init__(self, settings: Settings, username: str | None = None) -> None:
        super().__init__(settings, username)
        self.api_client = APIClient(
            self.settings.api_endpoint,
            self.settings.api_endpoint_ssl,
            self.settings.api_token,
            timeout=self.settings.api_timeout,
        )
        if username:
            self.current_scene = Scenes.SEARCH

    @property
    def screen_center(self) -> tuple[int, int]:
        return (self.screen.get_width() // 2, self.screen.get_height() // 2)

    def run(self) -> None:
        asyncio.run(self._main())

    async def _main(self) -> None:
        pygame.init()

        pygame.display.set_caption(self.settings.client_title)
        self.screen = pygame.display.set_mode(
            [self.settings.client_width, self.settings.client_height]
        )
        self.clock = pygame.time.Clock()

        # lookups need the running loop, so services are built here
        self.user_service = UserService(self)
        self.avatar_service = AvatarService(self)

        self.running = True
        try:
            await self._frame_loop()
        finally:
            await self.api_client.aclose()
            pygame.quit()

    def raise_for_fatal(self) -> None:
        """Halt on programming errors that escaped any lookup task."""
        self.user_service.raise_for_fatal()
        self.avatar_service.raise_for_fatal()

    async def _frame_loop(self) -> None:
        frame_time = 1 / self.settings.client_fps

        past_scene = self.current_scene
        scene = SCENES_MAP[self.current_scene](self)
        while self.running:
            self.clock.tick()

            if self.current_scene != past_scene:
                past_scene = self.current_scene
                scene = SCENES_MAP[self.current_scene](self)

            # a scene is responsible to update the current state, change scenes, etc.
            scene.update()
            pygame.display.flip()

            self.raise_for_fatal()

            # cede o loop para as buscas em andamento
            await asyncio.sleep(frame_time)
