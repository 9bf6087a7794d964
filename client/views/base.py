from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

from core.models.network import RequestState

if TYPE_CHECKING:
    from client.scenes.search import SearchScene


class UnhandledStatusError(RuntimeError):
    """The presentation layer got a request status it has no view for."""


class BaseView(ABC):
    """One screen area rendering a single request status."""

    def __init__(self, scene: "SearchScene") -> None:
        self.scene = scene
        self.app = scene.app

    @property
    def screen(self) -> pygame.Surface:
        return self.app.screen

    @property
    def anchor(self) -> tuple[int, int]:
        """Top-center point of the area the view may draw on."""
        return (self.app.screen_center[0], self.scene.content_top)

    @abstractmethod
    def render(self, state: RequestState) -> None:
        """
        Draw the view for `state`.

        Args:
            state: Current request state, matching the view's status
        """
        raise NotImplementedError
