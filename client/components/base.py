"""
Widgets drawn straight onto the window surface.

A component rebuilds its surface from its label and flags on every
`render()`, so changing `label`, `is_focused` or `is_disabled` shows up on
the next frame.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Literal

import pygame

from core.constants import FONT_MAP, FONT_SIZE_MAP, SIZE_MAP, VARIANT_MAP
from core.types import (
    ComponentSize,
    ComponentType,
    ComponentVariant,
    Coordinate,
    FontSize,
    FontStyle,
    Thickness,
)


class BaseComponent(ABC):
    """Layout, styling and mouse handling shared by every widget."""

    def __init__(
        self,
        window: pygame.Surface,
        position: Coordinate,
        label: str,
        variant: ComponentVariant = "standard",
        size: ComponentSize = "md",
        text_type: FontSize = "standard",
        hover: bool = True,
        is_topleft: bool = False,
        *,
        callback: Callable[[], object] = lambda: None,
    ) -> None:
        """
        Args:
            window: Surface the component is blitted onto
            position: Anchor point, the center unless `is_topleft`
            label: Text shown by the component
            variant: Color scheme key of VARIANT_MAP
            size: Size key of SIZE_MAP and FONT_SIZE_MAP
            text_type: Font size family
            hover: Whether hovering the component focuses it
            is_topleft: Anchor the top-left corner instead of the center
            callback: Called when the component is activated
        """
        self.window = window
        self.position = position
        self.label = label
        self.variant: ComponentVariant = variant
        self.size: ComponentSize = size
        self.text_type: FontSize = text_type
        self.hover = hover
        self.is_topleft = is_topleft
        self.callback = callback
        self.is_focused = False
        self.is_disabled = False
        # SIZE_MAP is keyed by the lowercase class name
        self.type: ComponentType = type(self).__name__.lower()  # type: ignore
        self.refresh()

    @abstractmethod
    def _init_surface(self) -> pygame.Surface:
        """Draw the component from its current label and flags."""
        raise NotImplementedError

    def refresh(self) -> None:
        """Rebuild the surface and pin its rect to `position`."""
        self.surface = self._init_surface()
        if self.is_topleft:
            self.rect = self.surface.get_rect(topleft=self.position)
        else:
            self.rect = self.surface.get_rect(center=self.position)

    def measure(self) -> tuple[int, int]:
        """Width and height of the component with its current label."""
        self.refresh()
        return self.surface.get_size()

    def set_disabled(self, disabled: bool) -> None:
        self.is_disabled = disabled
        if disabled:
            self.is_focused = False

    def contains(self, pos: Coordinate) -> bool:
        return bool(self.rect.collidepoint(pos))

    def activate(self) -> None:
        if not self.is_disabled:
            self._callback()

    def _create_surface(self, size: Coordinate) -> pygame.Surface:
        return pygame.Surface(size, flags=pygame.SRCALPHA)

    def _draw_box(self, surface: pygame.Surface, thickness: Thickness, radius: int = 8) -> None:
        rect = surface.get_rect()
        pygame.draw.rect(surface, self._get_color("bg"), rect, border_radius=radius)
        if thickness:
            pygame.draw.rect(
                surface, self._get_color("border"), rect, border_radius=radius, width=thickness
            )

    def _get_color(self, surface_part: Literal["bg", "text", "border"]) -> pygame.Color:
        return VARIANT_MAP[not self.is_disabled][self.is_focused][self.variant][surface_part]

    def _get_font(self, font_style: FontStyle | None = None) -> pygame.font.Font:
        font_size = FONT_SIZE_MAP[self.is_focused][self.text_type][self.size]
        return pygame.font.Font(FONT_MAP[font_style] if font_style else None, font_size)

    def _get_size(self) -> tuple[Coordinate, Thickness]:
        return SIZE_MAP[self.is_focused][self.type][self.size]

    def _handle_event(self, event: pygame.event.Event) -> None:
        """Component specific handling, runs before hover and click."""

    def _render(self) -> None:
        """Per-frame update, runs before the surface is rebuilt."""

    def _callback(self) -> None:
        self.callback()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route one pygame event. Disabled components ignore everything."""
        if self.is_disabled:
            return
        self._handle_event(event)

        match event.type:
            case pygame.MOUSEMOTION if self.hover:
                self.is_focused = self.contains(event.pos)
            case pygame.MOUSEBUTTONDOWN if event.button == 1 and self.contains(event.pos):
                self.activate()

    def render(self) -> None:
        self._render()
        self.refresh()
        self.window.blit(self.surface, self.rect)
