import pygame

from client.components.base import BaseComponent
from core.constants import MEDIUM_GRAY, USERNAME_MAX_LENGTH


class Input(BaseComponent):
    """Single-line text field; Enter fires the callback."""

    def __init__(
        self,
        window,
        position,
        placeholder,
        variant="standard",
        size="md",
        text_type="standard",
        hover=True,
        is_topleft=False,
        *,
        max_length=USERNAME_MAX_LENGTH,
        callback=lambda: None,
    ) -> None:
        self.value: str = ""
        self.placeholder = placeholder
        self.max_length = max_length
        self.active: bool = False
        super().__init__(
            window,
            position,
            placeholder,
            variant,
            size,
            text_type,
            hover,
            is_topleft,
            callback=callback,
        )
        self.time = {"elapsed_time": 0, "last_tick": pygame.time.get_ticks(), "time_counter": 0}
        self.animation_particle = "|"
        self.add = ""

    def _init_surface(self) -> pygame.Surface:
        """
        Initialize the surface of the input.
        """
        cordinate, thickness = self._get_size()

        surface = self._create_surface(cordinate)
        self._draw_box(surface, thickness)

        font = self._get_font()
        showing_placeholder = not self.value and not self.active
        color = MEDIUM_GRAY if showing_placeholder else self._get_color("text")
        text_surface = font.render(self.label, True, color)
        surface.blit(text_surface, text_surface.get_rect(midleft=(12, cordinate[1] // 2)))

        return surface

    def _render(self) -> None:
        t1 = pygame.time.get_ticks()
        self.time["elapsed_time"] = t1 - self.time["last_tick"]
        self.time["last_tick"] = t1
        self.time["time_counter"] += self.time["elapsed_time"]

        if self.active:
            self.is_focused = True
            if self.time["time_counter"] > 500:
                self.add = " " if self.add == self.animation_particle else self.animation_particle
                self.time["time_counter"] = 0
            self.label = self.value + self.add
        else:
            self.label = self.value or self.placeholder

    def _callback(self) -> None:
        self.active = True

    def clear(self) -> None:
        self.value = ""

    def _handle_event(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and not self.rect.collidepoint(event.pos):
            self.active = False
            self.is_focused = False
            return

        if not self.active or event.type != pygame.KEYDOWN:
            return

        if event.key == pygame.K_RETURN or event.key == pygame.K_KP_ENTER:
            self.callback()
        elif event.key == pygame.K_BACKSPACE:
            self.value = self.value[:-1]
        elif event.unicode and event.unicode.isprintable():
            if len(self.value) < self.max_length:
                self.value += event.unicode
