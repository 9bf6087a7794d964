import pygame

from client.components.base import BaseComponent
from core.constants import LOADING_LABEL


class Spinner(BaseComponent):
    """Loading placeholder: '<label>' followed by animated dots."""

    def __init__(self, *args, **kwargs) -> None:
        kwargs.setdefault("hover", False)
        super().__init__(*args, **kwargs)
        self.value: str = ""
        self.holder = self.label or LOADING_LABEL
        self.time = {"elapsed_time": 0, "last_tick": pygame.time.get_ticks()}
        self.sprites = ["", ".", "..", "..."]

    def set_holder(self, holder: str) -> None:
        self.holder = holder

    def _init_surface(self) -> pygame.Surface:
        cordinate, _ = self._get_size()
        font = self._get_font()
        text_surface = font.render(self.label, True, self._get_color("text"))

        surface = self._create_surface((max(cordinate[0], text_surface.get_width()), cordinate[1]))
        surface.blit(text_surface, text_surface.get_rect(midleft=(0, cordinate[1] // 2)))

        return surface

    def _render(self) -> None:
        t1 = pygame.time.get_ticks()
        self.time["elapsed_time"] += t1 - self.time["last_tick"]
        self.time["last_tick"] = t1

        if self.time["elapsed_time"] > 400:
            self.time["elapsed_time"] = 0
            index = (self.sprites.index(self.value) + 1) % len(self.sprites)
            self.value = self.sprites[index]

        self.label = self.holder + self.value
