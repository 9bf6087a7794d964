import pygame

from client.components.base import BaseComponent


class Button(BaseComponent):
    """Boxed label activated by a left click. Greyed out while disabled."""

    def _init_surface(self) -> pygame.Surface:
        (width, height), thickness = self._get_size()
        surface = self._create_surface((width, height))
        self._draw_box(surface, thickness, radius=10)

        text = self._get_font().render(self.label, True, self._get_color("text"))
        surface.blit(text, text.get_rect(center=(width // 2, height // 2)))

        return surface
