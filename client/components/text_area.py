import pygame

from client.components.base import BaseComponent


class TextArea(BaseComponent):
    """Plain text, wrapped to `width` pixels when given."""

    def __init__(
        self, *args, width: int | None = None, color: pygame.Color | None = None, **kwargs
    ) -> None:
        self.width = width
        self.color = color
        super().__init__(*args, **kwargs)

    def _wrap(self, font: pygame.font.Font) -> list[str]:
        if self.width is None:
            return self.label.splitlines() or [""]

        lines: list[str] = []
        for paragraph in self.label.splitlines() or [""]:
            line = ""
            for word in paragraph.split(" "):
                candidate = f"{line} {word}" if line else word
                if font.size(candidate)[0] <= self.width or not line:
                    line = candidate
                else:
                    lines.append(line)
                    line = word
            lines.append(line)
        return lines

    def _init_surface(self) -> pygame.Surface:
        """
        Initialize the surface of the TextArea.
        """
        font = self._get_font()
        color = self.color or self._get_color("text")
        rendered = [font.render(line, True, color) for line in self._wrap(font)]

        width = max(line.get_width() for line in rendered)
        height = sum(line.get_height() for line in rendered)
        surface = self._create_surface((max(width, 1), max(height, 1)))

        y = 0
        for line in rendered:
            surface.blit(line, (0, y))
            y += line.get_height()

        return surface
