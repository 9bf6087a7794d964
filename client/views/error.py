import pygame

from client.components import TextArea
from client.views.base import BaseView
from core.constants import ACCENT_RED, BLACK, ERROR_BOX_GRAY, ERROR_TITLE

BOX_WIDTH = 560
BOX_PADDING = 15


class ErrorView(BaseView):
    """Shows the lookup failure exactly as the lookup reported it."""

    def __init__(self, scene) -> None:
        super().__init__(scene)
        cx, top = self.anchor
        self.title = TextArea(
            self.screen, (cx, top + 40), ERROR_TITLE, size="lg", hover=False, color=ACCENT_RED
        )
        self.details = TextArea(
            self.screen,
            (cx - BOX_WIDTH // 2 + BOX_PADDING, top + 80 + BOX_PADDING),
            "",
            text_type="text",
            hover=False,
            is_topleft=True,
            width=BOX_WIDTH - 2 * BOX_PADDING,
            color=BLACK,
        )
        self.box: pygame.Rect | None = None

    def render(self, state) -> None:
        self.title.render()

        # sem tratamento: o erro aparece como veio
        self.details.label = str(state.error)
        _, height = self.details.measure()

        cx, top = self.anchor
        self.box = pygame.Rect(0, 0, BOX_WIDTH, height + 2 * BOX_PADDING)
        self.box.midtop = (cx, top + 80)
        pygame.draw.rect(self.screen, ERROR_BOX_GRAY, self.box, border_radius=5)

        self.details.render()
