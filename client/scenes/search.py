import pygame

from client.components import Button, Input
from client.scenes.base import BaseScene
from client.views import BaseView, select_view
from core.constants import ACCENT_BLUE, SLATE_GRAY, WHITE


class SearchScene(BaseScene):
    """Single page: username form on top, lookup result below."""

    def __init__(self, app) -> None:
        super().__init__(app)
        cx, _ = self.app.screen_center

        self.title_pos = (cx, 40)
        self.divider_y = 135
        self.content_top = self.divider_y + 20

        self.input = Input(self.app.screen, (cx - 90, 95), "GitHub username", callback=self._submit)
        self.input.active = True
        if self.app.user_service.username:
            self.input.value = self.app.user_service.username

        self.search_button = Button(
            self.app.screen, (cx + 155, 95), "Search", "primary", callback=self._submit
        )
        self.clear_button = Button(
            self.app.screen, (cx + 300, 95), "Clear", "outline", size="sm", callback=self._clear
        )
        self._sync_search_button()

        self.add_component(self.input)
        self.add_component(self.search_button)
        self.add_component(self.clear_button)

        self.view: BaseView | None = None
        self.title_font = pygame.font.SysFont("Arial", 32, bold=True)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self._clear()

    def _submit(self) -> None:
        self.app.user_service.search(self.input.value)

    def _clear(self) -> None:
        self.input.clear()
        self.app.user_service.clear()

    def _sync_search_button(self) -> None:
        self.search_button.set_disabled(not self.input.value.strip())

    def _render_header(self) -> None:
        x, y = self.title_pos
        for dx, dy in [(1, 1), (-1, -1)]:
            glow = self.title_font.render(self.app.settings.client_title, True, ACCENT_BLUE)
            self.app.screen.blit(glow, glow.get_rect(center=(x + dx, y + dy)))
        title = self.title_font.render(self.app.settings.client_title, True, WHITE)
        self.app.screen.blit(title, title.get_rect(center=self.title_pos))

        width = self.app.screen.get_width()
        pygame.draw.line(
            self.app.screen, SLATE_GRAY, (40, self.divider_y), (width - 40, self.divider_y), 2
        )

    def render(self) -> None:
        self._render_header()
        self._sync_search_button()

        state = self.app.user_service.state
        view_cls = select_view(state.status)
        if type(self.view) is not view_cls:
            self.view = view_cls(self)

        self.view.render(state)
