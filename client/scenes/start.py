import pygame

from client.scenes.base import BaseScene, Scenes
from core.constants import ACCENT_BLUE, WHITE


class StartScene(BaseScene):
    """Splash screen, fades the title in and out then opens the search page."""

    TRANSITION_TIME = 1500

    def __init__(self, app) -> None:
        super().__init__(app)
        self.started_at = pygame.time.get_ticks()
        self.font = pygame.font.SysFont("Arial", 48, bold=True)

    def handle_event(self, event) -> None:
        # qualquer tecla ou clique pula a animação
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.KEYDOWN):
            self._next_scene(Scenes.SEARCH)

    def _alpha(self, elapsed: int) -> int:
        fade = self.TRANSITION_TIME * 0.3
        if elapsed < fade:
            return int(255 * elapsed / fade)
        if elapsed > self.TRANSITION_TIME - fade:
            return max(0, int(255 * (self.TRANSITION_TIME - elapsed) / fade))
        return 255

    def render(self) -> None:
        elapsed = pygame.time.get_ticks() - self.started_at
        if elapsed > self.TRANSITION_TIME:
            self._next_scene(Scenes.SEARCH)
            return

        cx, cy = self.app.screen_center
        alpha = self._alpha(elapsed)

        for offset in [(2, 2), (-2, -2), (2, -2), (-2, 2)]:
            glow = self.font.render(self.app.settings.client_title, True, ACCENT_BLUE)
            glow.set_alpha(alpha // 2)
            self.app.screen.blit(glow, glow.get_rect(center=(cx + offset[0], cy + offset[1])))

        title = self.font.render(self.app.settings.client_title, True, WHITE)
        title.set_alpha(alpha)
        self.app.screen.blit(title, title.get_rect(center=(cx, cy)))
