import pygame

from client.components import TextArea
from client.views.base import BaseView
from core.constants import ACCENT_BLUE, AVATAR_SIZE, LIGHT_GRAY, SLATE_GRAY, WHITE
from core.models.user import GithubUser

DETAILS_WIDTH = 420
GAP = 24


class UserView(BaseView):
    """Detail view of a resolved GitHub profile."""

    def __init__(self, scene) -> None:
        super().__init__(scene)
        cx, top = self.anchor
        total_width = AVATAR_SIZE + GAP + DETAILS_WIDTH
        self.avatar_pos = (cx - total_width // 2, top + 20)
        x = self.avatar_pos[0] + AVATAR_SIZE + GAP

        def text(y: int, **kwargs) -> TextArea:
            return TextArea(
                self.screen, (x, top + y), "", hover=False, is_topleft=True, **kwargs
            )

        self.name = text(20, text_type="subtitle", size="md", color=WHITE)
        self.login = text(62, text_type="text", color=LIGHT_GRAY)
        self.url = text(88, text_type="text", color=ACCENT_BLUE)
        self.counters = text(118, text_type="text", color=LIGHT_GRAY)
        self.extra = text(144, text_type="text", color=LIGHT_GRAY, width=DETAILS_WIDTH)
        self.bio = text(200, text_type="text", color=WHITE, width=DETAILS_WIDTH)

    def _render_avatar(self) -> None:
        image = self.app.avatar_service.image
        if image is not None:
            self.screen.blit(image, self.avatar_pos)
            return

        placeholder = pygame.Rect(self.avatar_pos, (AVATAR_SIZE, AVATAR_SIZE))
        pygame.draw.rect(self.screen, SLATE_GRAY, placeholder, border_radius=AVATAR_SIZE // 2)

    def render(self, state) -> None:
        user: GithubUser = state.data

        self._render_avatar()

        self.name.label = user.display_name
        self.login.label = f"@{user.login}"
        self.url.label = user.url
        self.counters.label = (
            f"{user.public_repos} repos  ·  {user.followers} followers  ·  "
            f"{user.following} following"
        )
        self.extra.label = "  ·  ".join(part for part in (user.company, user.location) if part)
        self.bio.label = user.bio or ""

        for component in (self.name, self.login, self.url, self.counters, self.extra, self.bio):
            component.render()
