from client.components import TextArea
from client.views.base import BaseView
from core.constants import IDLE_PROMPT, LIGHT_GRAY


class IdleView(BaseView):
    """Prompt shown before anything was searched."""

    def __init__(self, scene) -> None:
        super().__init__(scene)
        cx, top = self.anchor
        self.prompt = TextArea(
            self.screen, (cx, top + 60), IDLE_PROMPT, size="lg", hover=False, color=LIGHT_GRAY
        )

    def render(self, state) -> None:
        self.prompt.render()
