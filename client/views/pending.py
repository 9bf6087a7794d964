from client.components import Spinner
from client.views.base import BaseView
from core.constants import LOADING_LABEL


class PendingView(BaseView):
    """Loading placeholder naming the user being looked up."""

    def __init__(self, scene) -> None:
        super().__init__(scene)
        cx, top = self.anchor
        self.spinner = Spinner(self.screen, (cx, top + 60), LOADING_LABEL, size="lg")

    def render(self, state) -> None:
        username = self.app.user_service.username
        self.spinner.set_holder(f"{LOADING_LABEL} {username}" if username else LOADING_LABEL)
        self.spinner.render()
