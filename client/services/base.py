from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from client.api import APIClient
    from client.app import ClientApp


class ServiceBase:
    """Shared plumbing for services owned by the client app."""

    def __init__(self, app: "ClientApp") -> None:
        self.app = app

    @property
    def api_client(self) -> "APIClient":
        return self.app.api_client
