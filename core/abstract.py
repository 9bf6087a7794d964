from abc import ABC, abstractmethod

from core.config import Settings


class App(ABC):
    settings: Settings

    def __init__(self, settings: Settings, username: str | None = None) -> None:
        self.settings = settings
        self.initial_username = username

    @abstractmethod
    def run(self) -> None:
        raise NotImplementedError
