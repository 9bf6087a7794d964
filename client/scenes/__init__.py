from client.scenes.base import BaseScene, Scenes
from client.scenes.search import SearchScene
from client.scenes.start import StartScene

SCENES_MAP: dict[Scenes, type[BaseScene]] = {
    Scenes.START: StartScene,
    Scenes.SEARCH: SearchScene,
}
"""Mapping of scenes to their respective classes."""


__all__ = ["SCENES_MAP", "Scenes"]
