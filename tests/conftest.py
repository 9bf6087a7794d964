import os
import sys

# pygame must never try to open a real window or audio device in tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def pytest_configure():
    # Ensure the repo root is importable for `core.*` and `client.*` imports
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    if root not in sys.path:
        sys.path.insert(0, root)

    from icecream import ic

    ic.disable()
