from pathlib import Path

import pygame

from core.types import (
    ComponentSize,
    ComponentType,
    ComponentVariant,
    Coordinate,
    FontSize,
    FontStyle,
    IsDisabled,
    IsFocused,
    Thickness,
)

ROOT = Path(__file__).parent.parent

# Search page copy
IDLE_PROMPT = "Search a user"
ERROR_TITLE = "There was an error"
LOADING_LABEL = "Loading"

USERNAME_MAX_LENGTH = 39  # limite de username do GitHub

# Palette
DARK_NAVY = pygame.Color(15, 23, 42)  # background
SLATE_GRAY = pygame.Color(51, 65, 85)  # painéis
ACCENT_BLUE = pygame.Color(59, 130, 246)
ACCENT_GREEN = pygame.Color(34, 197, 94)
ACCENT_RED = pygame.Color(239, 68, 68)
ACCENT_YELLOW = pygame.Color(251, 191, 36)

WHITE = pygame.Color(248, 250, 252)
LIGHT_GRAY = pygame.Color(203, 213, 225)
MEDIUM_GRAY = pygame.Color(100, 116, 139)
ERROR_BOX_GRAY = pygame.Color(213, 213, 213)
BLACK = pygame.Color(2, 6, 23)


# Constants for the components
FOCUSED = ENABLED = True
NOT_FOCUSED = DISABLED = False

SIZE_MAP: dict[
    IsFocused, dict[ComponentType, dict[ComponentSize, tuple[Coordinate, Thickness]]]
] = {
    NOT_FOCUSED: {
        "button": {
            "sm": ((100, 30), 2),
            "md": ((140, 40), 2),
            "lg": ((200, 50), 3),
        },
        "input": {
            "sm": ((200, 30), 2),
            "md": ((320, 40), 2),
            "lg": ((420, 50), 3),
        },
        "spinner": {
            "sm": ((160, 30), 0),
            "md": ((260, 40), 0),
            "lg": ((360, 50), 0),
        },
    },
    FOCUSED: {
        "button": {
            "sm": ((104, 32), 3),
            "md": ((146, 42), 3),
            "lg": ((206, 52), 4),
        },
        "input": {
            "sm": ((200, 30), 3),
            "md": ((320, 40), 3),
            "lg": ((420, 50), 4),
        },
        "spinner": {
            "sm": ((160, 30), 0),
            "md": ((260, 40), 0),
            "lg": ((360, 50), 0),
        },
    },
}


VARIANT_MAP: dict[IsDisabled, dict[IsFocused, dict[ComponentVariant, dict[str, pygame.Color]]]] = {
    DISABLED: {
        NOT_FOCUSED: {
            "standard": {"bg": SLATE_GRAY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
            "primary": {"bg": SLATE_GRAY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
            "secondary": {"bg": SLATE_GRAY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
            "outline": {"bg": DARK_NAVY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
        },
        FOCUSED: {
            "standard": {"bg": SLATE_GRAY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
            "primary": {"bg": SLATE_GRAY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
            "secondary": {"bg": SLATE_GRAY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
            "outline": {"bg": DARK_NAVY, "text": MEDIUM_GRAY, "border": MEDIUM_GRAY},
        },
    },
    ENABLED: {
        NOT_FOCUSED: {
            "standard": {"bg": SLATE_GRAY, "text": WHITE, "border": MEDIUM_GRAY},
            "primary": {"bg": ACCENT_BLUE, "text": WHITE, "border": ACCENT_BLUE},
            "secondary": {"bg": ACCENT_GREEN, "text": WHITE, "border": ACCENT_GREEN},
            "outline": {"bg": DARK_NAVY, "text": LIGHT_GRAY, "border": ACCENT_BLUE},
        },
        FOCUSED: {
            "standard": {"bg": SLATE_GRAY, "text": WHITE, "border": ACCENT_BLUE},
            "primary": {"bg": ACCENT_GREEN, "text": WHITE, "border": ACCENT_GREEN},
            "secondary": {"bg": ACCENT_GREEN, "text": BLACK, "border": WHITE},
            "outline": {"bg": SLATE_GRAY, "text": WHITE, "border": ACCENT_BLUE},
        },
    },
}

FONT_MAP: dict[FontStyle, str] = {
    "normal": "freesansbold.ttf",
    "bold": "freesansbold.ttf",
    "italic": "freesansbold.ttf",
    "bold_italic": "freesansbold.ttf",
}

FONT_SIZE_MAP: dict[IsFocused, dict[FontSize, dict[ComponentSize, int]]] = {
    NOT_FOCUSED: {
        "standard": {"sm": 18, "md": 22, "lg": 28},
        "title": {"sm": 40, "md": 48, "lg": 60},
        "subtitle": {"sm": 26, "md": 32, "lg": 40},
        "text": {"sm": 14, "md": 18, "lg": 22},
    },
    FOCUSED: {
        "standard": {"sm": 18, "md": 22, "lg": 28},
        "title": {"sm": 40, "md": 48, "lg": 60},
        "subtitle": {"sm": 26, "md": 32, "lg": 40},
        "text": {"sm": 14, "md": 18, "lg": 22},
    },
}

AVATAR_SIZE = 160
