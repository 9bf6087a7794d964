from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, Literal, TypeAlias

Coordinate: TypeAlias = tuple[int, int]
Thickness: TypeAlias = int
IsFocused: TypeAlias = bool
IsDisabled: TypeAlias = bool
FontPath: TypeAlias = Path
ComponentType: TypeAlias = Literal["button", "input", "spinner", "textarea"]
ComponentSize: TypeAlias = Literal["sm", "md", "lg"]
ComponentVariant: TypeAlias = Literal["standard", "primary", "secondary", "outline"]
FontStyle: TypeAlias = Literal["normal", "bold", "italic", "bold_italic"]
FontSize: TypeAlias = Literal["standard", "title", "subtitle", "text"]
LookupFunction: TypeAlias = Callable[[str], Awaitable[Any]]

__all__ = [
    "ComponentSize",
    "ComponentType",
    "ComponentVariant",
    "Coordinate",
    "FontPath",
    "FontSize",
    "FontStyle",
    "IsDisabled",
    "IsFocused",
    "LookupFunction",
    "Thickness",
]
