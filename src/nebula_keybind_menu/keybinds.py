"""
Keybind records and the built-in default set.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Keybind:
    """A key combination paired with a display name and description."""

    keys: str
    name: str
    description: str


DEFAULT_KEYBINDS = (
    Keybind("SUPER + SPACE", "Launcher", "Open app launcher"),
    Keybind("SUPER + B", "Web Browser", "Open default browser"),
    Keybind("SUPER + ENTER", "Terminal", "Open terminal"),
    Keybind("SUPER + Q", "Close Window", "Close focused window"),
)


def default_keybinds() -> List[Keybind]:
    """Return a fresh list of the built-in keybinds."""
    return list(DEFAULT_KEYBINDS)
