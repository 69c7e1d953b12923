"""
Mutable application state owned by the render loop.
"""

from dataclasses import dataclass, field
from typing import List

from .keybinds import Keybind
from .viewport import ScrollController


@dataclass
class AppState:
    """
    Everything the loop mutates between frames.

    The query text and its cursor live in the search input widget.
    """

    should_quit: bool = False
    keybinds: List[Keybind] = field(default_factory=list)
    loaded: bool = False
    scroll: ScrollController = field(default_factory=ScrollController)

    def set_keybinds(self, keybinds: List[Keybind]) -> None:
        self.keybinds = list(keybinds)
        self.loaded = True

    def request_quit(self) -> None:
        self.should_quit = True
