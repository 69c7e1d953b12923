"""
Live query filtering over the keybind store.
"""

from typing import Iterable, List

from .keybinds import Keybind


def matches(keybind: Keybind, folded_query: str) -> bool:
    return (folded_query in keybind.name.casefold()
            or folded_query in keybind.description.casefold())


def filter_keybinds(keybinds: Iterable[Keybind], query: str) -> List[Keybind]:
    """
    Return the keybinds whose name or description contains ``query``,
    ignoring case, in their original order.

    Recomputed from scratch on every frame; the store holds tens of entries.
    """
    folded_query = query.casefold()
    if not folded_query:
        return list(keybinds)
    return [keybind for keybind in keybinds if matches(keybind, folded_query)]
