"""
Reusable UI widgets for the keybind menu.
"""

from .edit_widgets import SearchEdit
from .display import KeybindListView, TitleBar

__all__ = [
    'SearchEdit',
    'KeybindListView',
    'TitleBar'
]
