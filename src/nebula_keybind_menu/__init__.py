"""
Nebula Keybind Menu: a searchable terminal viewer for desktop keybindings.
"""

__version__ = "1.0.0"

APP_NAME = "nebula-keybind-menu"
