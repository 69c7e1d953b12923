"""
TUI components for Nebula Keybind Menu.

- widgets/: urwid widgets for the title bar, search input and keybind list
- key_bindings: key names the input dispatcher reacts to
- logging_redirect: keeps log output off the terminal while the UI owns it
"""
