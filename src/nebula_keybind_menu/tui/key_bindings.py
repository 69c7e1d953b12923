"""
Key binding constants for the keybind menu.
Key names follow urwid's input naming.
"""

# Leaving
KEY_QUIT = 'esc'
KEY_INTERRUPT = 'ctrl c'

# Scrolling
KEY_SCROLL_UP = 'up'
KEY_SCROLL_DOWN = 'down'
KEY_PAGE_UP = 'page up'
KEY_PAGE_DOWN = 'page down'

# Not a key press; urwid reports terminal size changes through the input stream
KEY_WINDOW_RESIZE = 'window resize'
