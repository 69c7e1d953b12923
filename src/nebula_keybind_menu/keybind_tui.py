"""
Keybind menu application: input dispatch and the render loop.

The loop is single-threaded: draw a frame, load the
keybinds once (after the first frame so something is on screen before any
file I/O), then block until urwid reports input and dispatch it.
"""

import logging
from typing import Callable, List, Optional

import urwid
from urwid.display import raw

from .app_state import AppState
from .config_loader import load_keybinds
from .error_handler_util import ErrorHandlerUtil, TerminalError
from .keybinds import Keybind
from .profiling import StartupProfiler
from .tui.key_bindings import (
    KEY_QUIT, KEY_INTERRUPT, KEY_SCROLL_UP, KEY_SCROLL_DOWN,
    KEY_PAGE_UP, KEY_PAGE_DOWN, KEY_WINDOW_RESIZE
)
from .tui.widgets import KeybindListView, SearchEdit, TitleBar

error_context = ErrorHandlerUtil.create_error_context("TUI")
logger = error_context.logger

PLACEHOLDER_TEXT = "Type to search keybinds"

# Fallback editor width for keys dispatched before the first frame
DEFAULT_INPUT_WIDTH = 80

PALETTE = [
    ('body', 'default', 'default'),
    ('title', 'light green,bold', 'default'),
    ('hint', 'dark gray', 'default'),

    # Search box
    ('input', 'white', 'default'),
    ('placeholder_text', 'dark gray', 'default'),
    ('search_border', 'dark gray', 'default'),

    # Keybind list
    ('key', 'white,bold', 'default'),
    ('name', 'default,bold', 'default'),
    ('description', 'dark gray', 'default'),
    ('message', 'white', 'default'),
]


class KeybindMenuApp:
    """Owns the application state, the widget tree and the terminal screen."""

    def __init__(self, screen=None, keybind_loader: Callable[[], List[Keybind]] = load_keybinds,
                 profiler: Optional[StartupProfiler] = None):
        self.screen = screen
        self.keybind_loader = keybind_loader
        self.profiler = profiler or StartupProfiler()
        self.state = AppState()
        self.screen_size = None
        self.setup_ui()

    def setup_ui(self):
        self.search_input = SearchEdit(caption=" ", watermark_text=PLACEHOLDER_TEXT)
        self.search_box = urwid.AttrMap(
            urwid.LineBox(urwid.AttrMap(self.search_input, 'input')),
            'search_border'
        )
        self.title_bar = TitleBar()
        self.list_view = KeybindListView(self.state, lambda: self.query)

        pile = urwid.Pile([
            ('pack', urwid.Divider()),
            ('pack', self.title_bar),
            ('pack', urwid.Divider()),
            ('pack', self.search_box),
            ('pack', urwid.Divider()),
            ('weight', 1, self.list_view),
            ('pack', urwid.Divider()),
        ])
        self.main_layout = urwid.AttrMap(urwid.Padding(pile, left=1, right=1), 'body')

    @property
    def query(self) -> str:
        return self.search_input.edit_text

    # Input dispatch

    def handle_input(self, key):
        """Apply one input event to the state. Returns True if it was consumed."""
        if not isinstance(key, str):
            # Mouse events arrive as tuples
            return False

        scroll = self.state.scroll
        if key == KEY_QUIT:
            self.state.request_quit()
        elif key == KEY_SCROLL_UP:
            scroll.scroll_up()
        elif key == KEY_SCROLL_DOWN:
            scroll.scroll_down()
        elif key == KEY_PAGE_UP:
            scroll.page_up()
        elif key == KEY_PAGE_DOWN:
            scroll.page_down()
        elif key == KEY_INTERRUPT:
            self.state.request_quit()
        elif key == KEY_WINDOW_RESIZE:
            self.screen_size = None
            return False
        else:
            self.search_input.keypress((self._input_width(),), key)
            scroll.reset()
        return True

    def handle_keys(self, keys):
        for key in keys:
            if self.state.should_quit:
                break
            logger.debug(f"Input: {key!r}")
            self.handle_input(key)

    def _input_width(self) -> int:
        if self.screen_size:
            return max(1, self.screen_size[0])
        return DEFAULT_INPUT_WIDTH

    # Rendering

    def render(self, size):
        """Render the whole UI for a ``(cols, rows)`` screen."""
        return self.main_layout.render(size, focus=True)

    def draw_screen(self):
        if not self.screen_size:
            self.screen_size = self.screen.get_cols_rows()
        canvas = self.render(self.screen_size)
        self.screen.draw_screen(self.screen_size, canvas)

    def ensure_loaded(self):
        if self.state.loaded:
            return
        keybinds = self.keybind_loader()
        self.state.set_keybinds(keybinds)
        logger.info(f"Showing {len(keybinds)} keybinds")

    # Terminal lifecycle

    def start_terminal(self):
        if self.screen is None:
            self.screen = raw.Screen()
        started = False
        try:
            self.screen.register_palette(PALETTE)
            self.screen.start()
            started = True
            # Deliver Ctrl+C as a key instead of SIGINT; stop() restores the tty settings
            self.screen.tty_signal_keys(intr='undefined')
        except Exception as e:
            if started:
                self.screen.stop()
            error_context.log_and_raise(
                f"Could not initialize terminal: {e}",
                exception_class=TerminalError,
                cause=e
            )

    def stop_terminal(self):
        try:
            self.screen.stop()
        except Exception as e:
            error_context.log_and_raise(
                f"Could not restore terminal: {e}",
                exception_class=TerminalError,
                cause=e
            )

    def run_loop(self):
        while not self.state.should_quit:
            self.draw_screen()
            self.profiler.first_frame()
            self.ensure_loaded()
            self.handle_keys(self.screen.get_input())

    def run(self):
        self.start_terminal()
        self.profiler.mark("terminal ready")
        try:
            self.profiler.mark("app ready")
            self.run_loop()
        finally:
            self.stop_terminal()
        logger.info("Keybind menu closed")
