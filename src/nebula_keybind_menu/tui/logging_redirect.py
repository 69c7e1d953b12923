"""
Logging setup for TUI mode.

While the screen is active nothing may write to the terminal, so application
logs only go to a file named by NEBULA_KEYBIND_MENU_LOG, and console handlers
on the root logger are detached for the duration of the UI.
"""

import contextlib
import logging
import os
import sys
from typing import List, Mapping, Optional

LOG_ENV_VAR = 'NEBULA_KEYBIND_MENU_LOG'
APP_LOGGER_NAME = 'NebulaKeybindMenu'

LOG_FORMAT = '%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """
    Configure the application logger. Idempotent: previous handlers
    installed here are replaced.
    """
    environ = os.environ if environ is None else environ
    app_logger = logging.getLogger(APP_LOGGER_NAME)

    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
        handler.close()

    log_path = environ.get(LOG_ENV_VAR)
    if log_path:
        handler = logging.FileHandler(log_path, mode='a')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        app_logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()

    app_logger.addHandler(handler)
    app_logger.propagate = False
    return app_logger


def _is_console_handler(handler: logging.Handler) -> bool:
    return (isinstance(handler, logging.StreamHandler)
            and not isinstance(handler, logging.FileHandler)
            and getattr(handler, 'stream', None) in (sys.stdout, sys.stderr,
                                                     sys.__stdout__, sys.__stderr__))


class TUILogCapture:
    """Detaches terminal-bound handlers from the root logger during TUI mode."""

    def __init__(self, root: Optional[logging.Logger] = None):
        self.root = root or logging.getLogger()
        self.detached: List[logging.Handler] = []
        self.active = False

    def start_capture(self):
        if self.active:
            return
        self.active = True

        for handler in self.root.handlers[:]:
            if _is_console_handler(handler):
                self.root.removeHandler(handler)
                self.detached.append(handler)

    def stop_capture(self):
        if not self.active:
            return
        self.active = False

        for handler in self.detached:
            self.root.addHandler(handler)
        self.detached.clear()


@contextlib.contextmanager
def tui_redirect_context(root: Optional[logging.Logger] = None):
    """Context manager for automatic TUI log redirection."""
    capture = TUILogCapture(root)
    capture.start_capture()
    try:
        yield capture
    finally:
        capture.stop_capture()
