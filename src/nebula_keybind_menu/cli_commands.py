"""Entry point for the nebula-keybind-menu command."""

import logging

from .keybind_tui import KeybindMenuApp
from .profiling import StartupProfiler
from .tui.logging_redirect import configure_logging, tui_redirect_context

logger = logging.getLogger('NebulaKeybindMenu')


def main():
    """Main entry point for the application"""
    profiler = StartupProfiler.from_env()
    configure_logging()
    logger.debug("Starting keybind menu")

    with tui_redirect_context():
        KeybindMenuApp(profiler=profiler).run()
