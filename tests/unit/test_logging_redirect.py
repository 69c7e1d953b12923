#!/usr/bin/env python3
"""
Unit tests for TUI logging setup.
"""

import logging
import sys

import pytest

from nebula_keybind_menu.tui.logging_redirect import (
    APP_LOGGER_NAME, LOG_ENV_VAR, TUILogCapture, configure_logging, tui_redirect_context
)


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    configure_logging({})


def test_without_log_file_only_null_handler():
    app_logger = configure_logging({})
    assert app_logger.name == APP_LOGGER_NAME
    assert len(app_logger.handlers) == 1
    assert isinstance(app_logger.handlers[0], logging.NullHandler)
    assert app_logger.propagate is False


def test_log_file_receives_component_logs(tmp_path):
    log_path = tmp_path / 'menu.log'
    configure_logging({LOG_ENV_VAR: str(log_path)})

    logging.getLogger('NebulaKeybindMenu.Config').debug("Ignoring /etc/x: no keybinds defined")
    for handler in logging.getLogger(APP_LOGGER_NAME).handlers:
        handler.flush()

    content = log_path.read_text()
    assert "NebulaKeybindMenu.Config - DEBUG - Ignoring /etc/x: no keybinds defined" in content


def test_configure_is_idempotent(tmp_path):
    configure_logging({LOG_ENV_VAR: str(tmp_path / 'a.log')})
    app_logger = configure_logging({LOG_ENV_VAR: str(tmp_path / 'b.log')})
    assert len(app_logger.handlers) == 1
    assert app_logger.handlers[0].baseFilename.endswith('b.log')


class TestTUILogCapture:

    def setup_method(self):
        self.root = logging.getLogger('test.tui_capture.root')
        self.console = logging.StreamHandler(sys.stderr)
        self.other = logging.NullHandler()
        self.root.addHandler(self.console)
        self.root.addHandler(self.other)

    def teardown_method(self):
        for handler in self.root.handlers[:]:
            self.root.removeHandler(handler)

    def test_detaches_console_handlers_only(self):
        capture = TUILogCapture(self.root)
        capture.start_capture()
        assert self.console not in self.root.handlers
        assert self.other in self.root.handlers

        capture.stop_capture()
        assert self.console in self.root.handlers

    def test_start_twice_is_harmless(self):
        capture = TUILogCapture(self.root)
        capture.start_capture()
        capture.start_capture()
        capture.stop_capture()
        assert self.root.handlers.count(self.console) == 1

    def test_context_manager_restores_on_error(self):
        with pytest.raises(ValueError):
            with tui_redirect_context(self.root):
                assert self.console not in self.root.handlers
                raise ValueError("boom")
        assert self.console in self.root.handlers
