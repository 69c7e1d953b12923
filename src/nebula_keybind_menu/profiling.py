"""
Startup timing output, enabled by the NEBULA_KEYBIND_MENU_PROFILE variable.
"""

import os
import sys
import time
from typing import Callable, Mapping, Optional, TextIO

PROFILE_ENV_VAR = 'NEBULA_KEYBIND_MENU_PROFILE'


def format_elapsed(seconds: float) -> str:
    """Format a duration with two decimals in the largest fitting unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


class StartupProfiler:
    """Writes ``startup: <stage> in <elapsed>`` lines to stderr when enabled."""

    def __init__(self, enabled: bool = False, stream: Optional[TextIO] = None,
                 clock: Callable[[], float] = time.perf_counter):
        self.enabled = enabled
        self.stream = stream
        self.clock = clock
        self.start = clock()
        self.first_frame_logged = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **kwargs) -> 'StartupProfiler':
        environ = os.environ if environ is None else environ
        return cls(enabled=PROFILE_ENV_VAR in environ, **kwargs)

    def mark(self, stage: str) -> None:
        if not self.enabled:
            return
        stream = self.stream or sys.stderr
        stream.write(f"startup: {stage} in {format_elapsed(self.clock() - self.start)}\n")
        stream.flush()

    def first_frame(self) -> None:
        """Report the first drawn frame; later calls do nothing."""
        if self.first_frame_logged:
            return
        self.first_frame_logged = True
        self.mark("first frame")
