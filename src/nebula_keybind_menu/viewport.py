"""
Scroll state for the keybind list viewport.
"""


class ScrollController:
    """
    Tracks the first visible line of the rendered keybind list.

    ``total_lines`` and ``viewport_height`` are refreshed by ``measure`` on
    every render, which clamps the offset to
    ``[0, max(0, total_lines - viewport_height)]`` before it is used.
    Scrolling between renders only floors at zero: the content behind the
    last measurement may have grown since (first load, larger window).
    """

    def __init__(self):
        self.offset = 0
        self.viewport_height = 0
        self.total_lines = 0

    @property
    def max_offset(self) -> int:
        return max(0, self.total_lines - self.viewport_height)

    @property
    def page_step(self) -> int:
        return max(1, self.viewport_height)

    def clamp(self) -> int:
        self.offset = min(max(0, self.offset), self.max_offset)
        return self.offset

    def measure(self, total_lines: int, viewport_height: int) -> int:
        """Record the latest render dimensions and return the clamped offset."""
        self.total_lines = max(0, total_lines)
        self.viewport_height = max(0, viewport_height)
        return self.clamp()

    def scroll_up(self, lines: int = 1) -> None:
        self.offset = max(0, self.offset - lines)

    def scroll_down(self, lines: int = 1) -> None:
        self.offset += lines

    def page_up(self) -> None:
        self.scroll_up(self.page_step)

    def page_down(self) -> None:
        self.scroll_down(self.page_step)

    def reset(self) -> None:
        self.offset = 0

    def visible(self, lines):
        """Slice of ``lines`` currently inside the viewport."""
        return lines[self.offset:self.offset + self.viewport_height]
