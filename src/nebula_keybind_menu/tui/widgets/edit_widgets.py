"""
Search input widget.
"""

import urwid


class SearchEdit(urwid.Edit):
    """Single-line query editor that shows placeholder text while empty."""

    def __init__(self, caption="", edit_text="", watermark_text="", **kwargs):
        super().__init__(caption, edit_text, **kwargs)
        self.watermark_text = watermark_text

    @property
    def showing_watermark(self):
        return not self.edit_text and bool(self.watermark_text)

    def render(self, size, focus=False):
        if self.showing_watermark:
            full_watermark = f"{self.caption}{self.watermark_text}"
            watermark_widget = urwid.Text([('placeholder_text', full_watermark)], align='left', wrap='clip')
            return watermark_widget.render(size, focus)
        return super().render(size, focus)
