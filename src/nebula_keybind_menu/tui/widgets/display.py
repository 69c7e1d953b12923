"""
Display widgets: the title row and the scrolling keybind list.
"""

import urwid

from ...layout_engine import layout_keybinds
from ...search_filter import filter_keybinds

TITLE_TEXT = "  Keybinds"
CLOSE_HINT = "Esc to close"


class TitleBar(urwid.WidgetWrap):
    """Title on the left, close hint on the right."""

    def __init__(self, title=TITLE_TEXT, hint=CLOSE_HINT):
        columns = urwid.Columns([
            ('weight', 1, urwid.Text(('title', title), wrap='clip')),
            ('fixed', len(hint), urwid.Text(('hint', hint), align='right')),
        ])
        super().__init__(columns)


class KeybindListView(urwid.Widget):
    """
    Box widget drawing the filtered keybind list at the current scroll offset.

    Content depends on application state rather than on widget attributes,
    so render results are never cached.
    """

    _sizing = frozenset([urwid.BOX])
    _selectable = False
    no_cache = ["render"]

    def __init__(self, state, query_source):
        super().__init__()
        self.state = state
        self.query_source = query_source

    def build_lines(self, width):
        filtered = filter_keybinds(self.state.keybinds, self.query_source())
        return layout_keybinds(filtered, width, loaded=self.state.loaded)

    @staticmethod
    def _markup(line):
        # Drop empty runs; a blank line still renders one cell
        return [segment for segment in line if segment[1]] or ' '

    def render(self, size, focus=False):
        maxcol, maxrow = size
        lines = self.build_lines(maxcol)
        self.state.scroll.measure(len(lines), maxrow)
        visible = self.state.scroll.visible(lines)

        canvases = [
            (urwid.Text(self._markup(line), wrap='clip').render((maxcol,)), None, False)
            for line in visible
        ]
        if len(visible) < maxrow:
            canvases.append((urwid.SolidCanvas(' ', maxcol, maxrow - len(visible)), None, False))
        if not canvases:
            return urwid.SolidCanvas(' ', maxcol, maxrow)
        return urwid.CanvasCombine(canvases)
