"""
Width-aware layout of the keybind list.

Each rendered line is a list of urwid markup segments ``(attribute, text)``.
Lines are never wrapped or truncated here; anything wider than the viewport
is clipped when drawn.
"""

from typing import List, Sequence, Tuple

from .keybinds import Keybind

Segment = Tuple[str, str]
Line = List[Segment]

LOADING_MESSAGE = "Loading keybinds..."
NO_MATCHES_MESSAGE = "No matches. Try a different query."

# Dashes need at least one cell on each side plus the two separating spaces
DESCRIPTION_PADDING = 4


def line_text(line: Line) -> str:
    """Plain text of a rendered line."""
    return ''.join(text for _, text in line)


def message_line(message: str) -> Line:
    return [('message', message)]


def make_key_line(keybind: Keybind, width: int) -> Line:
    """Keys flush left, name flush right, at least one space between them."""
    spacer_len = max(1, width - len(keybind.keys) - len(keybind.name))
    return [
        ('key', keybind.keys),
        ('body', ' ' * spacer_len),
        ('name', keybind.name),
    ]


def make_description_line(description: str, width: int) -> Line:
    """
    Center the trimmed description between runs of dashes so the line is
    exactly ``width`` cells. The odd leftover dash goes on the right. When the
    description can't fit with its padding, it is returned as-is.
    """
    trimmed = description.strip()
    desc_len = len(trimmed)

    if width == 0 or width < desc_len + DESCRIPTION_PADDING:
        return [('description', trimmed)]

    dash_total = width - desc_len - 2
    left = dash_total // 2
    right = dash_total - left
    return [('description', f"{'-' * left} {trimmed} {'-' * right}")]


def layout_keybinds(keybinds: Sequence[Keybind], width: int, loaded: bool = True) -> List[Line]:
    """Build the full list of lines for the filtered keybinds."""
    if not loaded:
        return [message_line(LOADING_MESSAGE)]

    if not keybinds:
        return [message_line(NO_MATCHES_MESSAGE)]

    lines = []
    for keybind in keybinds:
        lines.append(make_key_line(keybind, width))
        if keybind.description:
            lines.append(make_description_line(keybind.description, width))
        lines.append([('body', ' ')])
    return lines
