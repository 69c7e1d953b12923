#!/usr/bin/env python3
"""
Unit tests for the keybind list layout.
"""

import pytest

from nebula_keybind_menu.keybinds import Keybind
from nebula_keybind_menu.layout_engine import (
    layout_keybinds, make_description_line, make_key_line, line_text,
    LOADING_MESSAGE, NO_MATCHES_MESSAGE
)


class TestKeyLine:

    def test_fills_width_exactly(self):
        keybind = Keybind("SUPER + B", "Web Browser", "")
        text = line_text(make_key_line(keybind, 30))
        assert len(text) == 30
        assert text.startswith("SUPER + B ")
        assert text.endswith(" Web Browser")

    def test_narrow_width_keeps_one_space(self):
        keybind = Keybind("SUPER + B", "Web Browser", "")
        assert line_text(make_key_line(keybind, 10)) == "SUPER + B Web Browser"

    def test_exact_fit_keeps_one_space(self):
        keybind = Keybind("AB", "CD", "")
        assert line_text(make_key_line(keybind, 4)) == "AB CD"

    def test_segments_carry_attributes(self):
        keybind = Keybind("SUPER + Q", "Close Window", "")
        attrs = [attr for attr, _ in make_key_line(keybind, 40)]
        assert attrs == ['key', 'body', 'name']


class TestDescriptionLine:

    def test_dash_padded_line_fills_width(self):
        text = line_text(make_description_line("Open terminal", 40))
        assert len(text) == 40
        assert text == "-" * 12 + " Open terminal " + "-" * 13

    @pytest.mark.parametrize("width", range(15, 60))
    def test_length_equals_width_whenever_it_fits(self, width):
        description = "Open app launcher"
        text = line_text(make_description_line(description, width))
        if width >= len(description) + 4:
            assert len(text) == width
            left, _, right = text.partition(f" {description} ")
            assert set(left) == {"-"} and set(right) == {"-"}
            assert len(right) - len(left) in (0, 1)
        else:
            assert text == description

    def test_minimum_fit_has_one_dash_each_side(self):
        assert line_text(make_description_line("desc", 8)) == "- desc -"

    def test_too_narrow_returns_trimmed_description(self):
        assert line_text(make_description_line("  Close focused window  ", 10)) == "Close focused window"

    def test_zero_width(self):
        assert line_text(make_description_line("Open", 0)) == "Open"

    def test_padding_uses_trimmed_length(self):
        text = line_text(make_description_line("   desc   ", 12))
        assert text == "--- desc ---"


class TestLayoutKeybinds:

    def test_loading_placeholder(self):
        lines = layout_keybinds([Keybind("a", "b", "c")], 40, loaded=False)
        assert [line_text(line) for line in lines] == [LOADING_MESSAGE]

    def test_no_matches_placeholder(self):
        lines = layout_keybinds([], 40)
        assert [line_text(line) for line in lines] == [NO_MATCHES_MESSAGE]

    def test_entry_with_description_takes_three_lines(self):
        lines = layout_keybinds([Keybind("SUPER + ENTER", "Terminal", "Open terminal")], 30)
        texts = [line_text(line) for line in lines]
        assert len(texts) == 3
        assert texts[0] == "SUPER + ENTER" + " " * 9 + "Terminal"
        assert texts[1].strip("- ") == "Open terminal"
        assert texts[2].strip() == ""

    def test_entry_without_description_takes_two_lines(self):
        lines = layout_keybinds([Keybind("SUPER + L", "Lock", "")], 30)
        assert len(lines) == 2

    def test_entries_keep_their_order(self):
        keybinds = [Keybind(f"K{i}", f"N{i}", "") for i in range(4)]
        lines = layout_keybinds(keybinds, 20)
        names = [line_text(line).split()[-1] for line in lines[::2]]
        assert names == ["N0", "N1", "N2", "N3"]
