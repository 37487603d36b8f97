#!/usr/bin/env python3
"""Unit tests for tui_display module."""

from interface.tui_display import DisplayMixin


def test_display_width_counts_wide_chars():
    assert DisplayMixin._display_width("abc") == 3
    assert DisplayMixin._display_width("日本") == 4


def test_trim_display_keeps_short_text():
    assert DisplayMixin._trim_display("abc", 5) == "abc"


def test_trim_display_marks_cut():
    assert DisplayMixin._trim_display("abcdef", 4) == "abc…"
    assert DisplayMixin._trim_display("abc", 0) == ""


def test_trim_display_never_splits_wide_char():
    trimmed = DisplayMixin._trim_display("日本語", 4)
    assert DisplayMixin._display_width(trimmed) <= 4


def test_pad_display_fills_to_width():
    assert DisplayMixin._pad_display("ab", 5) == "ab   "
    assert DisplayMixin._display_width(DisplayMixin._pad_display("日本語テキスト", 6)) == 6
