#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "frame.border": "#4b525a",
        "frame.label": "#ffb347 bold",
        "selected": "bg:#3b3b3b #d7dfe6 bold",  # mono-select
        "selected.done": "bg:#3b3b3b #9ad974 bold",
        "selected.todo": "bg:#3b3b3b #e8eaec bold",
        "icon.check": "#9ad974 bold",
        "icon.todo": "#97a0a9",
        "details": "#d7dfe6",
        "popup": "bg:#262a2e #d7dfe6",
        "popup.cursor": "reverse",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "frame.border": "#5a6169",
        "frame.label": "#ffb347 bold",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.done": "bg:#3d4047 #b8f171 bold",
        "selected.todo": "bg:#3d4047 #f0c674 bold",
        "icon.check": "#b8f171 bold",
        "icon.todo": "#a7b0ba",
        "details": "#e8eaec",
        "popup": "bg:#1f2226 #e8eaec",
        "popup.cursor": "reverse",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)


__all__ = ["THEMES", "DEFAULT_THEME", "get_theme_palette", "build_style"]
