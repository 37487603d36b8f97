"""Rectangle math for laying out the main panel, footer and popup."""

from dataclasses import dataclass
from typing import Tuple

FOOTER_HEIGHT = 3


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


def base_layout(area: Rect, footer_height: int = FOOTER_HEIGHT) -> Tuple[Rect, Rect]:
    """Split ``area`` into the main panel and a footer strip at the bottom."""
    main_height = max(0, area.height - footer_height)
    main = Rect(area.x, area.y, area.width, main_height)
    footer = Rect(area.x, area.y + main_height, area.width, min(footer_height, area.height))
    return main, footer


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Rect taking ``percent_x`` × ``percent_y`` of ``area``, centered inside it."""
    percent_x = max(0, min(100, percent_x))
    percent_y = max(0, min(100, percent_y))
    width = area.width * percent_x // 100
    height = area.height * percent_y // 100
    x = area.x + (area.width - width) // 2
    y = area.y + (area.height - height) // 2
    return Rect(x, y, width, height)


__all__ = ["FOOTER_HEIGHT", "Rect", "base_layout", "centered_rect"]
