"""Turns a RenderPlan into prompt_toolkit formatted text for each region."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

EMPTY_HINT = "No tasks yet. Press n to add one."
CURSOR_GLYPH = " "


def _row_style(tui, done: bool, selected: bool) -> Tuple[str, str]:
    """Return (marker style, label style) for a task row."""
    if selected:
        if getattr(tui, "mono_select", False):
            return "class:selected", "class:selected"
        style = "class:selected.done" if done else "class:selected.todo"
        return style, style
    return ("class:icon.check" if done else "class:icon.todo"), "class:text"


def build_task_list_text(tui) -> FormattedText:
    plan = tui.plan
    if not plan.rows:
        return FormattedText([("class:text.dim", EMPTY_HINT)])

    width = tui.list_content_width()
    parts: List[Tuple[str, str]] = []
    for idx, row in enumerate(plan.rows):
        selected = idx == plan.selected
        marker_style, label_style = _row_style(tui, row.done, selected)
        label_width = max(0, width - tui._display_width(row.marker) - 1)
        label = tui._trim_display(row.label, label_width)
        if selected:
            label = tui._pad_display(label, label_width)
        parts.append((marker_style, row.marker + " "))
        parts.append((label_style, label))
        if idx < len(plan.rows) - 1:
            parts.append(("", "\n"))
    return FormattedText(parts)


def build_details_text(tui) -> FormattedText:
    plan = tui.plan
    if plan.details is None:
        return FormattedText([])
    return FormattedText([("class:details", plan.details.text)])


def build_footer_text(tui) -> FormattedText:
    return FormattedText([("class:text.dim", tui.plan.help_line)])


def build_popup_text(tui) -> FormattedText:
    overlay = tui.plan.overlay
    if overlay is None:
        return FormattedText([])
    return FormattedText([
        ("class:popup", overlay.content),
        ("class:popup.cursor", CURSOR_GLYPH),
    ])


def popup_title(tui) -> str:
    overlay = tui.plan.overlay
    return overlay.title if overlay is not None else ""


__all__ = [
    "EMPTY_HINT",
    "build_task_list_text",
    "build_details_text",
    "build_footer_text",
    "build_popup_text",
    "popup_title",
]
