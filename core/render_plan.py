"""Pure derivation of what the screen should show for a given AppState."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .app_state import AppState
from .interaction import Popup

MAIN_TITLE = "Tasks"
DETAILS_TITLE = "Details"
DONE_MARKER = "✓"
TODO_MARKER = "○"
HELP_LINE = "q: Quit | n: New task | j: Next | k: Previous | d: Delete | Enter: Toggle done"

OVERLAY_TITLES = {
    Popup.NEW_TASK_NAME: "Add a new task",
    Popup.NEW_TASK_DETAILS: "Add details (blank for none)",
}


@dataclass(frozen=True)
class TaskRow:
    marker: str
    label: str
    done: bool

    @property
    def text(self) -> str:
        return f"{self.marker} {self.label}"


@dataclass(frozen=True)
class DetailsPane:
    text: str


@dataclass(frozen=True)
class Overlay:
    popup: Popup
    title: str
    content: str


@dataclass(frozen=True)
class RenderPlan:
    rows: Tuple[TaskRow, ...]
    selected: Optional[int]
    help_line: str = HELP_LINE
    title: str = MAIN_TITLE
    details: Optional[DetailsPane] = None
    overlay: Optional[Overlay] = None


def _overlay_for(state: AppState) -> Optional[Overlay]:
    interaction = state.interaction
    popup = interaction.popup
    if popup is Popup.NONE:
        return None
    if popup is Popup.NEW_TASK_NAME:
        content = interaction.name_buffer
    else:
        content = interaction.details_buffer
    return Overlay(popup=popup, title=OVERLAY_TITLES[popup], content=content)


def derive_render_plan(state: AppState) -> RenderPlan:
    rows = tuple(
        TaskRow(marker=DONE_MARKER if task.done else TODO_MARKER, label=task.label, done=task.done)
        for task in state.tasks
    )
    selected_task = state.tasks.selected_item()
    details = None
    if selected_task is not None and selected_task.has_details:
        details = DetailsPane(text=selected_task.details)
    return RenderPlan(
        rows=rows,
        selected=state.tasks.selected if selected_task is not None else None,
        details=details,
        overlay=_overlay_for(state),
    )


__all__ = [
    "MAIN_TITLE",
    "DETAILS_TITLE",
    "DONE_MARKER",
    "TODO_MARKER",
    "HELP_LINE",
    "OVERLAY_TITLES",
    "TaskRow",
    "DetailsPane",
    "Overlay",
    "RenderPlan",
    "derive_render_plan",
]
