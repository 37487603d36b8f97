"""Modal input state: Normal mode or one of the two new-task wizard phases.

The wizard is modelled as a closed set of phase objects. Each phase decides
what append/backspace/confirm/cancel mean for itself and returns the next
phase, so mode and popup can never disagree and cancel always lands on
``NormalPhase`` with nothing left in the drafts.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .task import Task


class Mode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


class Popup(Enum):
    NONE = "none"
    NEW_TASK_NAME = "new_task_name"
    NEW_TASK_DETAILS = "new_task_details"


@dataclass(frozen=True)
class NormalPhase:
    mode = Mode.NORMAL
    popup = Popup.NONE

    @property
    def name_buffer(self) -> str:
        return ""

    @property
    def details_buffer(self) -> str:
        return ""


@dataclass(frozen=True)
class NameEntryPhase:
    name: str = ""

    mode = Mode.EDITING
    popup = Popup.NEW_TASK_NAME

    @property
    def name_buffer(self) -> str:
        return self.name

    @property
    def details_buffer(self) -> str:
        return ""

    def append(self, ch: str) -> "NameEntryPhase":
        return replace(self, name=self.name + ch)

    def backspace(self) -> "NameEntryPhase":
        return replace(self, name=self.name[:-1])

    def confirm(self) -> Tuple["Phase", Optional[Task]]:
        if not self.name:
            return self, None
        return DetailsEntryPhase(name=self.name), None


@dataclass(frozen=True)
class DetailsEntryPhase:
    name: str
    details: str = ""

    mode = Mode.EDITING
    popup = Popup.NEW_TASK_DETAILS

    @property
    def name_buffer(self) -> str:
        return self.name

    @property
    def details_buffer(self) -> str:
        return self.details

    def append(self, ch: str) -> "DetailsEntryPhase":
        return replace(self, details=self.details + ch)

    def backspace(self) -> "DetailsEntryPhase":
        return replace(self, details=self.details[:-1])

    def confirm(self) -> Tuple["Phase", Optional[Task]]:
        return NormalPhase(), Task(label=self.name, details=self.details or None)


Phase = Union[NormalPhase, NameEntryPhase, DetailsEntryPhase]
EditingPhase = Union[NameEntryPhase, DetailsEntryPhase]


class InteractionState:
    """Holds the current wizard phase; the only mutable part is which phase is active."""

    def __init__(self, phase: Optional[Phase] = None):
        self.phase: Phase = phase if phase is not None else NormalPhase()

    def __repr__(self) -> str:
        return f"InteractionState({self.phase!r})"

    @property
    def mode(self) -> Mode:
        return self.phase.mode

    @property
    def popup(self) -> Popup:
        return self.phase.popup

    @property
    def editing(self) -> bool:
        return self.phase.mode is Mode.EDITING

    @property
    def name_buffer(self) -> str:
        return self.phase.name_buffer

    @property
    def details_buffer(self) -> str:
        return self.phase.details_buffer

    def start_new_task(self) -> None:
        if isinstance(self.phase, NormalPhase):
            self.phase = NameEntryPhase()

    def append(self, ch: str) -> None:
        if self.editing:
            self.phase = self.phase.append(ch)

    def backspace(self) -> None:
        if self.editing:
            self.phase = self.phase.backspace()

    def cancel(self) -> None:
        self.phase = NormalPhase()

    def confirm(self) -> Optional[Task]:
        """Advance the wizard; returns the finished Task when the last phase commits."""
        if not self.editing:
            return None
        self.phase, task = self.phase.confirm()
        return task


__all__ = [
    "Mode",
    "Popup",
    "NormalPhase",
    "NameEntryPhase",
    "DetailsEntryPhase",
    "Phase",
    "EditingPhase",
    "InteractionState",
]
