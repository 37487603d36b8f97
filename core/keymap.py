"""Key vocabulary and its translation into abstract commands."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from .interaction import InteractionState

KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"

SPECIAL_KEYS = (KEY_ENTER, KEY_ESCAPE, KEY_BACKSPACE)


@dataclass(frozen=True)
class KeyEvent:
    """One key press: a single character or one of ``SPECIAL_KEYS``."""

    key: str


class Action(Enum):
    QUIT = "quit"
    START_NEW_TASK = "start_new_task"
    MOVE_NEXT = "move_next"
    MOVE_PREVIOUS = "move_previous"
    DELETE_SELECTED = "delete_selected"
    TOGGLE_DONE = "toggle_done"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    BACKSPACE = "backspace"


@dataclass(frozen=True)
class AppendChar:
    char: str


Command = Union[Action, AppendChar]

NORMAL_KEYS: Dict[str, Action] = {
    "q": Action.QUIT,
    "n": Action.START_NEW_TASK,
    "j": Action.MOVE_NEXT,
    "k": Action.MOVE_PREVIOUS,
    "d": Action.DELETE_SELECTED,
    KEY_ENTER: Action.TOGGLE_DONE,
}

EDITING_KEYS: Dict[str, Action] = {
    KEY_ENTER: Action.CONFIRM,
    KEY_ESCAPE: Action.CANCEL,
    KEY_BACKSPACE: Action.BACKSPACE,
}


def is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def interpret(event: KeyEvent, interaction: InteractionState) -> Optional[Command]:
    """Resolve a key press against the current mode. None means the key is ignored."""
    key = event.key
    if not interaction.editing:
        return NORMAL_KEYS.get(key)
    action = EDITING_KEYS.get(key)
    if action is not None:
        return action
    if is_printable(key):
        return AppendChar(key)
    return None


__all__ = [
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_BACKSPACE",
    "SPECIAL_KEYS",
    "KeyEvent",
    "Action",
    "AppendChar",
    "Command",
    "NORMAL_KEYS",
    "EDITING_KEYS",
    "is_printable",
    "interpret",
]
