"""Application state and the single entry point that mutates it."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .interaction import InteractionState
from .keymap import Action, AppendChar, Command, KeyEvent, interpret
from .selectable_list import TaskList

logger = logging.getLogger("todo_tui.state")


class Outcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass
class AppState:
    tasks: TaskList = field(default_factory=TaskList)
    interaction: InteractionState = field(default_factory=InteractionState)


def _apply_normal(state: AppState, command: Command) -> Outcome:
    tasks = state.tasks
    if command is Action.QUIT:
        return Outcome.QUIT
    if command is Action.START_NEW_TASK:
        state.interaction.start_new_task()
    elif command is Action.MOVE_NEXT:
        tasks.next()
    elif command is Action.MOVE_PREVIOUS:
        tasks.previous()
    elif command is Action.DELETE_SELECTED:
        removed = tasks.remove_selected()
        if removed is not None:
            logger.debug("deleted %r", removed.label)
    elif command is Action.TOGGLE_DONE:
        tasks.toggle_done_selected()
    return Outcome.CONTINUE


def _apply_editing(state: AppState, command: Command) -> Outcome:
    interaction = state.interaction
    if isinstance(command, AppendChar):
        interaction.append(command.char)
    elif command is Action.BACKSPACE:
        interaction.backspace()
    elif command is Action.CANCEL:
        interaction.cancel()
    elif command is Action.CONFIRM:
        task = interaction.confirm()
        if task is not None:
            state.tasks.append(task)
            logger.debug("committed %r (details=%s)", task.label, task.details is not None)
    return Outcome.CONTINUE


def apply_command(state: AppState, command: Command) -> Outcome:
    if state.interaction.editing:
        return _apply_editing(state, command)
    return _apply_normal(state, command)


def apply_event(state: AppState, event: KeyEvent) -> Outcome:
    """Apply one key press to ``state`` in place.

    Keys with no meaning in the current mode are ignored. ``Outcome.QUIT`` is
    returned for the quit command; stopping the loop is up to the caller.
    """
    command = interpret(event, state.interaction)
    if command is None:
        return Outcome.CONTINUE
    return apply_command(state, command)


__all__ = ["Outcome", "AppState", "apply_command", "apply_event"]
