from .task import Task
from .selectable_list import SelectableList, TaskList
from .interaction import (
    Mode,
    Popup,
    NormalPhase,
    NameEntryPhase,
    DetailsEntryPhase,
    InteractionState,
)
from .keymap import (
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_BACKSPACE,
    KeyEvent,
    Action,
    AppendChar,
    interpret,
)
from .app_state import AppState, Outcome, apply_command, apply_event
from .render_plan import (
    RenderPlan,
    TaskRow,
    DetailsPane,
    Overlay,
    derive_render_plan,
)

__all__ = [
    "Task",
    "SelectableList",
    "TaskList",
    # Interaction
    "Mode",
    "Popup",
    "NormalPhase",
    "NameEntryPhase",
    "DetailsEntryPhase",
    "InteractionState",
    # Keys
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_BACKSPACE",
    "KeyEvent",
    "Action",
    "AppendChar",
    "interpret",
    # State
    "AppState",
    "Outcome",
    "apply_command",
    "apply_event",
    # Rendering
    "RenderPlan",
    "TaskRow",
    "DetailsPane",
    "Overlay",
    "derive_render_plan",
]
