#!/usr/bin/env python3
"""TUI application: TodoTUI class wiring AppState to prompt_toolkit."""

import logging
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import (
    ConditionalContainer,
    DynamicContainer,
    Float,
    FloatContainer,
    HSplit,
    Layout,
    VSplit,
    Window,
    WindowAlign,
)
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import Frame

from core import AppState, KeyEvent, Outcome, RenderPlan, apply_event, derive_render_plan
from core.keymap import KEY_BACKSPACE, KEY_ENTER, KEY_ESCAPE
from core.render_plan import DETAILS_TITLE
from util.geometry import FOOTER_HEIGHT, Rect, centered_rect

from .tui_display import DisplayMixin
from .tui_render import (
    build_details_text,
    build_footer_text,
    build_popup_text,
    build_task_list_text,
    popup_title,
)
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("todo_tui.tui")

POPUP_PERCENT_X = 60
POPUP_PERCENT_Y = 20
POPUP_MIN_HEIGHT = 3
LIST_WEIGHT = 3
DETAILS_WEIGHT = 2


class TerminalError(RuntimeError):
    """The terminal could not be set up, read from, or restored."""


class TodoTUI(DisplayMixin):
    def __init__(
        self,
        theme: str = DEFAULT_THEME,
        mono_select: bool = False,
        state: Optional[AppState] = None,
        *,
        input=None,
        output=None,
    ):
        self.state = state if state is not None else AppState()
        self.plan: RenderPlan = derive_render_plan(self.state)
        self.theme_name = theme
        self.mono_select = mono_select
        self.style = build_style(theme)

        kb = KeyBindings()

        def _dispatch(event, key: str) -> None:
            if self.handle_key(key) is Outcome.QUIT:
                event.app.exit()

        @kb.add("enter")
        def _(event):
            _dispatch(event, KEY_ENTER)

        @kb.add("escape", eager=True)
        def _(event):
            _dispatch(event, KEY_ESCAPE)

        @kb.add("backspace")
        def _(event):
            _dispatch(event, KEY_BACKSPACE)

        @kb.add("c-c")
        def _(event):
            event.app.exit()

        @kb.add(Keys.BracketedPaste)
        def _(event):
            """Pasted text is typed into the open popup one character at a time."""
            if not self.state.interaction.editing:
                return
            for ch in event.data:
                self.handle_key(ch)

        @kb.add(Keys.Any)
        def _(event):
            _dispatch(event, event.data)

        self.footer = Frame(
            Window(
                content=FormattedTextControl(self.get_footer_text),
                height=FOOTER_HEIGHT - 2,
                align=WindowAlign.CENTER,
                always_hide_cursor=True,
            ),
        )
        self.list_frame = Frame(self._list_window(), title=self._main_title)
        self.split_body = VSplit(
            [
                Frame(self._list_window(), title=self._main_title, width=Dimension(weight=LIST_WEIGHT)),
                Frame(
                    Window(
                        content=FormattedTextControl(self.get_details_text),
                        always_hide_cursor=True,
                        wrap_lines=True,
                    ),
                    title=DETAILS_TITLE,
                    width=Dimension(weight=DETAILS_WEIGHT),
                ),
            ],
            padding=0,
        )
        self.body_container = DynamicContainer(self._resolve_body_container)

        self.popup = Frame(
            Window(
                content=FormattedTextControl(self.get_popup_text),
                wrap_lines=True,
                style="class:popup",
            ),
            title=lambda: popup_title(self),
            style="class:popup",
        )
        popup_visible = Condition(lambda: self.plan.overlay is not None)

        root = FloatContainer(
            content=HSplit([self.body_container, self.footer]),
            floats=[
                Float(
                    content=ConditionalContainer(self.popup, filter=popup_visible),
                    width=self.popup_width,
                    height=self.popup_height,
                )
            ],
        )

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=True,
            input=input,
            output=output,
        )
        # Make Esc responsive: the default 0.5s wait is for telling Escape apart from ANSI sequences.
        self.app.ttimeoutlen = 0.05

    def get_terminal_width(self) -> int:
        """Get the width the application renders into, default to 100 if unavailable."""
        try:
            return self.app.output.get_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def get_terminal_height(self) -> int:
        try:
            return self.app.output.get_size().rows
        except (AttributeError, ValueError, OSError):
            return 40

    def _terminal_rect(self) -> Rect:
        return Rect(0, 0, self.get_terminal_width(), self.get_terminal_height())

    def popup_width(self) -> int:
        return max(1, centered_rect(POPUP_PERCENT_X, POPUP_PERCENT_Y, self._terminal_rect()).width)

    def popup_height(self) -> int:
        return max(POPUP_MIN_HEIGHT, centered_rect(POPUP_PERCENT_X, POPUP_PERCENT_Y, self._terminal_rect()).height)

    def list_content_width(self) -> int:
        """Columns available for a task row inside the list frame."""
        width = self.get_terminal_width()
        if self.plan.details is not None:
            width = width * LIST_WEIGHT // (LIST_WEIGHT + DETAILS_WEIGHT)
        return max(1, width - 2)

    def _list_window(self) -> Window:
        return Window(
            content=FormattedTextControl(self.get_task_list_text),
            always_hide_cursor=True,
            wrap_lines=False,
        )

    def _main_title(self) -> str:
        return self.plan.title

    def _resolve_body_container(self):
        if self.plan.details is not None:
            return self.split_body
        return self.list_frame

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    def handle_key(self, key: str) -> Outcome:
        """Feed one key press to the state machine and refresh the plan."""
        outcome = apply_event(self.state, KeyEvent(key))
        self.plan = derive_render_plan(self.state)
        self.force_render()
        return outcome

    def get_task_list_text(self) -> FormattedText:
        return build_task_list_text(self)

    def get_details_text(self) -> FormattedText:
        return build_details_text(self)

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self)

    def get_popup_text(self) -> FormattedText:
        return build_popup_text(self)

    def run(self) -> None:
        """Run the full-screen loop until quit.

        prompt_toolkit leaves the alternate screen, drops raw mode and shows the
        cursor before ``Application.run`` returns or raises, so a TerminalError
        always reaches the caller with the terminal already restored.
        """
        logger.info("starting TUI (theme=%s)", self.theme_name)
        try:
            self.app.run()
        except (OSError, EOFError) as exc:
            raise TerminalError(str(exc) or exc.__class__.__name__) from exc
        finally:
            logger.info("TUI stopped with %d task(s)", len(self.state.tasks))


__all__ = ["TerminalError", "TodoTUI"]
