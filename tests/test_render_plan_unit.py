#!/usr/bin/env python3
"""Unit tests for RenderPlan derivation."""

from core.app_state import AppState, apply_event
from core.interaction import Popup
from core.keymap import KEY_ENTER, KeyEvent
from core.render_plan import (
    DONE_MARKER,
    HELP_LINE,
    MAIN_TITLE,
    TODO_MARKER,
    DetailsPane,
    Overlay,
    RenderPlan,
    TaskRow,
    derive_render_plan,
)
from core.selectable_list import TaskList
from core.task import Task


def _state(*tasks, selected=None):
    return AppState(tasks=TaskList(list(tasks), selected=selected))


def _send(state, *keys):
    for key in keys:
        apply_event(state, KeyEvent(key))


def test_empty_state_plan():
    plan = derive_render_plan(AppState())
    assert plan == RenderPlan(rows=(), selected=None)
    assert plan.help_line == HELP_LINE
    assert plan.title == MAIN_TITLE
    assert plan.details is None
    assert plan.overlay is None


def test_rows_follow_insertion_order_with_markers():
    plan = derive_render_plan(_state(Task("first"), Task("second", done=True)))
    assert plan.rows == (
        TaskRow(marker=TODO_MARKER, label="first", done=False),
        TaskRow(marker=DONE_MARKER, label="second", done=True),
    )
    assert plan.rows[1].text == f"{DONE_MARKER} second"


def test_selected_index_is_exposed():
    plan = derive_render_plan(_state(Task("a"), Task("b"), selected=1))
    assert plan.selected == 1


def test_details_pane_only_for_selected_task_with_details():
    state = _state(Task("a", details="notes"), Task("b"), selected=0)
    assert derive_render_plan(state).details == DetailsPane(text="notes")
    state.tasks.select(1)
    assert derive_render_plan(state).details is None
    state.tasks.select(None)
    assert derive_render_plan(state).details is None


def test_name_overlay_shows_name_buffer():
    state = AppState()
    _send(state, "n", "h", "i")
    assert derive_render_plan(state).overlay == Overlay(
        popup=Popup.NEW_TASK_NAME, title="Add a new task", content="hi"
    )


def test_details_overlay_shows_details_buffer():
    state = AppState()
    _send(state, "n", "h", "i", KEY_ENTER, "x")
    overlay = derive_render_plan(state).overlay
    assert overlay.popup is Popup.NEW_TASK_DETAILS
    assert overlay.title == "Add details (blank for none)"
    assert overlay.content == "x"


def test_overlay_gone_after_commit():
    state = AppState()
    _send(state, "n", "a", KEY_ENTER, KEY_ENTER)
    plan = derive_render_plan(state)
    assert plan.overlay is None
    assert plan.rows == (TaskRow(marker=TODO_MARKER, label="a", done=False),)


def test_derivation_is_idempotent():
    state = _state(Task("a", details="d"), Task("b", done=True), selected=0)
    _send(state, "n", "z")
    first = derive_render_plan(state)
    second = derive_render_plan(state)
    assert first == second
    assert state.interaction.name_buffer == "z"


def test_derivation_does_not_mutate_state():
    state = _state(Task("a"), selected=0)
    state.tasks.selected = 5
    derive_render_plan(state)
    assert state.tasks.selected == 5
    assert derive_render_plan(state).selected is None
