#!/usr/bin/env python3
"""Unit tests for the new-task wizard state machine."""

from core.interaction import (
    DetailsEntryPhase,
    InteractionState,
    Mode,
    NameEntryPhase,
    NormalPhase,
    Popup,
)


def _type(state, text):
    for ch in text:
        state.append(ch)


class TestInitialState:
    def test_starts_in_normal_mode(self):
        state = InteractionState()
        assert state.mode is Mode.NORMAL
        assert state.popup is Popup.NONE
        assert state.name_buffer == ""
        assert state.details_buffer == ""
        assert state.editing is False

    def test_mode_matches_popup_in_every_phase(self):
        for phase in (NormalPhase(), NameEntryPhase("a"), DetailsEntryPhase("a", "b")):
            state = InteractionState(phase)
            assert (state.mode is Mode.EDITING) == (state.popup is not Popup.NONE)


class TestNamePhase:
    def test_start_new_task_opens_name_popup(self):
        state = InteractionState()
        state.start_new_task()
        assert state.mode is Mode.EDITING
        assert state.popup is Popup.NEW_TASK_NAME

    def test_append_and_backspace_edit_name_buffer(self):
        state = InteractionState()
        state.start_new_task()
        _type(state, "abc")
        state.backspace()
        assert state.name_buffer == "ab"
        assert state.details_buffer == ""

    def test_backspace_on_empty_buffer_is_noop(self):
        state = InteractionState()
        state.start_new_task()
        state.backspace()
        assert state.name_buffer == ""
        assert state.popup is Popup.NEW_TASK_NAME

    def test_confirm_with_empty_name_stays(self):
        state = InteractionState()
        state.start_new_task()
        assert state.confirm() is None
        assert state.popup is Popup.NEW_TASK_NAME

    def test_confirm_with_name_moves_to_details(self):
        state = InteractionState()
        state.start_new_task()
        _type(state, "abc")
        assert state.confirm() is None
        assert state.popup is Popup.NEW_TASK_DETAILS
        assert state.name_buffer == "abc"

    def test_start_new_task_while_editing_is_ignored(self):
        state = InteractionState()
        state.start_new_task()
        _type(state, "x")
        state.start_new_task()
        assert state.name_buffer == "x"


class TestDetailsPhase:
    def _details_state(self, name="abc"):
        state = InteractionState()
        state.start_new_task()
        _type(state, name)
        state.confirm()
        return state

    def test_typing_goes_to_details_buffer(self):
        state = self._details_state()
        _type(state, "xyz")
        state.backspace()
        assert state.details_buffer == "xy"
        assert state.name_buffer == "abc"

    def test_commit_with_empty_details(self):
        state = self._details_state()
        task = state.confirm()
        assert task is not None
        assert task.label == "abc"
        assert task.details is None
        assert task.done is False
        assert state.mode is Mode.NORMAL

    def test_commit_with_details(self):
        state = self._details_state()
        _type(state, "more info")
        task = state.confirm()
        assert task.details == "more info"

    def test_buffers_empty_after_commit(self):
        state = self._details_state()
        _type(state, "d")
        state.confirm()
        assert state.name_buffer == ""
        assert state.details_buffer == ""


class TestCancel:
    def test_cancel_from_name_phase(self):
        state = InteractionState()
        state.start_new_task()
        _type(state, "partial")
        state.cancel()
        assert state.phase == NormalPhase()
        assert state.name_buffer == ""

    def test_cancel_from_details_phase(self):
        state = InteractionState()
        state.start_new_task()
        _type(state, "abc")
        state.confirm()
        _type(state, "half")
        state.cancel()
        assert state.mode is Mode.NORMAL
        assert state.popup is Popup.NONE
        assert state.name_buffer == "" and state.details_buffer == ""

    def test_no_leak_into_next_wizard(self):
        state = InteractionState()
        state.start_new_task()
        _type(state, "old")
        state.cancel()
        state.start_new_task()
        assert state.name_buffer == ""

    def test_confirm_in_normal_mode_is_noop(self):
        state = InteractionState()
        assert state.confirm() is None
        assert state.mode is Mode.NORMAL

    def test_append_in_normal_mode_is_noop(self):
        state = InteractionState()
        state.append("x")
        state.backspace()
        assert state.phase == NormalPhase()
