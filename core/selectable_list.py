"""Ordered collection with a single optional selection cursor."""

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from .task import Task

T = TypeVar("T")

logger = logging.getLogger("todo_tui.state")


class SelectableList(Generic[T]):
    """Items plus an optional cursor; every operation degrades to a no-op on bad state.

    ``selected`` is either None or a valid index into ``items``.
    """

    def __init__(self, items: Optional[List[T]] = None, selected: Optional[int] = None):
        self.items: List[T] = list(items or [])
        self.selected: Optional[int] = None
        self.select(selected)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def _valid(self, index: Optional[int]) -> bool:
        return index is not None and 0 <= index < len(self.items)

    def select(self, index: Optional[int]) -> None:
        self.selected = index if self._valid(index) else None

    def append(self, item: T) -> None:
        self.items.append(item)

    def selected_item(self) -> Optional[T]:
        if not self._valid(self.selected):
            return None
        return self.items[self.selected]

    def next(self) -> None:
        total = len(self.items)
        if total == 0:
            return
        if not self._valid(self.selected):
            self.selected = 0
            return
        self.selected = (self.selected + 1) % total

    def previous(self) -> None:
        total = len(self.items)
        if total == 0:
            return
        if not self._valid(self.selected):
            self.selected = total - 1
            return
        self.selected = (self.selected - 1) % total

    def remove_selected(self) -> Optional[T]:
        """Remove the selected item and clear the cursor. Returns the removed item."""
        if not self._valid(self.selected):
            self.selected = None
            return None
        removed = self.items.pop(self.selected)
        self.selected = None
        return removed


class TaskList(SelectableList[Task]):
    def toggle_done_selected(self) -> Optional[Task]:
        task = self.selected_item()
        if task is None:
            return None
        task.toggle()
        logger.debug("toggled %r -> done=%s", task.label, task.done)
        return task


__all__ = ["SelectableList", "TaskList"]
