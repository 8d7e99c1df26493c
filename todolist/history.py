"""Undo history of user actions on the task list."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum

from todolist.task import Task, TaskList

_INVALID_INDEX = "Undo failed: invalid insertion index."


class UndoError(Exception):
    """Raised when there is nothing to undo or an undo cannot be applied."""


class ActionType(str, Enum):
    """Kinds of actions that can be undone."""

    ADD = "add"
    SORT = "sort"
    TOGGLE = "toggle"
    DELETE = "delete"
    EDIT = "edit"


@dataclass
class Action:
    """A recorded user operation."""

    kind: ActionType
    task_data: Task | None = None
    index: int = 0
    prev_text: str = ""
    prev_state: list[Task] | None = None
    sub_actions: list[Action] = field(default_factory=list)


class History:
    """A stack of actions supporting undo."""

    def __init__(self) -> None:
        self._actions: list[Action] = []

    def record(self, action: Action) -> None:
        """Push an action onto the stack."""
        self._actions.append(action)

    def __len__(self) -> int:
        return len(self._actions)

    def undo(self, tasks: TaskList) -> Action:
        """Revert the most recent action on ``tasks`` and return it.

        The action is removed from the stack even if reverting it fails.
        """
        if not self._actions:
            raise UndoError("Nothing to undo.")
        last = self._actions.pop()

        if last.kind is ActionType.ADD:
            if not len(tasks):
                raise UndoError(_INVALID_INDEX)
            tasks.delete(len(tasks) - 1)
        elif last.kind is ActionType.SORT:
            if last.prev_state is None:
                raise UndoError(_INVALID_INDEX)
            tasks.replace(last.prev_state)
        elif last.kind is ActionType.TOGGLE:
            self._undo_toggle(last, tasks)
        elif last.kind is ActionType.DELETE:
            if last.task_data is None or not 0 <= last.index <= len(tasks):
                raise UndoError(_INVALID_INDEX)
            tasks.insert(last.index, dataclasses.replace(last.task_data))
        elif last.kind is ActionType.EDIT:
            if not 0 <= last.index < len(tasks):
                raise UndoError(_INVALID_INDEX)
            tasks.edit(last.index, last.prev_text)
        else:
            raise UndoError("Undo failed: unknown action type.")
        return last

    @staticmethod
    def _undo_toggle(action: Action, tasks: TaskList) -> None:
        indices = [a.index for a in reversed(action.sub_actions)] or [action.index]
        if any(not 0 <= i < len(tasks) for i in indices):
            raise UndoError(_INVALID_INDEX)
        for i in indices:
            tasks[i].completed = not tasks[i].completed