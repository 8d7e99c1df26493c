"""To-do items and the ordered list that holds them."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class TaskError(IndexError):
    """Raised when a task position is outside the list."""

    def __init__(self, message: str = "Invalid task number.") -> None:
        super().__init__(message)


@dataclass
class Task:
    """A single to-do item with a title and completion status."""

    title: str
    completed: bool = False


class TaskList:
    """An ordered, zero-indexed collection of tasks."""

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = [dataclasses.replace(t) for t in tasks]

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskError()

    def add(self, title: str) -> Task:
        """Append a new, uncompleted task and return it."""
        task = Task(title)
        self._tasks.append(task)
        return task

    def delete(self, index: int) -> Task:
        """Remove the task at ``index`` and return it."""
        self._check(index)
        return self._tasks.pop(index)

    def edit(self, index: int, text: str) -> str:
        """Change the title of the task at ``index``; return the old title."""
        self._check(index)
        previous = self._tasks[index].title
        self._tasks[index].title = text
        return previous

    def insert(self, index: int, task: Task) -> None:
        """Insert a copy of ``task`` so that it ends up at ``index``."""
        if not 0 <= index <= len(self._tasks):
            raise TaskError()
        self._tasks.insert(index, dataclasses.replace(task))

    def replace(self, tasks: Iterable[Task]) -> None:
        """Replace the whole contents with copies of ``tasks``."""
        self._tasks = [dataclasses.replace(t) for t in tasks]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"