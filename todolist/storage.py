"""Console input helpers and persistence of the task list."""

from __future__ import annotations

import json
import re
from typing import TextIO

from todolist.task import Task, TaskList

DEFAULT_FILE = "tasks.json"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class StorageError(Exception):
    """Raised when tasks cannot be read or written."""


def read_input(stream: TextIO) -> str:
    """Read one line from ``stream`` and strip surrounding whitespace.

    Raises EOFError when the stream ends before a full line is read.
    """
    line = stream.readline()
    if not line.endswith("\n"):
        raise EOFError("Error reading input: EOF")
    return line.strip()


def convert_value(text: str) -> int:
    """Parse a decimal integer, raising ValueError for anything else."""
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"only a number can be entered: parsing {text!r}: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"only a number can be entered: parsing {text!r}: value out of range")
    return value


def _dumps(tasks: TaskList) -> str:
    data = [{"task": t.title, "completed": t.completed} for t in tasks]
    text = json.dumps(data, indent=2, ensure_ascii=False)
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def save_tasks(tasks: TaskList, file_name: str) -> None:
    """Write ``tasks`` as indented JSON to ``file_name``."""
    try:
        with open(file_name, "w", encoding="utf-8") as fh:
            fh.write(_dumps(tasks))
    except OSError as exc:
        raise StorageError(f"task saving error: {exc}") from exc


def _task_from_json(item: object) -> Task:
    task = Task("")
    if item is None:
        return task
    if not isinstance(item, dict):
        raise StorageError("deserialization error: task entry is not an object")
    for key, value in item.items():
        name = key.lower()
        if value is None:
            continue
        if name == "task":
            if not isinstance(value, str):
                raise StorageError("deserialization error: field 'task' must be a string")
            task.title = value
        elif name == "completed":
            if not isinstance(value, bool):
                raise StorageError("deserialization error: field 'completed' must be a boolean")
            task.completed = value
    return task


def load_tasks(file_name: str) -> TaskList:
    """Read tasks from ``file_name``; a missing file gives an empty list."""
    try:
        with open(file_name, encoding="utf-8") as fh:
            raw = fh.read()
    except FileNotFoundError:
        return TaskList()
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"task loading error: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageError(f"deserialization error: {exc}") from exc
    if data is None:
        return TaskList()
    if not isinstance(data, list):
        raise StorageError("deserialization error: expected a list of tasks")
    return TaskList(_task_from_json(item) for item in data)


def export_to_text(tasks: TaskList, file_name: str) -> None:
    """Write the tasks as a plain-text table to ``file_name``."""
    if not file_name.strip():
        raise StorageError("file name cannot be empty")
    lines = [f"{'Status':<8}Task"]
    lines.extend(f"{'[x]' if t.completed else '[ ]':<8}{t.title}" for t in tasks)
    try:
        with open(file_name, "w", encoding="utf-8") as fh:
            fh.write("\n".join(lines))
    except OSError as exc:
        raise StorageError(f"task export error: {exc}") from exc


class Storage:
    """Autosave settings and the default task file."""

    def __init__(self, file_name: str = DEFAULT_FILE, autosave_enabled: bool = True) -> None:
        self.file_name = file_name
        self.autosave_enabled = autosave_enabled

    def toggle_autosave(self) -> bool:
        """Flip the autosave setting and return the new value."""
        self.autosave_enabled = not self.autosave_enabled
        return self.autosave_enabled

    def autosave(self, tasks: TaskList) -> bool:
        """Save to the default file if autosave is on; return whether it saved."""
        if not self.autosave_enabled:
            return False
        try:
            save_tasks(tasks, self.file_name)
        except StorageError as exc:
            raise StorageError(f"Autosave failed: {exc}") from exc
        return True

    def save_as(self, tasks: TaskList, file_name: str) -> None:
        """Save the tasks to a user-chosen file."""
        if not file_name.strip():
            raise StorageError("file name cannot be empty")
        try:
            save_tasks(tasks, file_name)
        except StorageError as exc:
            raise StorageError(f"failed to save file: {exc}") from exc