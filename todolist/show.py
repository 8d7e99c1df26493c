"""Task list display, progress bar and sorting by completion."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from todolist import color
from todolist.history import Action, ActionType, History
from todolist.storage import StorageError
from todolist.task import Task, TaskList

if TYPE_CHECKING:
    from todolist.app import App

BAR_WIDTH = 10

_log = logging.getLogger(__name__)


def _status(task: Task) -> str:
    return "[x]" if task.completed else "[ ]"


def format_list(tasks: TaskList) -> str:
    """Render the tasks as a numbered table with a header line."""
    lines = [color.blue(f"{'#':<4}{'Status':<8}Task")]
    lines.extend(
        color.blue(f"{number:<4}") + f"{_status(task):<8}{task.title}"
        for number, task in enumerate(tasks, start=1)
    )
    return "\n".join(lines)


def _colour_bar(ratio: float, bar: str) -> str:
    percent = ratio * 100
    if percent < 33:
        return color.red(bar)
    if percent <= 66:
        return color.yellow(bar)
    return color.green(bar)


def progress_line(completed: int, total: int) -> str:
    """Render a coloured progress bar for ``completed`` out of ``total`` tasks."""
    if total == 0:
        return color.red("[" + "-" * BAR_WIDTH + "]") + " 0.0% " + " (0/0)"
    ratio = completed / total
    filled = int(ratio * BAR_WIDTH)
    bar = "[" + "#" * filled + "-" * (BAR_WIDTH - filled) + "]"
    return f"{_colour_bar(ratio, bar)} {ratio * 100:.1f}%  ({completed}/{total})"


def _is_sorted(tasks: TaskList) -> bool:
    items = list(tasks)
    return not any(
        not before.completed and after.completed for before, after in zip(items, items[1:])
    )


def sort_by_completed(tasks: TaskList, history: History) -> bool:
    """Move completed tasks in front of uncompleted ones.

    Returns False, recording nothing, when the list is already in that order.
    """
    if _is_sorted(tasks):
        return False
    previous = [dataclasses.replace(t) for t in tasks]
    tasks.replace(sorted(tasks, key=lambda t: not t.completed))
    history.record(Action(ActionType.SORT, prev_state=previous))
    return True


def _autosave(app: App) -> None:
    try:
        app.storage.autosave(app.tasks)
    except StorageError as exc:
        _log.error(color.magenta(f"[ERROR] {exc}"))


def show_menu(app: App) -> None:
    """Show the task list with progress and offer sorting until the user goes back."""
    while True:
        app.say(color.blue("\n=== Task List ==="))
        app.say(format_list(app.tasks))
        completed = sum(1 for t in app.tasks if t.completed)
        app.say(color.blue("\nProgress:"))
        app.say(progress_line(completed, len(app.tasks)))
        app.say(color.blue("\n--- Show Menu ---"))
        app.say(color.blue("1.") + "Sort by completed")
        app.say(color.blue("2.") + "Back to menu")
        choice = app.read_input(color.blue("\nChoose an action: "))

        if choice == "1":
            if sort_by_completed(app.tasks, app.history):
                app.say(color.green("List sorted."))
            else:
                app.say(color.yellow("List is already sorted."))
            _autosave(app)
        elif choice == "2":
            return
        else:
            app.say(color.red("Invalid choice. Please try again."))