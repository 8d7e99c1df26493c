"""Marking tasks as completed or not completed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from todolist import color
from todolist.history import Action, ActionType, History
from todolist.storage import StorageError, convert_value
from todolist.task import TaskError, TaskList

if TYPE_CHECKING:
    from todolist.app import App

_log = logging.getLogger(__name__)


def _set_one(tasks: TaskList, history: History, number: int, value: bool) -> bool:
    if not 1 <= number <= len(tasks):
        raise TaskError()
    task = tasks[number - 1]
    if task.completed == value:
        return False
    history.record(Action(ActionType.TOGGLE, index=number - 1))
    task.completed = value
    return True


def mark_task(tasks: TaskList, history: History, number: int) -> bool:
    """Mark the task with 1-based ``number`` completed; False if it already was."""
    return _set_one(tasks, history, number, True)


def unmark_task(tasks: TaskList, history: History, number: int) -> bool:
    """Mark the task with 1-based ``number`` not completed; False if it already was not."""
    return _set_one(tasks, history, number, False)


def _set_all(tasks: TaskList, history: History, value: bool) -> int:
    changed = [i for i, task in enumerate(tasks) if task.completed != value]
    for i in changed:
        tasks[i].completed = value
    if changed:
        history.record(
            Action(
                ActionType.TOGGLE,
                sub_actions=[Action(ActionType.TOGGLE, index=i) for i in changed],
            )
        )
    return len(changed)


def mark_all(tasks: TaskList, history: History) -> int:
    """Mark every task completed and return how many changed."""
    return _set_all(tasks, history, True)


def unmark_all(tasks: TaskList, history: History) -> int:
    """Mark every task not completed and return how many changed."""
    return _set_all(tasks, history, False)


def _autosave(app: App) -> None:
    try:
        app.storage.autosave(app.tasks)
    except StorageError as exc:
        _log.error(color.magenta(f"[ERROR] {exc}"))


def _toggle_one(app: App, mark: bool) -> None:
    text = app.read_input("Enter the task number: ")
    try:
        number = convert_value(text)
    except ValueError as exc:
        app.say(color.magenta(f"Error: {exc}"))
        return

    action = mark_task if mark else unmark_task
    try:
        changed = action(app.tasks, app.history, number)
    except TaskError as exc:
        app.say(color.red(str(exc)))
        return

    if changed:
        _autosave(app)
        app.say(color.green("Task marked as complete." if mark else "Task marked as not complete."))
    elif mark:
        app.say(color.yellow("Task is already marked as completed."))
    else:
        app.say(color.yellow("Task is already not marked as completed."))


def _toggle_all(app: App, mark: bool) -> None:
    count = (mark_all if mark else unmark_all)(app.tasks, app.history)
    state = "completed" if mark else "not completed"
    if count:
        app.say(color.green(f"Marked {count} task(s) as {state}."))
    else:
        app.say(color.yellow(f"All tasks are already {state}."))
    _autosave(app)


def toggle_menu(app: App) -> None:
    """Offer marking and unmarking of tasks until the user goes back."""
    while True:
        app.say(color.blue("\n=== Toggle Menu ==="))
        app.say(color.blue("1.") + " Mark task")
        app.say(color.blue("2.") + " Unmark task")
        app.say(color.blue("3.") + " Mark all")
        app.say(color.blue("4.") + " Unmark all")
        app.say(color.blue("5.") + " Back to menu")
        choice = app.read_input(color.blue("\nChoose an action: "))

        if choice == "1":
            _toggle_one(app, True)
        elif choice == "2":
            _toggle_one(app, False)
        elif choice == "3":
            _toggle_all(app, True)
        elif choice == "4":
            _toggle_all(app, False)
        elif choice == "5":
            return
        else:
            app.say(color.red("Invalid choice. Please try again."))