"""Interactive console to-do list: the main menu and its entry point."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

from todolist import color
from todolist.filemenu import file_menu
from todolist.history import Action, ActionType, History, UndoError
from todolist.show import show_menu
from todolist.storage import DEFAULT_FILE, Storage, StorageError, convert_value, load_tasks
from todolist.storage import read_input as _read_line
from todolist.task import TaskError, TaskList
from todolist.toggle import toggle_menu

_log = logging.getLogger(__name__)

_MENU = (
    "Add task",
    "Show tasks",
    "Toggle menu",
    "Delete task",
    "Edit task",
    "Undo action",
    "File menu",
    "Exit",
)
_BAD_CONFIRM = "Invalid choice, please enter 'y' or 'n'."


class App:
    """The task list, its history and storage, bound to console streams."""

    def __init__(
        self,
        tasks: TaskList | None = None,
        history: History | None = None,
        storage: Storage | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.tasks = tasks if tasks is not None else TaskList()
        self.history = history if history is not None else History()
        self.storage = storage if storage is not None else Storage()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_input(self, prompt: str = "") -> str:
        """Show ``prompt`` and read one stripped line of input."""
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        return _read_line(self.stdin)

    def say(self, text: str) -> None:
        """Write one line of output."""
        print(text, file=self.stdout)

    @contextmanager
    def _saving(self) -> Iterator[None]:
        try:
            yield
        finally:
            try:
                self.storage.autosave(self.tasks)
            except StorageError as exc:
                _log.error(color.magenta(f"[ERROR] {exc}"))

    def _read_number(self) -> int | None:
        text = self.read_input("Enter the task number: ")
        try:
            return convert_value(text)
        except ValueError as exc:
            self.say(color.magenta(f"Error: {exc}"))
            return None

    def _confirm(self) -> str:
        return self.read_input(color.yellow("Are you sure? (y/n): ")).lower()

    def _add(self) -> None:
        title = self.read_input("Enter task title: ")
        with self._saving():
            task = self.tasks.add(title)
            self.history.record(Action(ActionType.ADD, task_data=dataclasses.replace(task)))
        self.say(color.green(f"Task #{len(self.tasks)} added!"))

    def _delete(self) -> None:
        number = self._read_number()
        if number is None:
            return
        self.say(f"{color.blue('You are about to delete task')} #{number}{color.blue('.')}")
        answer = self._confirm()
        if answer == "y":
            with self._saving():
                try:
                    deleted = self.tasks.delete(number - 1)
                except TaskError as exc:
                    self.say(color.red(str(exc)))
                else:
                    self.say(color.green("Task deleted."))
                    self.history.record(
                        Action(ActionType.DELETE, task_data=deleted, index=number - 1)
                    )
        elif answer == "n":
            self.say(color.red("Action canceled."))
        else:
            self.say(color.red(_BAD_CONFIRM))

    def _edit(self) -> None:
        number = self._read_number()
        if number is None:
            return
        text = self.read_input("Enter new task text: ")
        self.say(
            f"{color.blue('You are about to change task')} #{number} "
            f"{color.blue('to:')} \"{text}\"{color.blue('.')}"
        )
        answer = self._confirm()
        if answer == "y":
            with self._saving():
                try:
                    previous = self.tasks.edit(number - 1, text)
                except TaskError as exc:
                    self.say(color.red(str(exc)))
                else:
                    self.say(color.green("Task updated."))
                    self.history.record(
                        Action(ActionType.EDIT, index=number - 1, prev_text=previous)
                    )
        elif answer == "n":
            self.say(color.red("Task not changed."))
        else:
            self.say(color.red(_BAD_CONFIRM))

    def _undo(self) -> None:
        with self._saving():
            if not len(self.history):
                self.say(color.red("Nothing to undo."))
                return
            try:
                self.history.undo(self.tasks)
            except (UndoError, TaskError) as exc:
                self.say(color.magenta(str(exc)))
            self.say(color.green("Undo last action."))

    def run(self) -> None:
        """Run the main menu until the user exits.

        Raises EOFError if input ends first.
        """
        handlers: dict[str, Callable[[], None]] = {
            "1": self._add,
            "2": lambda: show_menu(self),
            "3": lambda: toggle_menu(self),
            "4": self._delete,
            "5": self._edit,
            "6": self._undo,
            "7": lambda: file_menu(self),
        }
        while True:
            self.say(color.blue("\n=== To-Do Menu ==="))
            for number, label in enumerate(_MENU, start=1):
                self.say(color.blue(f"{number}.") + f" {label}")
            choice = self.read_input(color.blue("\nChoose an action: "))

            if choice == "8":
                self.say(color.blue("Exiting..."))
                return
            handler = handlers.get(choice)
            if handler is None:
                self.say(color.red("Invalid choice. Please try again."))
            else:
                handler()


def main(argv: list[str] | None = None) -> int:
    """Load tasks from the default file and run the interactive menu."""
    parser = argparse.ArgumentParser(prog="todolist", description="Interactive console to-do list.")
    parser.parse_args(argv)

    try:
        tasks = load_tasks(DEFAULT_FILE)
    except StorageError as exc:
        print(color.magenta(f"[ERROR] Failed to load tasks: {exc}"), file=sys.stderr)
        return 1

    app = App(tasks)
    try:
        app.run()
    except EOFError as exc:
        print(color.magenta(str(exc)), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())