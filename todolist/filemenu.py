"""Menu for autosave, saving to another file and exporting to text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from todolist import color
from todolist.storage import StorageError, export_to_text

if TYPE_CHECKING:
    from todolist.app import App


def file_menu(app: App) -> None:
    """Offer file operations until the user goes back."""
    while True:
        app.say(color.blue("\n=== File Menu ==="))
        app.say(color.blue("1.") + "Toggle autosave")
        app.say(color.blue("2.") + "Save as...")
        app.say(color.blue("3.") + "Export to text file")
        app.say(color.blue("4.") + "Back to menu")
        choice = app.read_input(color.blue("\nChoose an action: "))

        if choice == "1":
            if app.storage.toggle_autosave():
                app.say(color.green("Autosave enabled."))
            else:
                app.say(color.yellow("Autosave disabled."))
        elif choice == "2":
            file_name = app.read_input("Enter file name to save as: ")
            try:
                app.storage.save_as(app.tasks, file_name)
            except StorageError as exc:
                app.say(color.magenta(f"[ERROR] Failed to save file: {exc}"))
            else:
                app.say(f"{color.green('Tasks saved as:')} {file_name}")
        elif choice == "3":
            file_name = app.read_input("Enter file name to export: ")
            try:
                export_to_text(app.tasks, file_name)
            except StorageError as exc:
                app.say(color.magenta(f"[ERROR] Failed to export file: {exc}"))
            else:
                app.say(f"{color.green('Tasks exported to:')} {file_name}")
        elif choice == "4":
            return
        else:
            app.say(color.red("Invalid choice. Please try again."))