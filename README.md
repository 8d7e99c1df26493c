# todolist

A small interactive to-do list for the terminal. Tasks are kept in
`tasks.json` in the current directory. With autosave on, which is the
default, the list is written back to that file after every change.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the program from the directory where your tasks should live:

```
todolist
```

The command takes no options besides `--help`. It exits with status 1 if
`tasks.json` cannot be read or parsed, or if input ends before you choose
**Exit**.

The main menu offers:

1. **Add task**: enter a title; the task is appended as not completed.
2. **Show tasks**: prints the numbered list with `[ ]` / `[x]` status and a
   ten-character progress bar, coloured red below 33 %, yellow up to 66 %
   and green above. From here the list can be sorted so that completed
   tasks come first; an already sorted list is left alone.
3. **Toggle menu**: mark or unmark a single task by number, or mark or
   unmark all tasks at once.
4. **Delete task**: delete a task by its number, after a `y`/`n`
   confirmation.
5. **Edit task**: replace a task's text, after a `y`/`n` confirmation.
6. **Undo action**: reverts the most recent add, delete, edit, toggle or
   sort. "Mark all" and "Unmark all" are undone as one step.
7. **File menu**: toggle autosave, save the list to another JSON file, or
   export it to a plain text file.
8. **Exit**.

Task numbers typed at the prompts start at 1. The undo history lives only
for the current session.

## Files

`tasks.json` holds a JSON array of objects:

```json
[
  {
    "task": "Buy milk",
    "completed": false
  }
]
```

A missing `tasks.json` starts an empty list. The text export writes a
`Status  Task` header followed by one line per task, such as
`[x]     Buy milk`.

## Using it from Python

The building blocks can also be used directly:

```python
from todolist.task import TaskList
from todolist.history import History, Action, ActionType
from todolist.storage import save_tasks, load_tasks, export_to_text
from todolist.toggle import mark_task
from todolist.show import sort_by_completed, format_list, progress_line

tasks = TaskList()
history = History()

task = tasks.add("Write report")
history.record(Action(ActionType.ADD, task_data=task))
tasks.add("Send invoice")

mark_task(tasks, history, 2)         # 1-based number; records its own undo step
sort_by_completed(tasks, history)    # True if the order changed
history.undo(tasks)                  # reverts the sort

save_tasks(tasks, "tasks.json")
export_to_text(tasks, "tasks.txt")
tasks = load_tasks("tasks.json")
```

Modules:

- `todolist.task`: `Task` (a `title` and a `completed` flag) and
  `TaskList`, a zero-indexed list with `add`, `delete`, `edit`, `insert`
  and `replace`. Positions outside the list raise `TaskError`.
- `todolist.history`: `ActionType`, `Action` and `History` with `record`
  and `undo`. `undo` raises `UndoError` when there is nothing to undo or
  the action no longer fits the list.
- `todolist.storage`: `read_input`, `convert_value`, `save_tasks`,
  `load_tasks`, `export_to_text` and `Storage`, which holds the autosave
  setting (`toggle_autosave`, `autosave`, `save_as`). File problems raise
  `StorageError`.
- `todolist.toggle`: `mark_task`, `unmark_task`, `mark_all`, `unmark_all`.
- `todolist.show`: `format_list`, `progress_line`, `sort_by_completed`.
- `todolist.color`: `blue`, `green`, `yellow`, `red`, `magenta`, which wrap
  text in ANSI colour codes.
- `todolist.app`: `App`, which runs the menus over any pair of text
  streams, and `main`, the entry point of the `todolist` command.

## Limitations

The task file is always `tasks.json` in the current directory; there is no
option to choose another one at start-up, though **Save as...** can write a
copy elsewhere. Output always carries ANSI colour codes.