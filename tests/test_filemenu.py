import io

from todolist.app import App
from todolist.filemenu import file_menu
from todolist.storage import Storage, load_tasks
from todolist.task import Task, TaskList


def make_app(tmp_path, script, tasks=()):
    out = io.StringIO()
    app = App(
        TaskList(tasks),
        storage=Storage(str(tmp_path / "tasks.json")),
        stdin=io.StringIO(script),
        stdout=out,
    )
    return app, out


def test_toggle_autosave_off(tmp_path):
    app, out = make_app(tmp_path, "1\n4\n")
    file_menu(app)
    assert app.storage.autosave_enabled is False
    assert "Autosave disabled." in out.getvalue()


def test_toggle_autosave_twice_turns_back_on(tmp_path):
    app, out = make_app(tmp_path, "1\n1\n4\n")
    file_menu(app)
    assert app.storage.autosave_enabled is True
    assert "Autosave enabled." in out.getvalue()


def test_save_as_writes_loadable_file(tmp_path):
    target = tmp_path / "other.json"
    app, out = make_app(tmp_path, f"2\n{target}\n4\n", [Task("a"), Task("b", True)])
    file_menu(app)
    saved = load_tasks(str(target))
    assert [(t.title, t.completed) for t in saved] == [("a", False), ("b", True)]
    assert str(target) in out.getvalue()


def test_save_as_empty_name(tmp_path):
    app, out = make_app(tmp_path, "2\n\n4\n", [Task("a")])
    file_menu(app)
    assert "[ERROR] Failed to save file: file name cannot be empty" in out.getvalue()


def test_export_writes_text_table(tmp_path):
    target = tmp_path / "tasks.txt"
    app, out = make_app(tmp_path, f"3\n{target}\n4\n", [Task("wash car", True), Task("read")])
    file_menu(app)
    lines = target.read_text(encoding="utf-8").split("\n")
    assert len(lines) == 3
    assert lines[0].startswith("Status") and lines[0].endswith("Task")
    assert lines[1].startswith("[x]") and lines[1].endswith("wash car")
    assert lines[2].startswith("[ ]") and lines[2].endswith("read")
    assert "Tasks exported to:" in out.getvalue()


def test_export_empty_name(tmp_path):
    app, out = make_app(tmp_path, "3\n   \n4\n")
    file_menu(app)
    assert "[ERROR] Failed to export file: file name cannot be empty" in out.getvalue()


def test_invalid_choice(tmp_path):
    app, out = make_app(tmp_path, "9\n4\n")
    file_menu(app)
    assert "Invalid choice. Please try again." in out.getvalue()
    assert app.storage.autosave_enabled is True