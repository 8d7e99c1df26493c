import io

from todolist import color
from todolist.app import App
from todolist.history import History
from todolist.show import format_list, progress_line, show_menu, sort_by_completed
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


def test_progress_line_empty_list():
    assert progress_line(0, 0) == color.red("[----------]") + " 0.0% " + " (0/0)"


def test_progress_line_half_is_yellow():
    line = progress_line(1, 2)
    assert line.startswith(color.YELLOW)
    assert "[#####-----]" in line
    assert "50.0%" in line
    assert line.endswith("(1/2)")


def test_progress_line_complete_is_green():
    line = progress_line(2, 2)
    assert line.startswith(color.GREEN)
    assert "-" not in line.split("]")[0]
    assert line.endswith("(2/2)")


def test_progress_line_none_done_is_red():
    line = progress_line(0, 3)
    assert line.startswith(color.RED)
    assert "#" not in line
    assert line.endswith("(0/3)")


def test_format_list_has_header_and_rows():
    tasks = TaskList([Task("wash car"), Task("read book", True)])
    lines = format_list(tasks).split("\n")
    assert len(lines) == 3
    assert "Status" in lines[0]
    assert "[ ]" in lines[1] and lines[1].endswith("wash car")
    assert "[x]" in lines[2] and lines[2].endswith("read book")


def test_sort_moves_completed_first_and_undo_restores():
    tasks = TaskList([Task("a"), Task("b", True), Task("c"), Task("d", True)])
    history = History()
    assert sort_by_completed(tasks, history) is True
    assert [t.completed for t in tasks] == [True, True, False, False]
    assert [t.title for t in tasks] == ["b", "d", "a", "c"]
    assert len(history) == 1
    history.undo(tasks)
    assert [t.title for t in tasks] == ["a", "b", "c", "d"]


def test_sort_already_sorted_records_nothing():
    tasks = TaskList([Task("a", True), Task("b")])
    history = History()
    assert sort_by_completed(tasks, history) is False
    assert len(history) == 0
    assert [t.title for t in tasks] == ["a", "b"]


def test_show_menu_sorts_and_saves(tmp_path):
    app, out = make_app(tmp_path, "1\n2\n", [Task("a"), Task("b", True)])
    show_menu(app)
    assert "List sorted." in out.getvalue()
    saved = load_tasks(str(tmp_path / "tasks.json"))
    assert [t.title for t in saved] == ["b", "a"]


def test_show_menu_invalid_choice(tmp_path):
    app, out = make_app(tmp_path, "x\n2\n")
    show_menu(app)
    assert "Invalid choice. Please try again." in out.getvalue()
    assert len(app.history) == 0