import pytest

from todolist import color


@pytest.mark.parametrize(
    ("func", "code"),
    [
        (color.blue, "\033[34m"),
        (color.green, "\033[32m"),
        (color.yellow, "\033[38;5;214m"),
        (color.red, "\033[31m"),
        (color.magenta, "\033[35m"),
    ],
)
def test_wraps_text_in_codes(func, code):
    assert func("hello") == code + "hello" + "\033[0m"


@pytest.mark.parametrize(
    "func", [color.blue, color.green, color.yellow, color.red, color.magenta]
)
def test_empty_text_still_resets(func):
    result = func("")
    assert result.endswith("\033[0m")
    assert result.startswith("\033[")


def test_text_is_preserved_in_the_middle():
    text = "Task #3 added!"
    wrapped = color.green(text)
    assert text in wrapped
    assert len(wrapped) == len(text) + len("\033[32m") + len("\033[0m")