"""ANSI colour helpers for console output."""

BLUE = "\033[34m"
GREEN = "\033[32m"
YELLOW = "\033[38;5;214m"
RED = "\033[31m"
MAGENTA = "\033[35m"
RESET = "\033[0m"


def _wrap(code: str, text: str) -> str:
    return f"{code}{text}{RESET}"


def blue(text: str) -> str:
    """Wrap text in blue, used for menu headers and system messages."""
    return _wrap(BLUE, text)


def green(text: str) -> str:
    """Wrap text in green, used for successful actions."""
    return _wrap(GREEN, text)


def yellow(text: str) -> str:
    """Wrap text in yellow, used for warnings and prompts."""
    return _wrap(YELLOW, text)


def red(text: str) -> str:
    """Wrap text in red, used for cancellations and denials."""
    return _wrap(RED, text)


def magenta(text: str) -> str:
    """Wrap text in magenta, used for errors."""
    return _wrap(MAGENTA, text)