"""An interactive console to-do list with undo, sorting, autosave and export."""

__version__ = "0.1.0"
__all__ = ["__version__"]