"""Clipboard history and favorites manager backed by SQLite, with a Tk window."""

__version__ = "1.0.0"
__all__ = ["__version__"]