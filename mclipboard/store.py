"""SQLite persistence for clipboard history and favourites."""

from __future__ import annotations

import os
import sqlite3
from typing import Union

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS history ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "time TEXT,"
    "content TEXT UNIQUE)",
    "CREATE TABLE IF NOT EXISTS favorite ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "content TEXT UNIQUE)",
)

DEFAULT_HISTORY_LIMIT = 200


class ClipboardStore:
    """Stores clipboard history entries and favourites in an SQLite file.

    Adding content that is already present moves it to the end, so it
    reads back as the most recently added item.
    """

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self._conn = sqlite3.connect(os.fspath(path))
        with self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "ClipboardStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def add_history(self, content: str, time: str) -> None:
        """Record ``content`` copied at ``time``, replacing an older copy."""
        with self._conn:
            self._conn.execute("DELETE FROM history WHERE content=?", (content,))
            self._conn.execute(
                "INSERT INTO history (time, content) VALUES (?, ?)", (time, content)
            )

    def remove_history(self, content: str) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM history WHERE content=?", (content,))

    def clear_history(self) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM history")

    def history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> list[tuple[str, str]]:
        """Return up to ``limit`` ``(time, content)`` pairs, oldest first."""
        rows = self._conn.execute(
            "SELECT time, content FROM history ORDER BY id LIMIT ?", (limit,)
        )
        return [(str(time), str(content)) for time, content in rows]

    def add_favorite(self, content: str) -> None:
        """Store ``content`` as a favourite, replacing an older copy."""
        with self._conn:
            self._conn.execute("DELETE FROM favorite WHERE content=?", (content,))
            self._conn.execute("INSERT INTO favorite (content) VALUES (?)", (content,))

    def remove_favorite(self, content: str) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM favorite WHERE content=?", (content,))

    def clear_favorites(self) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM favorite")

    def favorites(self) -> list[str]:
        """Return all favourites, oldest first."""
        rows = self._conn.execute("SELECT content FROM favorite ORDER BY id")
        return [str(content) for (content,) in rows]