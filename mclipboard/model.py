"""In-memory clipboard history and favourites kept in step with a store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from mclipboard.store import DEFAULT_HISTORY_LIMIT, ClipboardStore

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    """Format a moment as ``yyyy-MM-dd hh:mm:ss``."""
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class HistoryEntry:
    """One copied text and the time it was copied."""

    timestamp: str
    content: str


class ClipboardManager:
    """Keeps history and favourites, newest first, and mirrors them to a store."""

    def __init__(self, store: ClipboardStore) -> None:
        self._store = store
        self._history: list[HistoryEntry] = []
        self._favorites: list[str] = []

    def load(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        """Fill the lists from the store."""
        for time, content in self._store.history(limit):
            self.add_history(content, time)
        for content in self._store.favorites():
            self.add_favorite(content)

    def history(self) -> list[HistoryEntry]:
        return list(self._history)

    def favorites(self) -> list[str]:
        return list(self._favorites)

    def record_clipboard(self, text: str, now: Optional[datetime] = None) -> bool:
        """Record new clipboard text; empty text is ignored."""
        if not text:
            return False
        moment = now if now is not None else datetime.now()
        return self.add_history(text, format_timestamp(moment))

    def add_history(self, text: str, timestamp: str) -> bool:
        """Put ``text`` at the top of the history; blank text is ignored."""
        if not text.strip():
            return False
        self._history = [e for e in self._history if e.content != text]
        self._history.insert(0, HistoryEntry(timestamp, text))
        self._store.add_history(text, timestamp)
        return True

    def add_favorite(self, text: str) -> None:
        """Put ``text`` at the top of the favourites."""
        self._favorites = [f for f in self._favorites if f != text]
        self._favorites.insert(0, text)
        self._store.add_favorite(text)

    def add_favorite_from_input(self, text: str) -> bool:
        """Add typed text as a favourite after trimming; blank input is ignored."""
        content = text.strip()
        if not content:
            return False
        self.add_favorite(content)
        return True

    def remove_history(self, content: str) -> None:
        """Drop ``content`` from the history list and from both stored tables."""
        self._store.remove_history(content)
        self._store.remove_favorite(content)
        self._history = [e for e in self._history if e.content != content]

    def remove_favorite(self, content: str) -> None:
        """Drop ``content`` from the favourites list and from both stored tables."""
        self._store.remove_history(content)
        self._store.remove_favorite(content)
        self._favorites = [f for f in self._favorites if f != content]

    def clear_history(self) -> None:
        self._store.clear_history()
        self._history.clear()

    def clear_favorites(self) -> None:
        self._store.clear_favorites()
        self._favorites.clear()