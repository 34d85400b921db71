from datetime import datetime

import pytest

from mclipboard.model import ClipboardManager, HistoryEntry, format_timestamp
from mclipboard.store import ClipboardStore


@pytest.fixture
def store(tmp_path):
    with ClipboardStore(tmp_path / "clip.db") as s:
        yield s


@pytest.fixture
def manager(store):
    return ClipboardManager(store)


def test_format_timestamp_pads_fields():
    assert format_timestamp(datetime(2024, 3, 5, 7, 8, 9)) == "2024-03-05 07:08:09"


def test_record_clipboard_uses_timestamp(manager, store):
    moment = datetime(2024, 3, 5, 7, 8, 9)
    assert manager.record_clipboard("hello", moment) is True
    assert manager.history() == [HistoryEntry(format_timestamp(moment), "hello")]
    assert store.history() == [(format_timestamp(moment), "hello")]


def test_record_clipboard_ignores_empty_and_blank(manager, store):
    assert manager.record_clipboard("") is False
    assert manager.record_clipboard("   \n") is False
    assert manager.history() == []
    assert store.history() == []


def test_history_newest_first_and_dedupe(manager):
    manager.add_history("a", "t1")
    manager.add_history("b", "t2")
    manager.add_history("a", "t3")
    assert manager.history() == [HistoryEntry("t3", "a"), HistoryEntry("t2", "b")]


def test_history_returns_copy(manager):
    manager.add_history("a", "t1")
    manager.history().clear()
    assert [e.content for e in manager.history()] == ["a"]


def test_favorites_newest_first_and_dedupe(manager, store):
    manager.add_favorite("x")
    manager.add_favorite("y")
    manager.add_favorite("x")
    assert manager.favorites() == ["x", "y"]
    assert store.favorites() == ["y", "x"]


def test_add_favorite_from_input_trims(manager):
    assert manager.add_favorite_from_input("  note  ") is True
    assert manager.favorites() == ["note"]
    assert manager.add_favorite_from_input("   ") is False
    assert manager.favorites() == ["note"]


def test_remove_history_also_removes_stored_favorite(manager, store):
    manager.add_history("a", "t1")
    manager.add_favorite("a")
    manager.remove_history("a")
    assert manager.history() == []
    assert store.history() == []
    assert store.favorites() == []
    assert manager.favorites() == ["a"]


def test_remove_favorite_also_removes_stored_history(manager, store):
    manager.add_history("a", "t1")
    manager.add_favorite("a")
    manager.remove_favorite("a")
    assert manager.favorites() == []
    assert store.favorites() == []
    assert store.history() == []
    assert [e.content for e in manager.history()] == ["a"]


def test_clear_history_and_favorites(manager, store):
    manager.add_history("a", "t1")
    manager.add_favorite("x")
    manager.clear_history()
    assert manager.history() == []
    assert store.history() == []
    assert manager.favorites() == ["x"]
    manager.clear_favorites()
    assert manager.favorites() == []
    assert store.favorites() == []


def test_load_reverses_store_order(store):
    store.add_history("a", "t1")
    store.add_history("b", "t2")
    store.add_favorite("x")
    store.add_favorite("y")
    manager = ClipboardManager(store)
    manager.load()
    assert manager.history() == [HistoryEntry("t2", "b"), HistoryEntry("t1", "a")]
    assert manager.favorites() == ["y", "x"]
    assert store.history() == [("t1", "a"), ("t2", "b")]
    assert store.favorites() == ["x", "y"]


def test_load_respects_limit(store):
    for n in range(4):
        store.add_history(f"item{n}", f"t{n}")
    manager = ClipboardManager(store)
    manager.load(2)
    assert [e.content for e in manager.history()] == ["item1", "item0"]


def test_load_skips_blank_stored_history(store):
    store.add_history("   ", "t1")
    store.add_history("a", "t2")
    manager = ClipboardManager(store)
    manager.load()
    assert [e.content for e in manager.history()] == ["a"]