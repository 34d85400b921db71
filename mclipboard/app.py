"""Desktop window that records clipboard text and manages favourites."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional, Sequence

from mclipboard.model import ClipboardManager, HistoryEntry
from mclipboard.store import DEFAULT_HISTORY_LIMIT, ClipboardStore

DEFAULT_POLL_INTERVAL = 500
DATABASE_NAME = "MClipboard.db"
WINDOW_TITLE = "MClipboard"
WINDOW_GEOMETRY = "1200x700"

PAGE_CLIPBOARD = 0
PAGE_FAVORITE = 1
PAGE_SETTING = 2


def default_database_path() -> Path:
    """Return the database file used when none is given."""
    return Path.home().resolve() / ".mclipboard" / DATABASE_NAME


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mclipboard",
        description="Keep a history of copied text and a list of favourites.",
    )
    parser.add_argument(
        "--database",
        type=Path,
        default=default_database_path(),
        help="SQLite file holding history and favourites",
    )
    parser.add_argument(
        "--poll-interval",
        type=_positive_int,
        default=DEFAULT_POLL_INTERVAL,
        help="milliseconds between clipboard checks",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_HISTORY_LIMIT,
        help="number of history entries loaded at start",
    )
    return parser


def _display(text: str) -> str:
    return " ".join(text.splitlines())


class ClipboardWindow:
    """Main window: a history page, a favourites page and a settings page."""

    def __init__(
        self,
        root,
        manager: ClipboardManager,
        poll_interval: int = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self._root = root
        self._manager = manager
        self._poll_interval = poll_interval
        self._history_rows: list[HistoryEntry] = []
        self._favorite_rows: list[str] = []

        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_GEOMETRY)
        root.protocol("WM_DELETE_WINDOW", self.hide)

        self._build()

        self._last_text = self._read_clipboard()
        self.refresh()
        self.select_page(PAGE_CLIPBOARD)
        self._root.after(self._poll_interval, self.poll_clipboard)

    # -- construction -------------------------------------------------

    def _build(self) -> None:
        from tkinter import ttk

        nav = ttk.Frame(self._root, padding=6)
        nav.pack(side="left", fill="y")
        container = ttk.Frame(self._root, padding=6)
        container.pack(side="left", fill="both", expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        for index, label in enumerate(("剪贴板", "收藏", "设置")):
            ttk.Button(
                nav, text=label, command=lambda i=index: self.select_page(i)
            ).pack(fill="x", pady=2)

        self._pages = [ttk.Frame(container) for _ in range(3)]
        for page in self._pages:
            page.grid(row=0, column=0, sticky="nsew")

        self._build_history_page(self._pages[PAGE_CLIPBOARD])
        self._build_favorite_page(self._pages[PAGE_FAVORITE])
        self._build_setting_page(self._pages[PAGE_SETTING])

    def _make_tree(self, parent, columns: Sequence[tuple[str, str, int, bool]]):
        from tkinter import ttk

        frame = ttk.Frame(parent)
        frame.pack(fill="both", expand=True)
        tree = ttk.Treeview(
            frame,
            columns=[name for name, _, _, _ in columns],
            show="headings",
            selectmode="browse",
        )
        for name, heading, width, stretch in columns:
            tree.heading(name, text=heading)
            tree.column(name, width=width, stretch=stretch, anchor="w")
        scrollbar = ttk.Scrollbar(frame, orient="vertical", command=tree.yview)
        tree.configure(yscrollcommand=scrollbar.set)
        tree.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")
        return tree

    def _button_row(self, parent, buttons: Sequence[tuple[str, Callable[[], None]]]):
        from tkinter import ttk

        row = ttk.Frame(parent)
        row.pack(fill="x", pady=(6, 0))
        for label, command in buttons:
            ttk.Button(row, text=label, command=command).pack(side="left", padx=(0, 10))
        return row

    def _build_history_page(self, page) -> None:
        self._history_tree = self._make_tree(
            page,
            (("time", "时间", 180, False), ("content", "内容", 600, True)),
        )
        self._history_tree.bind("<Double-1>", lambda _event: self._copy_history())
        self._button_row(
            page,
            (
                ("复制", self._copy_history),
                ("删除", self._delete_history),
                ("收藏", self._favorite_history),
                ("清空历史", self._clear_history),
            ),
        )

    def _build_favorite_page(self, page) -> None:
        from tkinter import ttk

        entry_row = ttk.Frame(page)
        entry_row.pack(fill="x", pady=(0, 6))
        self._favorite_entry = ttk.Entry(entry_row)
        self._favorite_entry.pack(side="left", fill="x", expand=True)
        self._favorite_entry.bind("<Return>", lambda _event: self._add_favorite_input())
        ttk.Button(entry_row, text="添加", command=self._add_favorite_input).pack(
            side="left", padx=(10, 0)
        )

        self._favorite_tree = self._make_tree(page, (("content", "内容", 600, True),))
        self._favorite_tree.bind("<Double-1>", lambda _event: self._copy_favorite())
        self._button_row(
            page,
            (
                ("复制", self._copy_favorite),
                ("删除", self._delete_favorite),
                ("清空收藏", self._clear_favorites),
            ),
        )

    def _build_setting_page(self, page) -> None:
        from tkinter import ttk

        ttk.Label(page, text=f"剪贴板检查间隔: {self._poll_interval} ms").pack(
            anchor="w", pady=(0, 10)
        )
        ttk.Button(page, text="退出", command=self._root.destroy).pack(anchor="w")

    # -- public operations --------------------------------------------

    def poll_clipboard(self) -> None:
        """Record clipboard text that changed since the last check."""
        text = self._read_clipboard()
        if text != self._last_text:
            self._last_text = text
            if self._manager.record_clipboard(text):
                self.refresh()
        self._root.after(self._poll_interval, self.poll_clipboard)

    def show(self) -> None:
        self._root.deiconify()
        self._root.lift()
        self._root.focus_force()

    def hide(self) -> None:
        self._root.iconify()

    def select_page(self, index: int) -> None:
        if not 0 <= index < len(self._pages):
            raise IndexError(f"no page {index}")
        self._pages[index].tkraise()

    def copy_text(self, text: str) -> None:
        """Put ``text`` on the system clipboard."""
        self._root.clipboard_clear()
        self._root.clipboard_append(text)

    def refresh(self) -> None:
        """Redraw both tables from the manager."""
        self._history_rows = self._manager.history()
        self._favorite_rows = self._manager.favorites()

        self._history_tree.delete(*self._history_tree.get_children())
        for index, entry in enumerate(self._history_rows):
            self._history_tree.insert(
                "", "end", iid=str(index), values=(entry.timestamp, _display(entry.content))
            )

        self._favorite_tree.delete(*self._favorite_tree.get_children())
        for index, content in enumerate(self._favorite_rows):
            self._favorite_tree.insert("", "end", iid=str(index), values=(_display(content),))

        if self._history_rows:
            self._history_tree.see("0")

    # -- helpers ------------------------------------------------------

    def _read_clipboard(self) -> str:
        from tkinter import TclError

        try:
            return self._root.clipboard_get()
        except TclError:
            return ""

    @staticmethod
    def _selected_index(tree) -> Optional[int]:
        selection = tree.selection()
        return int(selection[0]) if selection else None

    def _selected_history(self) -> Optional[HistoryEntry]:
        index = self._selected_index(self._history_tree)
        return None if index is None else self._history_rows[index]

    def _selected_favorite(self) -> Optional[str]:
        index = self._selected_index(self._favorite_tree)
        return None if index is None else self._favorite_rows[index]

    def _copy_history(self) -> None:
        entry = self._selected_history()
        if entry is not None:
            self.copy_text(entry.content)

    def _delete_history(self) -> None:
        entry = self._selected_history()
        if entry is not None:
            self._manager.remove_history(entry.content)
            self.refresh()

    def _favorite_history(self) -> None:
        entry = self._selected_history()
        if entry is not None:
            self._manager.add_favorite(entry.content)
            self.refresh()
            if self._favorite_rows:
                self._favorite_tree.see("0")

    def _clear_history(self) -> None:
        self._manager.clear_history()
        self.refresh()

    def _add_favorite_input(self) -> None:
        if self._manager.add_favorite_from_input(self._favorite_entry.get()):
            self._favorite_entry.delete(0, "end")
            self.refresh()

    def _copy_favorite(self) -> None:
        content = self._selected_favorite()
        if content is not None:
            self.copy_text(content)

    def _delete_favorite(self) -> None:
        content = self._selected_favorite()
        if content is not None:
            self._manager.remove_favorite(content)
            self.refresh()

    def _clear_favorites(self) -> None:
        self._manager.clear_favorites()
        self.refresh()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    import tkinter as tk
    from tkinter import ttk

    database: Path = args.database
    database.parent.mkdir(parents=True, exist_ok=True)

    with ClipboardStore(database) as store:
        manager = ClipboardManager(store)
        manager.load(args.limit)

        root = tk.Tk()
        style = ttk.Style(root)
        if "clam" in style.theme_names():
            style.theme_use("clam")
        ClipboardWindow(root, manager, args.poll_interval)
        root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())