# mclipboard

mclipboard keeps a history of the text you copy and a list of favorite
snippets. It checks the system clipboard at a fixed interval, stores every
new piece of text in a small SQLite database, and shows everything in a
Tk window with three pages: clipboard history, favorites and settings.

## Installing

```
pip install .
```

The window uses Tkinter, which comes with most Python installations. The
package has no other dependencies.

## Running

```
mclipboard
```

Options:

- `--database PATH` – the SQLite file holding history and favorites
  (default: `~/.mclipboard/MClipboard.db`; the directory is created if
  needed).
- `--poll-interval MS` – milliseconds between clipboard checks, a positive
  integer (default: 500).
- `--limit N` – how many history entries are loaded at start (default: 200).

In the window:

- The **clipboard** page lists copied text with its time, newest first.
  Select a row and use the buttons to copy it back to the clipboard,
  delete it, add it to favorites, or clear the whole history.
  Double-clicking a row copies it.
- The **favorites** page lists saved snippets, newest first. Type text into
  the input field and press Enter or the add button to save it (leading and
  trailing whitespace is trimmed, blank input is ignored). Selected
  favorites can be copied or deleted, and the whole list can be cleared.
- The **settings** page shows the polling interval and has a button that
  quits the program.

Closing the window minimizes it instead of quitting.

Copying the same text again moves it to the top instead of adding a
duplicate. Blank text is ignored. Deleting an entry from either page
removes that text from both the stored history and the stored favorites.

## Using the library

The storage and the list logic can be used without the window:

```python
from mclipboard.store import ClipboardStore
from mclipboard.model import ClipboardManager

with ClipboardStore("clips.db") as store:
    manager = ClipboardManager(store)
    manager.load(200)
    manager.add_history("hello", "2024-01-01 12:00:00")
    manager.add_favorite("a snippet")
    for entry in manager.history():
        print(entry.timestamp, entry.content)
    print(manager.favorites())
```

- `ClipboardStore(path)` opens (and creates) the database. Its `history(limit)`
  returns `(time, content)` pairs and `favorites()` returns strings, both
  oldest first.
- `ClipboardManager` keeps the lists newest first and writes every change
  through to the store. `history()` returns `HistoryEntry` objects with
  `timestamp` and `content`.
- `ClipboardManager.record_clipboard(text, now)` records text copied at the
  datetime `now` (the current time if omitted), formatted by
  `format_timestamp` as `YYYY-MM-DD hh:mm:ss`. It returns `False` for empty
  or blank text.

## What it does not do

There is no system tray icon and no frameless, draggable window; the
program runs as an ordinary Tk window that is minimized when closed.
Clipboard changes are detected by polling, and only text is recorded.

## Running the tests

```
pip install .[test]
pytest
```