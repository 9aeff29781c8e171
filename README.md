# jotpad

jotpad is a small desktop notebook for plain text files. The window is built
on Tkinter, so nothing beyond the standard library is needed (your Python must
include Tk).

## Features

- **Open** (button or `Ctrl+O`) lets you pick one or more `.txt` / `.doc`
  files. Their contents are shown one after another, and the window title
  names the last file that opened. A file that cannot be opened is skipped; a
  chosen file that does not exist yet is created empty.
- **Encoding** selector: UTF-8, UTF-16, UTF-16BE or UTF-16LE. Choosing another
  encoding reads the open file again from the start with it. Bytes that do not
  decode are shown as replacement characters.
- **Save** (button or `Ctrl+S`) appends the editor's text to the open file. If
  no file is open you are asked for a file name first; cancelling that dialog
  saves nothing. A message confirms the save, or shows the error if writing
  failed.
- **Close** asks about unsaved work when a file is open or the editor is not
  empty: *Yes* saves, *No* forgets the file and clears the editor, *Cancel*
  does nothing. With no file and no text it just clears the editor.
- The status line shows the cursor's line and column (counted from 1). The
  current line is highlighted in light gray and underlined.
- Font zoom in steps of two points: `Ctrl+Shift+=` / `Ctrl+Shift+-`
  (bound as `Control-plus` and `Control-underscore`), or the mouse wheel while
  Control alone is held. Without Control the wheel scrolls as usual. The size
  never drops to zero or below.

## Installation

```
pip install .
```

## Usage

Start the editor:

```
jotpad
```

The window is `jotpad.gui.NotebookWindow`, which can be placed in any Tk root:

```python
import tkinter as tk
from jotpad.gui import NotebookWindow

root = tk.Tk()
NotebookWindow(root)
root.mainloop()
```

### File handling without the window

`jotpad.document.Document` holds the current file:

```python
from jotpad.document import Document

doc = Document()
text = doc.open(["notes.txt"], "UTF-8")   # text of all files, joined by newlines
print(doc.title)                           # "notes.txt-记事本"
doc.save("\nmore", "UTF-8")                # appends to notes.txt
again = doc.reload("UTF-16")               # re-read with another encoding
doc.close()
```

- `Document.open(paths, encoding)` returns the text of the files it could open;
  the last of them becomes the current file.
- `Document.save(text, encoding, path=None)` appends to the current file, or to
  `path` when no file is open (which then becomes current). It raises
  `ValueError` if there is neither.
- `Document.reload(encoding)` returns the current file's text read with the
  given encoding, or an empty string when there is nothing to re-read (no file,
  or a file that was only created by saving).
- `Document.close()` forgets the current file.
- `Document.needs_prompt(text)` tells whether closing should ask about unsaved
  work.
- `Document.path`, `Document.is_open` and `Document.title` describe the current
  file.

Helpers in the same module:

- `resolve_encoding(name)`: the codec for a selector name; unknown names give
  UTF-8.
- `zoom_in(size)` / `zoom_out(size)`: the size two points up or down; a size of
  -1 is left as it is.
- `wheel_zoom(size, delta, ctrl)`: the size after a wheel step and whether the
  event was used (only when `ctrl` is true).
- `position_label(line, column)`: the status text for a zero-based position.
- `window_title(path)`: the window title for a file path, or the bare
  application name when there is none.

## What it does not do

Saving always appends to the file; there is no overwrite and no "save as" for
a file that is already open. There are no menus, no search and no recent-files
list.

## Running the tests

```
pip install .[test]
pytest
```