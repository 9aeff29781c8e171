"""Tk window for the notebook editor."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox, ttk
from tkinter import font as tkfont

from .document import (
    ENCODINGS,
    Document,
    position_label,
    wheel_zoom,
    zoom_in,
    zoom_out,
)

_SHIFT_MASK = 0x0001
_CONTROL_MASK = 0x0004
_ALT_MASK = 0x0008
_MODIFIER_MASK = _SHIFT_MASK | _CONTROL_MASK | _ALT_MASK
_WHEEL_STEP = 120
_FILE_TYPES = [("Text", "*.txt *.doc")]
_HIGHLIGHT = "current_line"


def _event_delta(event):
    """Return the wheel offset of an event, positive when scrolling up."""
    num = getattr(event, "num", None)
    if num == 4:
        return _WHEEL_STEP
    if num == 5:
        return -_WHEEL_STEP
    return int(getattr(event, "delta", 0) or 0)


def _ctrl_held(event):
    """Tell whether Control, and no other modifier, is held."""
    state = getattr(event, "state", 0)
    if not isinstance(state, int):
        return False
    return state & _MODIFIER_MASK == _CONTROL_MASK


def _cursor_position(index):
    """Turn a Tk text index into a zero-based line and column."""
    line, column = index.split(".")
    return int(line) - 1, int(column)


class NotebookWindow:
    """The editor window: text area, encoding choice and file buttons."""

    def __init__(self, root):
        self.root = root
        self.document = Document()
        self.font = tkfont.Font(root=root, family="Courier", size=12)

        body = ttk.Frame(root)
        body.pack(fill=tk.BOTH, expand=True)
        self.text = tk.Text(body, font=self.font, undo=True, wrap=tk.WORD)
        scroll = ttk.Scrollbar(body, command=self.text.yview)
        self.text.configure(yscrollcommand=scroll.set)
        scroll.pack(side=tk.RIGHT, fill=tk.Y)
        self.text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.text.tag_configure(_HIGHLIGHT, background="lightgray", underline=True)

        bottom = ttk.Frame(root)
        bottom.pack(fill=tk.X)
        ttk.Button(bottom, text="打开", command=self.open_files).pack(side=tk.LEFT)
        ttk.Button(bottom, text="保存", command=self.save_file).pack(side=tk.LEFT)
        ttk.Button(bottom, text="关闭", command=self.close_file).pack(side=tk.LEFT)
        self.position = ttk.Label(bottom, text=position_label(0, 0))
        self.position.pack(side=tk.RIGHT)
        self.encoding = ttk.Combobox(bottom, values=list(ENCODINGS), state="readonly")
        self.encoding.current(0)
        self.encoding.pack(side=tk.RIGHT)

        self.encoding.bind("<<ComboboxSelected>>", self.change_encoding)
        for sequence in ("<KeyRelease>", "<ButtonRelease-1>"):
            self.text.bind(sequence, self.update_position, add="+")
        for sequence in ("<MouseWheel>", "<Button-4>", "<Button-5>"):
            self.text.bind(sequence, self.on_wheel)

        shortcuts = {
            "<Control-o>": self.open_files,
            "<Control-s>": self.save_file,
            "<Control-plus>": self.zoom_in,
            "<Control-underscore>": self.zoom_out,
        }
        for sequence, action in shortcuts.items():
            handler = self._shortcut(action)
            self.text.bind(sequence, handler)
            self.root.bind(sequence, handler)

        self.root.title(self.document.title)
        self.update_position()

    @staticmethod
    def _shortcut(action):
        def handler(_event):
            action()
            return "break"

        return handler

    def _current_text(self):
        return self.text.get("1.0", "end-1c")

    def _show(self, content):
        self.text.delete("1.0", tk.END)
        self.text.insert("1.0", content)
        self.update_position()

    def open_files(self):
        """Ask for files and show their contents."""
        paths = filedialog.askopenfilenames(
            parent=self.root, title="打开文件", filetypes=_FILE_TYPES
        )
        self._show(self.document.open(list(paths), self.encoding.get()))
        self.root.title(self.document.title)

    def save_file(self):
        """Append the text to the current file, asking for one if needed."""
        path = None
        if not self.document.is_open:
            path = filedialog.asksaveasfilename(
                parent=self.root, title="Save File", filetypes=_FILE_TYPES
            )
            if not path:
                return
        try:
            self.document.save(self._current_text(), self.encoding.get(), path)
        except OSError as error:
            messagebox.showerror("File Save", str(error), parent=self.root)
            return
        self.root.title(self.document.title)
        messagebox.showinfo("File Save", "保存成功", parent=self.root)

    def close_file(self):
        """Close the document, asking first when there is unsaved work."""
        if not self.document.needs_prompt(self._current_text()):
            self._show("")
            return
        answer = messagebox.askyesnocancel("提醒", "你还有文件未保存", parent=self.root)
        if answer is None:
            return
        if answer:
            self.save_file()
            return
        self.document.close()
        self.root.title(self.document.title)
        self._show("")

    def change_encoding(self, event=None):
        """Show the current file again, read with the chosen encoding."""
        self._show(self.document.reload(self.encoding.get()))

    def update_position(self, event=None):
        """Refresh the position label and the current-line highlight."""
        line, column = _cursor_position(self.text.index(tk.INSERT))
        self.position.configure(text=position_label(line, column))
        self.text.tag_remove(_HIGHLIGHT, "1.0", tk.END)
        self.text.tag_add(_HIGHLIGHT, "insert linestart", "insert lineend+1c")

    def _set_size(self, size):
        self.font.configure(size=size)

    def zoom_in(self):
        self._set_size(zoom_in(self.font.cget("size")))

    def zoom_out(self):
        self._set_size(zoom_out(self.font.cget("size")))

    def on_wheel(self, event):
        """Zoom on Control+wheel; otherwise let the wheel scroll."""
        size, handled = wheel_zoom(
            self.font.cget("size"), _event_delta(event), _ctrl_held(event)
        )
        if not handled:
            return None
        self._set_size(size)
        return "break"


def main(argv=None):
    """Start the editor window."""
    root = tk.Tk()
    NotebookWindow(root)
    root.mainloop()
    return 0