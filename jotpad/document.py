"""Document state and text helpers for the notebook editor."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "记事本"

ENCODINGS = {
    "UTF-8": "utf-8",
    "UTF-16": "utf-16",
    "UTF-16BE": "utf-16-be",
    "UTF-16LE": "utf-16-le",
}

_DEFAULT_ENCODING = ENCODINGS["UTF-8"]
_ZOOM_STEP = 2
_UNKNOWN_SIZE = -1


def resolve_encoding(name):
    """Return the codec for a displayed encoding name, UTF-8 if unknown."""
    return ENCODINGS.get(name, _DEFAULT_ENCODING)


def _resize(size, step):
    if size == _UNKNOWN_SIZE:
        return size
    new_size = size + step
    # A font cannot take a size of zero or below; the old size is kept.
    return new_size if new_size > 0 else size


def zoom_in(size):
    """Return the font size one zoom step larger."""
    return _resize(size, _ZOOM_STEP)


def zoom_out(size):
    """Return the font size one zoom step smaller."""
    return _resize(size, -_ZOOM_STEP)


def wheel_zoom(size, delta, ctrl):
    """Apply a wheel turn to a font size.

    Returns the new size and whether the wheel event was consumed; it is
    consumed only while Control is held.
    """
    if not ctrl:
        return size, False
    if delta > 0:
        return zoom_in(size), True
    if delta < 0:
        return zoom_out(size), True
    return size, True


def position_label(line, column):
    """Format a zero-based cursor line and column for the status label."""
    return f"行号:{line + 1},列号:{column + 1}  "


def window_title(path):
    """Return the window title for the given file path, or the bare name."""
    if not path:
        return APP_NAME
    return f"{path}-{APP_NAME}"


def _split_lines(content):
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def _read_lines(path, codec, mode):
    with open(path, mode, encoding=codec, errors="replace") as handle:
        handle.seek(0)
        return _split_lines(handle.read())


class Document:
    """The file behind the editor and the operations on it."""

    def __init__(self):
        self._path = None
        self._readable = False

    @property
    def path(self):
        return self._path

    @property
    def is_open(self):
        return self._path is not None

    @property
    def title(self):
        return window_title(str(self._path) if self._path else None)

    def open(self, paths, encoding):
        """Open each path in turn and return the text of all of them.

        Paths that cannot be opened are skipped; a missing file is created.
        The last file opened becomes the current document.
        """
        codec = resolve_encoding(encoding)
        lines = []
        for path in paths:
            try:
                lines.extend(_read_lines(path, codec, "a+"))
            except OSError as error:
                logger.debug("open error: %s", error)
                continue
            self._path = Path(path)
            self._readable = True
        return "\n".join(lines)

    def save(self, text, encoding, path=None):
        """Append text to the current file, or to path if none is open."""
        codec = resolve_encoding(encoding)
        if self.is_open:
            target = self._path
        else:
            if not path:
                raise ValueError("no file to save to")
            target = Path(path)
        with open(target, "a", encoding=codec) as handle:
            handle.write(text)
        if not self.is_open:
            self._path = target
            self._readable = False

    def reload(self, encoding):
        """Read the current file again from the start with a new encoding."""
        if not self.is_open or not self._readable:
            return ""
        return "\n".join(_read_lines(self._path, resolve_encoding(encoding), "r"))

    def close(self):
        """Forget the current file."""
        self._path = None
        self._readable = False

    def needs_prompt(self, text):
        """Tell whether closing should ask the user about unsaved work."""
        return self.is_open or bool(text)