"""Input decoding: single key events for menus, whole lines for prompts."""

from __future__ import annotations

from typing import TextIO

from clytia.core.errors import InputClosedError, TerminalIOError
from clytia.core.models import Key

_ESCAPE_SEQUENCES = {
    "[A": Key.UP,
    "[B": Key.DOWN,
    "[C": Key.RIGHT,
    "[D": Key.LEFT,
    "OA": Key.UP,
    "OB": Key.DOWN,
    "OC": Key.RIGHT,
    "OD": Key.LEFT,
}

_CONTROL_KEYS = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    " ": Key.SPACE,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}

_CTRL_C = "\x03"


def _read(stream: TextIO, size: int) -> str:
    try:
        return stream.read(size)
    except (OSError, ValueError) as exc:
        raise TerminalIOError(f"IO Error: {exc}") from exc


class KeyReader:
    """Decodes key events from one input stream.

    Named keys come back as Key members, anything else as the character
    itself. A character read after ESC that does not start an escape
    sequence is held back and returned by the next read.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._pending = ""

    def _next(self) -> str:
        if self._pending:
            ch, self._pending = self._pending[0], self._pending[1:]
            return ch
        return _read(self.stream, 1)

    def read(self) -> Key | str:
        """Block until one key event arrives."""
        ch = self._next()
        if not ch:
            raise InputClosedError("input closed before a selection was confirmed")
        if ch == _CTRL_C:
            # Raw mode turns off the terminal's own interrupt handling.
            raise KeyboardInterrupt
        if ch == "\x1b":
            return self._escape()
        return _CONTROL_KEYS.get(ch, ch)

    def _escape(self) -> Key:
        lead = self._next()
        if lead not in ("[", "O"):
            self._pending = lead + self._pending
            return Key.ESCAPE
        # Unknown sequences are dropped whole.
        return _ESCAPE_SEQUENCES.get(lead + self._next(), Key.ESCAPE)


def read_line(stream: TextIO) -> str | None:
    """Read one line without its terminator; None once the stream is exhausted."""
    try:
        line = stream.readline()
    except (OSError, ValueError) as exc:
        raise TerminalIOError(f"IO Error: {exc}") from exc
    if not line:
        return None
    return line.rstrip("\r\n")
