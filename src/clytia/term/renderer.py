"""Terminal output: control sequences, colors, width queries."""

from __future__ import annotations

import contextlib
import logging
import shutil
from typing import Iterator, TextIO

import click

from clytia.core.errors import TerminalIOError

logger = logging.getLogger(__name__)

CLEAR_LINE = "\x1b[2K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET_FG = "\x1b[39m"

_FALLBACK_SIZE = (80, 24)


def cursor_up(n: int = 1) -> str:
    return f"\x1b[{n}A"


class Renderer:
    """Writes text and control sequences to one output stream.

    Stream failures surface as TerminalIOError so callers only ever deal with
    Clytia's own error types.
    """

    def __init__(self, stream: TextIO, *, color: bool = True) -> None:
        self.stream = stream
        self.color = color

    def write(self, text: str) -> None:
        try:
            self.stream.write(text)
        except (OSError, ValueError) as exc:
            raise TerminalIOError(f"IO Error: {exc}") from exc

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise TerminalIOError(f"IO Error: {exc}") from exc

    def paint(self, text: str, color: str) -> str:
        """Color *text*; the span ends with a foreground-only reset, not a full one."""
        if not self.color:
            return text
        return click.style(text, fg=color, reset=False) + RESET_FG

    def clear_line(self) -> None:
        self.write(CLEAR_LINE)

    def cursor_up(self, n: int = 1) -> None:
        self.write(cursor_up(n))

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def erase_lines(self, count: int) -> None:
        """Erase the *count* lines above the cursor and return to column 0."""
        self.write((cursor_up(1) + CLEAR_LINE) * count + "\r")

    def columns(self) -> int:
        return shutil.get_terminal_size(_FALLBACK_SIZE).columns

    @contextlib.contextmanager
    def cursor_hidden(self) -> Iterator["Renderer"]:
        """Hide the cursor for the duration of the block; it is shown again on every exit path."""
        self.hide_cursor()
        try:
            yield self
        finally:
            self.write("\r" + SHOW_CURSOR)
            self.flush()
