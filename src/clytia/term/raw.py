"""Raw-mode terminal sessions.

Raw mode delivers every keystroke immediately, unbuffered and unechoed.
The previous terminal attributes are restored when the session ends,
on normal exit and when the body raises.
"""

from __future__ import annotations

import contextlib
import io
import logging
import os
from typing import Iterator, TextIO

from clytia.core.errors import TerminalIOError

logger = logging.getLogger(__name__)


def _tty_fileno(stream: TextIO) -> int | None:
    """File descriptor of *stream* if it is a POSIX terminal, else None."""
    if os.name == "nt":
        return None
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, io.UnsupportedOperation):
        return None
    return fd if os.isatty(fd) else None


@contextlib.contextmanager
def raw_mode(stream: TextIO) -> Iterator[None]:
    """Put the terminal behind *stream* into raw mode for the duration of the block.

    Streams that are not terminals (pipes, in-memory buffers) pass through
    unchanged.
    """
    fd = _tty_fileno(stream)
    if fd is None:
        yield
        return

    import termios
    import tty

    try:
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    except termios.error as exc:
        raise TerminalIOError(f"IO Error: could not enter raw mode: {exc}") from exc
    logger.debug("Raw mode enabled on fd %d", fd)
    try:
        yield
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        except termios.error as exc:
            raise TerminalIOError(f"IO Error: could not restore terminal mode: {exc}") from exc
        logger.debug("Raw mode restored on fd %d", fd)
