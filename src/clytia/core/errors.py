"""Error types raised by Clytia operations."""

from __future__ import annotations


class ClytiaError(Exception):
    """Base class for all Clytia errors."""


class InputRequiredError(ClytiaError):
    """Raised when input was required but the user entered nothing."""

    def __init__(self) -> None:
        super().__init__("non optional input, but no input given")


class ParseError(ClytiaError):
    """Raised when the given input could not be converted to the requested type."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Could not parse: {raw}")
        self.raw = raw


class TerminalIOError(ClytiaError):
    """Raised when reading from or writing to the terminal fails."""


class InputClosedError(TerminalIOError):
    """Raised when the input stream ends while an answer is still required."""


class InvalidOptionSetError(ClytiaError, ValueError):
    """Raised when a menu is given no options to choose from."""


class ConfigError(ClytiaError, ValueError):
    """Raised when settings taken from the environment are invalid."""
