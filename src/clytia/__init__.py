"""Clytia: prompts, menus, spinners and progress bars for terminal programs."""

from __future__ import annotations

__version__ = "0.1.0"

from clytia.console import Clytia  # noqa: E402
from clytia.core.errors import (  # noqa: E402
    ClytiaError,
    ConfigError,
    InputClosedError,
    InputRequiredError,
    InvalidOptionSetError,
    ParseError,
    TerminalIOError,
)
from clytia.core.models import Key, Outcome  # noqa: E402
from clytia.core.settings import Settings, load_settings  # noqa: E402

__all__ = [
    "Clytia",
    "ClytiaError",
    "ConfigError",
    "InputClosedError",
    "InputRequiredError",
    "InvalidOptionSetError",
    "Key",
    "Outcome",
    "ParseError",
    "Settings",
    "TerminalIOError",
    "load_settings",
]
