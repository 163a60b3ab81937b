"""Data shapes shared by the live renderers and the selection menus.

Every object here lives for exactly one operation call:

    Outcome            result of the task run under a spinner or progress bar
    SelectionState     highlighted row of a single-choice menu
    MultiSelectState   highlighted row plus the checked rows of a multi-choice menu
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

from clytia.core.errors import InvalidOptionSetError

R = TypeVar("R")
E = TypeVar("E", bound=BaseException)


# ── Task layer ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Outcome(Generic[R, E]):
    """What a task produced: its return value, or the exception it raised."""

    value: R | None = None
    error: E | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> R | None:
        """Return the task's value, re-raising its exception if it failed."""
        if self.error is not None:
            raise self.error
        return self.value


# ── Input layer ─────────────────────────────────────────────────────


class Key(str, Enum):
    """Named key events decoded from raw terminal input."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    TAB = "tab"
    BACKSPACE = "backspace"
    ESCAPE = "esc"


# ── Menu layer ──────────────────────────────────────────────────────


@dataclass
class SelectionState:
    """Highlight cursor over an immutable, non-empty option sequence."""

    options: tuple[Any, ...]
    highlighted: int = 0

    def __post_init__(self) -> None:
        self.options = tuple(self.options)
        if not self.options:
            raise InvalidOptionSetError("a menu needs at least one option")
        if not 0 <= self.highlighted < len(self.options):
            raise IndexError(f"highlighted row out of range: {self.highlighted}")

    @classmethod
    def of(cls, options: Sequence[Any]) -> "SelectionState":
        return cls(options=tuple(options))

    def __len__(self) -> int:
        return len(self.options)

    def move_up(self) -> None:
        n = len(self.options)
        self.highlighted = (self.highlighted + n - 1) % n

    def move_down(self) -> None:
        self.highlighted = (self.highlighted + 1) % len(self.options)

    def handle(self, key: Key | str) -> None:
        """Apply a navigation key; keys without a meaning are ignored."""
        if key == Key.UP:
            self.move_up()
        elif key == Key.DOWN:
            self.move_down()

    @property
    def current(self) -> Any:
        return self.options[self.highlighted]


@dataclass
class MultiSelectState(SelectionState):
    """Selection state that also tracks which rows are checked."""

    selected: set[int] = field(default_factory=set)

    def toggle(self) -> None:
        if self.highlighted in self.selected:
            self.selected.discard(self.highlighted)
        else:
            self.selected.add(self.highlighted)

    def handle(self, key: Key | str) -> None:
        if key == Key.SPACE:
            self.toggle()
        else:
            super().handle(key)

    def is_checked(self, index: int) -> bool:
        return index in self.selected

    def chosen(self) -> list[Any]:
        """Checked options in their original order, not the order they were toggled."""
        return [option for index, option in enumerate(self.options) if index in self.selected]
