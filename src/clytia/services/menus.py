"""Arrow-key menus: pick one option, or check several."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, Sequence, TextIO

from clytia.core import glyphs
from clytia.core.models import Key, MultiSelectState, SelectionState
from clytia.term.raw import raw_mode
from clytia.term.reader import KeyReader
from clytia.term.renderer import Renderer

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _menu_session(stream: TextIO, renderer: Renderer) -> Iterator[None]:
    """Raw input and a hidden cursor, both undone on every exit path."""
    with raw_mode(stream), renderer.cursor_hidden():
        yield


# ── single choice ───────────────────────────────────────────────────


def _draw_options(renderer: Renderer, state: SelectionState) -> None:
    for index, option in enumerate(state.options):
        if index == state.highlighted:
            renderer.write(renderer.paint(f"{glyphs.HIGHLIGHT_PREFIX}{option}", glyphs.ACTIVE) + "\r\n")
        else:
            renderer.write(f"{glyphs.PLAIN_PREFIX}{option}\r\n")
    renderer.flush()


def options_menu(stream: TextIO, renderer: Renderer, options: Sequence[Any]) -> Any:
    """Let the user highlight one option with Up/Down and confirm it with Enter.

    Returns the chosen option object. Raises InvalidOptionSetError for an
    empty *options* before touching the terminal.
    """
    state = SelectionState.of(options)
    n = len(state)
    keys = KeyReader(stream)

    with _menu_session(stream, renderer):
        _draw_options(renderer, state)
        while True:
            key = keys.read()
            if key == Key.ENTER:
                break
            state.handle(key)
            renderer.erase_lines(n)
            _draw_options(renderer, state)

        renderer.erase_lines(n)
        renderer.write(
            "\r" + renderer.paint(f"{glyphs.HIGHLIGHT_PREFIX}{state.current}", glyphs.SUCCESS) + "\r\n"
        )
        renderer.flush()

    logger.debug("Menu selection: index %d of %d", state.highlighted, n)
    return state.current


# ── multiple choice ─────────────────────────────────────────────────


def _draw_checklist(renderer: Renderer, state: MultiSelectState) -> None:
    for index, option in enumerate(state.options):
        marker = glyphs.CHECKED if state.is_checked(index) else glyphs.UNCHECKED
        row = f"{marker} {option}"
        if index == state.highlighted:
            row = renderer.paint(row, glyphs.ACTIVE)
        renderer.write(f"\r{row}\r\n")
    renderer.flush()


def multichoice(stream: TextIO, renderer: Renderer, options: Sequence[Any]) -> list[Any]:
    """Let the user check any number of options with Space and confirm with Enter.

    The result keeps the original option order, not the order rows were
    toggled in.
    """
    state = MultiSelectState.of(options)
    n = len(state)
    keys = KeyReader(stream)

    with _menu_session(stream, renderer):
        _draw_checklist(renderer, state)
        while True:
            key = keys.read()
            if key == Key.ENTER:
                break
            state.handle(key)
            renderer.erase_lines(n)
            _draw_checklist(renderer, state)

        renderer.erase_lines(n)
        chosen = state.chosen()
        for option in chosen:
            renderer.write("\r" + renderer.paint(f"{glyphs.CHECKED} {option}", glyphs.SUCCESS) + "\r\n")
        renderer.flush()

    logger.debug("Multichoice selection: %d of %d checked", len(chosen), n)
    return chosen
