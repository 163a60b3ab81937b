"""Braille spinners shown while a task runs."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from clytia.core import glyphs
from clytia.core.models import Outcome
from clytia.core.settings import Settings
from clytia.services.live import run_live
from clytia.term.renderer import CLEAR_LINE, Renderer

R = TypeVar("R")


def closing_line(renderer: Renderer, outcome: Outcome, text: Any) -> str:
    """Check mark in green on success, cross in red on failure."""
    if outcome.ok:
        return renderer.paint(f"{glyphs.CHECK}  {text}", glyphs.SUCCESS)
    return renderer.paint(f"{glyphs.CROSS} {text}", glyphs.FAILURE)


def _glyph(renderer: Renderer, frame: int) -> str:
    symbol = glyphs.SPINNER_FRAMES[frame % len(glyphs.SPINNER_FRAMES)]
    return renderer.paint(symbol, glyphs.ACTIVE)


def static_spinner(
    renderer: Renderer,
    text: Any,
    task: Callable[[], R],
    settings: Settings,
) -> Outcome[R, Exception]:
    """Animate a spinner next to fixed *text* until *task* returns."""

    def _frame(n: int) -> bool:
        renderer.write(f"\r{_glyph(renderer, n)} {text}")
        renderer.flush()
        return True

    outcome = run_live(_frame, task, interval=settings.tick_interval)

    renderer.write(f"\r{closing_line(renderer, outcome, text)}\n")
    renderer.flush()
    return outcome


def dynamic_spinner(
    renderer: Renderer,
    text_fn: Callable[[], Any],
    task: Callable[[], R],
    settings: Settings,
) -> Outcome[R, Exception]:
    """Animate a spinner next to text re-computed by *text_fn* on every frame."""

    def _frame(n: int) -> bool:
        renderer.write(f"{CLEAR_LINE}\r{_glyph(renderer, n)} {text_fn()}")
        renderer.flush()
        return True

    outcome = run_live(_frame, task, interval=settings.tick_interval)

    renderer.write(f"{CLEAR_LINE}\r{closing_line(renderer, outcome, text_fn())}\n")
    renderer.flush()
    return outcome
