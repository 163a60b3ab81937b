"""Progress bar rendered while a task runs.

Layout of one frame (two lines, redrawn in place):

    Downloading
    [=========>          | 045%]

The bar fills the terminal width minus a fixed gutter for the brackets,
the arrow and the percentage.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, TypeVar

from clytia.core import glyphs
from clytia.core.models import Outcome
from clytia.core.settings import Settings
from clytia.services.live import run_live
from clytia.term.renderer import CLEAR_LINE, Renderer, cursor_up

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Clear the bar line, then move up and clear the label line.
_REWIND = f"{CLEAR_LINE}{cursor_up(1)}\r{CLEAR_LINE}"


def clamp_progress(value: float) -> int:
    """Clamp *value* into 0..100 and round half up to a whole percentage."""
    return int(math.floor(min(max(value, 0), 100) + 0.5))


def filled_length(bar_max_len: int, progress: float) -> int:
    return bar_max_len * clamp_progress(progress) // 100


def bar_text(progress: float, columns: int) -> str:
    bar_max_len = max(columns - glyphs.BAR_GUTTER, 0)
    if progress >= 100:
        return f"[{'=' * bar_max_len}=| 100%]"
    filled = filled_length(bar_max_len, progress)
    return f"[{'=' * filled}>{' ' * (bar_max_len - filled)}| {clamp_progress(progress):03d}%]"


def failed_bar_text(progress: float, columns: int) -> str:
    bar_max_len = max(columns - glyphs.FAILED_BAR_GUTTER, 0)
    filled = filled_length(bar_max_len, progress)
    return (
        f"[{'=' * filled}{glyphs.CROSS}{' ' * (bar_max_len - filled)}"
        f"| {clamp_progress(progress):03d}%]"
    )


def progress_bar(
    renderer: Renderer,
    label: Any,
    progress_fn: Callable[[], float],
    task: Callable[[], R],
    settings: Settings,
) -> Outcome[R, Exception]:
    """Show *label* above a bar driven by *progress_fn* until *task* returns.

    The animation stops on its own once *progress_fn* reports 100 or more,
    even if the task is still running.

    A newline, not a carriage return, is written before the first frame so
    the two-line rewind never overwrites the line above the bar. On success
    a full green bar is drawn under the checked label.
    """
    if renderer.columns() <= glyphs.FAILED_BAR_GUTTER:
        logger.warning("Terminal is %d columns wide; progress bar has no room", renderer.columns())

    with renderer.cursor_hidden():
        renderer.write("\n")
        renderer.flush()

        def _frame(n: int) -> bool:
            progress = progress_fn()
            renderer.write(f"{_REWIND}{label}\n")
            renderer.write(renderer.paint(bar_text(progress, renderer.columns()), glyphs.ACTIVE))
            renderer.flush()
            return progress < 100

        outcome = run_live(_frame, task, interval=settings.tick_interval)

        renderer.write(_REWIND)
        if outcome.ok:
            renderer.write(f"{glyphs.CHECK}  {renderer.paint(str(label), glyphs.SUCCESS)}\n")
            renderer.write(renderer.paint(bar_text(100, renderer.columns()), glyphs.SUCCESS) + "\n")
        else:
            # Re-read outside the task: the value may already be stale.
            progress = progress_fn()
            renderer.write(f"{glyphs.CROSS} {renderer.paint(str(label), glyphs.FAILURE)}\n")
            renderer.write(
                renderer.paint(failed_bar_text(progress, renderer.columns()), glyphs.FAILURE) + "\n"
            )
        renderer.flush()

    return outcome
