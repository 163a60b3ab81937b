"""Background render loop shared by the spinners and the progress bar."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, TypeVar

from clytia.core.models import Outcome

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Draws frame number *n*; returns False to end the loop before it is cancelled.
FrameFn = Callable[[int], bool]


def attempt(task: Callable[[], R]) -> Outcome[R, Exception]:
    """Run *task* and capture its result or its exception."""
    try:
        value = task()
    except Exception as exc:
        logger.debug("Task failed: %r", exc)
        return Outcome(error=exc)
    return Outcome(value=value)


def run_live(draw: FrameFn, task: Callable[[], R], *, interval: float) -> Outcome[R, Exception]:
    """Run *task* on the calling thread while *draw* animates on a render thread.

    The render thread polls a write-once stop flag between frames. It is
    joined before this function returns or raises, whatever the task does.
    An error raised while drawing ends the animation and is re-raised here
    once the task has finished.
    """
    stop = threading.Event()
    failure: list[Exception] = []
    frames = 0

    def _draw() -> None:
        nonlocal frames
        try:
            while not stop.is_set():
                more = draw(frames)
                frames += 1
                if not more:
                    break
                time.sleep(interval)
        except Exception as exc:
            failure.append(exc)

    t = threading.Thread(target=_draw, name="clytia-render", daemon=True)
    t.start()
    logger.debug("Render thread started (interval=%.3fs)", interval)
    try:
        outcome = attempt(task)
    finally:
        stop.set()
        t.join()
        logger.debug("Render thread joined after %d frame(s)", frames)

    if failure:
        raise failure[0]
    return outcome
