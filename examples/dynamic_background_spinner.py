"""Spin while a countdown updates the message on every frame."""

import time

from clytia import Clytia

TOTAL_MS = 10_000

cli = Clytia()
elapsed = 0


def message() -> str:
    if elapsed >= TOTAL_MS:
        return "Waited for 10 seconds (ish)"
    return f"Waiting. {TOTAL_MS - elapsed}/{TOTAL_MS}ms left."


def wait() -> None:
    global elapsed
    while elapsed < TOTAL_MS:
        time.sleep(0.001)
        elapsed += 1


cli.dynamic_background_spinner(message, wait).unwrap()
