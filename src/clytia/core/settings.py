"""Runtime settings, optionally taken from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from clytia.core.errors import ConfigError

DEFAULT_TICK_INTERVAL = 0.05
DEFAULT_RETRY_DELAY = 0.5


@dataclass(frozen=True)
class Settings:
    """Timing and color knobs shared by every Clytia operation."""

    tick_interval: float = DEFAULT_TICK_INTERVAL  # seconds between animation frames
    retry_delay: float = DEFAULT_RETRY_DELAY  # pause before re-prompting after bad input
    color: bool = True


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from CLYTIA_* variables and NO_COLOR, falling back to defaults."""
    env = os.environ if environ is None else environ

    tick = _millis(env, "CLYTIA_TICK_MS", minimum=1)
    retry = _millis(env, "CLYTIA_RETRY_DELAY_MS")
    return Settings(
        tick_interval=DEFAULT_TICK_INTERVAL if tick is None else tick,
        retry_delay=DEFAULT_RETRY_DELAY if retry is None else retry,
        color=not env.get("NO_COLOR", "").strip(),
    )


def _millis(env: Mapping[str, str], key: str, minimum: int = 0) -> float | None:
    raw = env.get(key, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer number of milliseconds, got {raw!r}") from exc
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value}")
    return value / 1000
