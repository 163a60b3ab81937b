"""Line-based prompts: parse one answer, or keep asking until it validates."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, TextIO

import click

from clytia.core import glyphs
from clytia.core.errors import InputClosedError, InputRequiredError, ParseError
from clytia.core.settings import Settings
from clytia.term.reader import read_line
from clytia.term.renderer import CLEAR_LINE, Renderer, cursor_up

logger = logging.getLogger(__name__)


def _convert(raw: str, param_type: click.ParamType) -> Any:
    try:
        return param_type.convert(raw, None, None)
    except click.BadParameter as exc:
        raise ParseError(raw) from exc


def parsed_input(
    stream: TextIO,
    renderer: Renderer,
    prompt: Any,
    default: Any = None,
    type: Any = None,
) -> Any:
    """Ask once and convert the answer.

    *type* accepts anything click understands as a parameter type (``int``,
    ``float``, ``click.Choice([...])``, a callable, ...). When omitted it is
    inferred from *default*, else the answer is returned as a string.
    An empty answer yields *default*, or InputRequiredError when there is
    none; an unconvertible answer raises ParseError without asking again.
    """
    param_type = click.types.convert_type(type, default)

    if default is not None:
        renderer.write(
            renderer.paint(str(prompt), glyphs.ACTIVE)
            + renderer.paint(f"(default: {default})", glyphs.HINT)
            + renderer.paint(" => ", glyphs.ACTIVE)
        )
    else:
        renderer.write(renderer.paint(f"{prompt} => ", glyphs.ACTIVE))
    renderer.flush()

    line = read_line(stream)
    answer = (line or "").strip()
    if not answer:
        if default is None:
            raise InputRequiredError()
        return default
    return _convert(answer, param_type)


def validated_input(
    stream: TextIO,
    renderer: Renderer,
    prompt: Any,
    requirements: Any,
    validate: Callable[[Any], bool],
    settings: Settings,
    type: Any = None,
) -> Any:
    """Keep asking until the answer converts and *validate* accepts it.

    Rejected answers are shown in red for ``settings.retry_delay`` seconds
    before the prompt is redrawn. InputClosedError is raised if the input
    ends first.
    """
    param_type = click.types.convert_type(type)
    hint = renderer.paint(f"(requirements: {requirements})", glyphs.HINT)

    def _prompt_line(color: str) -> str:
        return f"{renderer.paint(str(prompt), color)} {hint} {renderer.paint('=>', color)} "

    while True:
        renderer.write(f"{CLEAR_LINE}\r{_prompt_line(glyphs.ACTIVE)}")
        renderer.flush()

        line = read_line(stream)
        if line is None:
            raise InputClosedError("input closed before a valid answer was given")

        answer = line.strip()
        if not answer:
            renderer.write(f"{cursor_up(1)}{CLEAR_LINE}\r{_prompt_line(glyphs.FAILURE)}")
            renderer.flush()
            time.sleep(settings.retry_delay)
            continue

        try:
            value = _convert(answer, param_type)
        except ParseError:
            logger.debug("Could not parse answer %r", answer)
            accepted = False
        else:
            accepted = bool(validate(value))
            if not accepted:
                logger.debug("Answer %r rejected by validator", answer)

        if accepted:
            return value

        renderer.write(
            f"\r{cursor_up(1)}{_prompt_line(glyphs.FAILURE)}"
            f"{renderer.paint(line, glyphs.REJECTED)}"
        )
        renderer.flush()
        time.sleep(settings.retry_delay)
