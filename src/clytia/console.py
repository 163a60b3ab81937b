"""The Clytia facade: one input stream and one output stream, many interactions."""

from __future__ import annotations

import sys
from typing import Any, Callable, Sequence, TextIO, TypeVar

from clytia.core.models import Outcome
from clytia.core.settings import Settings, load_settings
from clytia.services import menus, progress, prompts, spinner
from clytia.term.renderer import Renderer

R = TypeVar("R")


class Clytia:
    """Binds an input and an output stream to Clytia's prompts, menus and spinners.

    With no arguments it talks to ``sys.stdin`` and ``sys.stdout``. Pass
    in-memory streams to drive it from tests or to capture its output::

        cli = Clytia()
        animal = cli.options_menu(["cats", "dogs", "both"])

    Operations must not be run concurrently on the same instance; each one
    owns the output stream until it returns.
    """

    def __init__(
        self,
        input: TextIO | None = None,
        output: TextIO | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.settings = settings if settings is not None else load_settings()
        self.renderer = Renderer(self.output, color=self.settings.color)

    # ── prompts ─────────────────────────────────────────────────────

    def parsed_input(self, prompt: Any, default: Any = None, type: Any = None) -> Any:
        return prompts.parsed_input(self.input, self.renderer, prompt, default=default, type=type)

    def validated_input(
        self,
        prompt: Any,
        requirements: Any,
        validate: Callable[[Any], bool],
        type: Any = None,
    ) -> Any:
        return prompts.validated_input(
            self.input, self.renderer, prompt, requirements, validate, self.settings, type=type,
        )

    # ── live feedback ───────────────────────────────────────────────

    def static_background_spinner(self, text: Any, task: Callable[[], R]) -> Outcome[R, Exception]:
        """Spin next to fixed *text* until *task* finishes, then mark it ✔️ or ❌.

        Exceptions raised by *task* are returned in the Outcome, not raised.
        TerminalIOError is raised if the output stream fails.
        """
        return spinner.static_spinner(self.renderer, text, task, self.settings)

    def dynamic_background_spinner(
        self, text_fn: Callable[[], Any], task: Callable[[], R]
    ) -> Outcome[R, Exception]:
        """Like static_background_spinner, but *text_fn* is called for fresh text every frame."""
        return spinner.dynamic_spinner(self.renderer, text_fn, task, self.settings)

    def progress_bar(
        self, prompt: Any, progress_fn: Callable[[], float], task: Callable[[], R]
    ) -> Outcome[R, Exception]:
        """Show a bar filled to *progress_fn*'s percentage (0-100) until *task* finishes."""
        return progress.progress_bar(self.renderer, prompt, progress_fn, task, self.settings)

    # ── menus ───────────────────────────────────────────────────────

    def options_menu(self, options: Sequence[Any]) -> Any:
        return menus.options_menu(self.input, self.renderer, options)

    def multichoice(self, options: Sequence[Any]) -> list[Any]:
        return menus.multichoice(self.input, self.renderer, options)
