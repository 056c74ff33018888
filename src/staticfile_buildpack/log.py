"""Buildpack-style console output on top of a rich Console."""

from __future__ import annotations

from rich.console import Console

STEP_PREFIX = "-----> "
INFO_PREFIX = "       "


class BuildLogger:
    """Staging output in the familiar ``----->`` format.

    Text is printed verbatim, without rich markup, highlighting or wrapping.
    """

    def __init__(self, console: Console | None = None, *, debug: bool = False):
        self.console = console or Console(highlight=False, emoji=False)
        self.debug_enabled = debug

    def _print(self, text: str, style: str | None = None) -> None:
        self.console.print(
            text, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def begin_step(self, message: str) -> None:
        self._print(f"{STEP_PREFIX}{message}", style="bold")

    def info(self, message: str) -> None:
        self._print(f"{INFO_PREFIX}{message}")

    def warning(self, message: str) -> None:
        self._print(f"{INFO_PREFIX}**WARNING** {message}", style="yellow")

    def error(self, message: str) -> None:
        self._print(f"{INFO_PREFIX}**ERROR** {message}", style="red")

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            self._print(f"{INFO_PREFIX}**DEBUG** {message}", style="dim")
