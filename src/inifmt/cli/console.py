# topmark:header:start
#
#   project      : IniFmt
#   file         : console.py
#   file_relpath : src/inifmt/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI output from internal logging: formatted text goes
to stdout, messages for the user go to stderr, and neither passes through the
``logging`` module.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import click

from inifmt.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        verbosity_level (int): Threshold from ``-v``/``-q`` (a ``logging`` level);
            `info` prints at ``INFO`` or below, `warn` at ``WARNING`` or below.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for messages. Defaults to `sys.stderr`.
    """

    enable_color: bool
    verbosity_level: int
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        verbosity_level: int = logging.WARNING,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.verbosity_level = verbosity_level
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def _echo(self, stream: TextIO, text: str, *, nl: bool, fg: str | None = None) -> None:
        if fg is not None:
            text = click.style(text, fg=fg)
        click.echo(text, nl=nl, file=stream, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout, unstyled."""
        self._echo(self.out, text, nl=nl)

    def info(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr, only under ``-v``."""
        if self.verbosity_level <= logging.INFO:
            self._echo(self.err, text, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in yellow; ``-q`` silences it."""
        if self.verbosity_level <= logging.WARNING:
            self._echo(self.err, text, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in bright red, whatever the verbosity."""
        self._echo(self.err, text, nl=nl, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged when color is off."""
        return click.style(text, **style_kwargs) if self.enable_color else text
