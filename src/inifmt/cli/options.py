# topmark:header:start
#
#   project      : IniFmt
#   file         : options.py
#   file_relpath : src/inifmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable CLI options and their resolution logic.

Verbosity (``-v``/``-q``) and colour (``--color``/``--no-color``) are declared
here as decorators so `inifmt.cli.main` stays readable. The helpers are
Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from inifmt.cli.errors import InifmtUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Click context settings shared by IniFmt commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A ``logging`` level used as the console threshold.

    Raises:
        InifmtUsageError: If both verbose and quiet flags are used.

    Behavior:
        Two or more ``-v`` give DEBUG, one gives INFO, any ``-q`` gives ERROR,
        otherwise WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise InifmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counted ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (report skipped writes and config sources).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings; only errors are reported.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit mode from ``--color``/``--no-color``.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Explicit ``always``/``never`` win. Otherwise ``FORCE_COLOR`` (non-zero)
        enables and ``NO_COLOR`` disables color; the default follows the TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_format_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the formatting mode options (``-s``, ``-u``, ``-C``) to a command."""
    f = click.option(
        "-s",
        "--per-section",
        "per_section",
        is_flag=True,
        help="Align each section independently instead of the whole file.",
    )(f)
    f = click.option(
        "-u",
        "--single-space",
        "single_space",
        is_flag=True,
        help="Put exactly one space on each side of '=' instead of aligning.",
    )(f)
    f = click.option(
        "-C",
        "--include-comments",
        "include_comments",
        is_flag=True,
        help="Let comment and blank lines take part in alignment.",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the output intent options (``--write``, ``--check``, ``--diff``) to a command."""
    f = click.option(
        "-w",
        "--write",
        "write",
        is_flag=True,
        help="Write the result back to FILE instead of stdout.",
    )(f)
    f = click.option(
        "--check",
        "check",
        is_flag=True,
        help="Write nothing; exit with 2 if FILE is not formatted.",
    )(f)
    f = click.option(
        "--diff",
        "diff",
        is_flag=True,
        help="Print a unified diff instead of the formatted text.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config`` to a command."""
    f = click.option(
        "--config",
        "config_paths",
        type=str,
        multiple=True,
        help="Merge this TOML config file after discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover pyproject.toml / inifmt.toml from the working directory.",
    )(f)
    return f
