# topmark:header:start
#
#   project      : IniFmt
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: help, version, verbosity and colour flags."""

from __future__ import annotations

import logging
from importlib.metadata import version
from typing import TYPE_CHECKING

from inifmt.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from inifmt.constants import LOG_LEVEL_ENV_VAR
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    import pytest
    from click.testing import Result


@mark_cli
def test_help_lists_options() -> None:
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    for option in ("--write", "--per-section", "--single-space", "--include-comments", "--check"):
        assert option in result.stdout


@mark_cli
def test_short_help_option() -> None:
    assert_SUCCESS(run_cli(["-h"]))


@mark_cli
def test_version() -> None:
    result: Result = run_cli(["--version"])

    assert_SUCCESS(result)
    assert "inifmt" in result.stdout
    assert version("inifmt") in result.stdout


@mark_cli
@parametrize("flags", [["-v"], ["-vv"], ["-q"], ["-qq"]])
def test_verbosity_flags_parse(isolation: Path, flags: list[str]) -> None:
    result: Result = run_cli_in(isolation, flags, input_text="a=1\n")

    assert_SUCCESS(result)
    assert result.stdout == "a=1\n"


@mark_cli
@parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (5, 0, logging.DEBUG),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


@mark_cli
def test_resolve_color_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is False

    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False

    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is True


@mark_cli
@parametrize("flags", [["--color", "never"], ["--no-color"], ["--color", "always"]])
def test_color_flags_do_not_touch_formatted_output(isolation: Path, flags: list[str]) -> None:
    result: Result = run_cli_in(isolation, flags, input_text="a=1\nbb=2\n")

    assert_SUCCESS(result)
    assert result.stdout == "a =1\nbb=2\n"


@mark_cli
def test_log_level_env_writes_to_stderr_only(
    isolation: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")

    result: Result = run_cli_in(isolation, [], input_text="a=1\nbb=2\n")

    assert_SUCCESS(result)
    assert result.stdout == "a =1\nbb=2\n"
    assert "[DEBUG]" in result.stderr
