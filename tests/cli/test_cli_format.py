# topmark:header:start
#
#   project      : IniFmt
#   file         : test_cli_format.py
#   file_relpath : tests/cli/test_cli_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: formatting FILE or standard input to stdout."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

SAMPLE: str = "key1=val1\n[section1]\nlongkey=val2\nk=v\n"


@mark_cli
def test_formats_stdin_to_stdout(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, [], input_text="key1=val1\nlongerkey=val2\nk=v\n")

    assert_SUCCESS(result)
    assert result.stdout == "key1     =val1\nlongerkey=val2\nk        =v\n"


@mark_cli
def test_dash_reads_stdin(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["-"], input_text="a=1\nbb=2\n")

    assert_SUCCESS(result)
    assert result.stdout == "a =1\nbb=2\n"


@mark_cli
def test_formats_file_without_modifying_it(isolation: Path) -> None:
    path: Path = isolation / "settings.ini"
    path.write_text(SAMPLE, encoding="utf-8")

    result: Result = run_cli_in(isolation, ["settings.ini"])

    assert_SUCCESS(result)
    assert result.stdout == "key1   =val1\n[section1]\nlongkey=val2\nk      =v\n"
    assert path.read_text(encoding="utf-8") == SAMPLE


@mark_cli
@parametrize(
    "flags, expected",
    [
        (["-s"], "key1=val1\n[section1]\nlongkey=val2\nk      =v\n"),
        (["--per-section"], "key1=val1\n[section1]\nlongkey=val2\nk      =v\n"),
        (["-u"], "key1 = val1\n[section1]\nlongkey = val2\nk = v\n"),
        (["--single-space"], "key1 = val1\n[section1]\nlongkey = val2\nk = v\n"),
    ],
)
def test_mode_flags(isolation: Path, flags: list[str], expected: str) -> None:
    result: Result = run_cli_in(isolation, flags, input_text=SAMPLE)

    assert_SUCCESS(result)
    assert result.stdout == expected


@mark_cli
def test_include_comments_flag(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["-C"], input_text="longkey=1\n#c\nk=2\n")

    assert_SUCCESS(result)
    assert result.stdout == "longkey=1\n#c        \nk      =2\n"


@mark_cli
def test_crlf_input_and_missing_final_newline(isolation: Path) -> None:
    path: Path = isolation / "win.ini"
    path.write_bytes(b"a=1\r\nbbb=2")

    result: Result = run_cli_in(isolation, [str(path)])

    assert_SUCCESS(result)
    assert result.stdout == "a  =1\nbbb=2\n"


@mark_cli
def test_empty_input_gives_empty_output(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, [], input_text="")

    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_blank_lines_survive(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, [], input_text="a=1\n\n\nbb=2\n")

    assert_SUCCESS(result)
    assert result.stdout == "a =1\n\n\nbb=2\n"
