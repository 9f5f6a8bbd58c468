# topmark:header:start
#
#   project      : IniFmt
#   file         : test_cli_io.py
#   file_relpath : tests/cli/test_cli_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line splitting/joining and error mapping used by the I/O shell."""

from __future__ import annotations

import errno
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from inifmt.cli.errors import (
    InifmtFileNotFoundError,
    InifmtIOError,
    InifmtPermissionDeniedError,
    error_from_os_error,
)
from inifmt.cli.exit_codes import ExitCode
from inifmt.cli.io import join_lines, read_input, split_lines, write_file
from tests.cli.conftest import assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
@parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb\n", ["a\rb"]),
    ],
)
def test_split_lines(text: str, expected: list[str]) -> None:
    assert split_lines(text) == expected


@mark_cli
def test_join_lines_terminates_every_line() -> None:
    assert join_lines([]) == ""
    assert join_lines(["a", ""]) == "a\n\n"


@mark_cli
def test_read_and_write_file(tmp_path: Path) -> None:
    path: Path = tmp_path / "x.ini"
    path.write_bytes(b"k=v\r\n")

    source = read_input(str(path))
    assert source.lines == ["k=v"]
    assert source.display_name == str(path)
    assert not source.is_stdin

    write_file(path, ["k = v"])
    assert path.read_bytes() == b"k = v\n"


@mark_cli
def test_error_from_os_error_mapping() -> None:
    p = Path("x.ini")

    not_found = error_from_os_error(FileNotFoundError(errno.ENOENT, "No such file"), p)
    denied = error_from_os_error(PermissionError(errno.EACCES, "Permission denied"), p)
    other = error_from_os_error(OSError(errno.EIO, "I/O error"), p)

    assert isinstance(not_found, InifmtFileNotFoundError)
    assert not_found.exit_code == ExitCode.FILE_NOT_FOUND
    assert isinstance(denied, InifmtPermissionDeniedError)
    assert denied.exit_code == ExitCode.PERMISSION_DENIED
    assert isinstance(other, InifmtIOError)
    assert other.exit_code == ExitCode.IO_ERROR
    assert "I/O error" in other.format_message()


@mark_cli
def test_input_source_compares_terminators(tmp_path: Path) -> None:
    path: Path = tmp_path / "x.ini"
    path.write_bytes(b"k = v\r\nx = 1")

    source = read_input(str(path))

    assert source.lines == ["k = v", "x = 1"]
    assert source.differs_from(["k = v", "x = 1"])

    path.write_bytes(b"k = v\nx = 1\n")
    assert not read_input(str(path)).differs_from(["k = v", "x = 1"])


@mark_cli
@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_stdin_read_raises_no_deprecation_warning(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, [], input_text="a=1\nbb=2\n")

    assert_SUCCESS(result)
    assert result.stdout == "a =1\nbb=2\n"
