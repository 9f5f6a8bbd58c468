# topmark:header:start
#
#   project      : IniFmt
#   file         : io.py
#   file_relpath : src/inifmt/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File and STDIN plumbing for the IniFmt CLI.

Reading turns a UTF-8 text source into a list of lines without terminators;
writing joins lines back with newlines. Filesystem and decoding failures are
mapped onto [`InifmtError`][inifmt.cli.errors.InifmtError] subclasses here so the
command body only deals with the happy path.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click

from inifmt.cli.errors import InifmtEncodingError, error_from_os_error
from inifmt.config.logging import get_logger
from inifmt.constants import DEFAULT_ENCODING, STDIN_DISPLAY_NAME, STDIN_SENTINEL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inifmt.config.logging import InifmtLogger

logger: InifmtLogger = get_logger(__name__)


@dataclass(frozen=True)
class InputSource:
    """Where the input lines came from.

    Attributes:
        path (Path | None): The file path, or ``None`` for standard input.
        lines (list[str]): The input split into lines, terminators removed.
        text (str): The decoded input exactly as read, terminators included.
    """

    path: Path | None
    lines: list[str]
    text: str

    @property
    def display_name(self) -> str:
        """Name used in user-facing messages and diff headers."""
        return STDIN_DISPLAY_NAME if self.path is None else str(self.path)

    @property
    def is_stdin(self) -> bool:
        """Whether the input was read from standard input."""
        return self.path is None

    def differs_from(self, lines: Iterable[str]) -> bool:
        """Whether writing ``lines`` would change the input bytes.

        Line terminators count: CRLF input or a missing final newline differs
        from the same lines written with ``\\n``.
        """
        return join_lines(lines) != self.text


def split_lines(text: str) -> list[str]:
    r"""Split text into lines without terminators.

    A final terminator does not produce an extra empty line, and a ``\r`` left
    over from ``\r\n`` endings is removed.

    Args:
        text (str): Decoded file content.

    Returns:
        list[str]: The lines; empty for empty text.
    """
    if not text:
        return []
    parts: list[str] = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def join_lines(lines: Iterable[str]) -> str:
    """Join lines, terminating each one with ``\\n``."""
    return "".join(f"{line}\n" for line in lines)


def read_input(file_arg: str | None) -> InputSource:
    """Read the formatter input from a file or standard input.

    Args:
        file_arg (str | None): The positional FILE argument; ``None`` or ``"-"``
            selects standard input.

    Returns:
        InputSource: The decoded lines and their origin.

    Raises:
        InifmtEncodingError: If the input is not valid UTF-8.
        InifmtFileNotFoundError: If FILE does not exist.
        InifmtPermissionDeniedError: If FILE cannot be read.
        InifmtIOError: For any other read failure.
    """
    if file_arg is None or file_arg == STDIN_SENTINEL:
        logger.debug("Reading input from standard input")
        stream = click.get_text_stream("stdin", encoding=DEFAULT_ENCODING, errors="strict")
        try:
            text: str = stream.read()
        except UnicodeDecodeError as exc:
            raise InifmtEncodingError(f"{STDIN_DISPLAY_NAME} is not valid UTF-8: {exc}") from exc
        return InputSource(path=None, lines=split_lines(text), text=text)

    path = Path(file_arg)
    logger.debug("Reading input from %s", path)
    try:
        with path.open("r", encoding=DEFAULT_ENCODING, newline="") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise InifmtEncodingError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise error_from_os_error(exc, path) from exc
    return InputSource(path=path, lines=split_lines(text), text=text)


def write_file(path: Path, lines: Iterable[str]) -> None:
    """Overwrite ``path`` with ``lines``, each terminated by ``\\n``.

    Args:
        path (Path): The file to overwrite.
        lines (Iterable[str]): The formatted lines.

    Raises:
        InifmtPermissionDeniedError: If the file cannot be written.
        InifmtIOError: For any other write failure.
    """
    logger.debug("Writing %s", path)
    try:
        with path.open("w", encoding=DEFAULT_ENCODING, newline="") as fh:
            fh.write(join_lines(lines))
    except OSError as exc:
        raise error_from_os_error(exc, path) from exc
