# topmark:header:start
#
#   project      : IniFmt
#   file         : single_space.py
#   file_relpath : src/inifmt/formatter/single_space.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-space normalization of key/value lines.

Each line is handled on its own: a line holding a ``=`` is rewritten as
``"<key> = <value>"`` with the key trimmed and every whitespace run in the value
collapsed to one space. Lines without a delimiter only lose trailing
whitespace. A line whose value is empty becomes ``"<key> ="``, without the
space after the ``=``, so that no output line ends in whitespace.
Section headers and comments get no special treatment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inifmt.config.logging import get_logger
from inifmt.formatter.lines import DELIMITER, strip_trailing

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inifmt.config.logging import InifmtLogger

logger: InifmtLogger = get_logger(__name__)


def normalize_single_space(line: str) -> str:
    """Return ``line`` with exactly one space on each side of its first ``=``.

    An empty value yields ``"<key> ="`` so the result never ends in whitespace.

    Args:
        line (str): Raw line without its line terminator.

    Returns:
        str: The normalized line.
    """
    key, sep, value = line.partition(DELIMITER)
    if not sep:
        return strip_trailing(line)
    collapsed: str = " ".join(value.split())
    if not collapsed:
        return f"{key.strip()} {DELIMITER}"
    return f"{key.strip()} {DELIMITER} {collapsed}"


def format_single_space(lines: Iterable[str]) -> list[str]:
    """Apply [`normalize_single_space`][inifmt.formatter.single_space.normalize_single_space]
    to every line.

    Args:
        lines (Iterable[str]): Raw input lines without line terminators.

    Returns:
        list[str]: The normalized lines, one per input line.
    """
    result: list[str] = [normalize_single_space(line) for line in lines]
    logger.debug("Single-spaced %d line(s)", len(result))
    return result
