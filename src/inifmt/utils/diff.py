# topmark:header:start
#
#   project      : IniFmt
#   file         : diff.py
#   file_relpath : src/inifmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

The CLI's ``--diff`` mode compares the input lines with the formatted lines,
produces a unified diff with `difflib`, and colors it with ``yachalk`` when
color output is enabled.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from inifmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inifmt.config.logging import InifmtLogger

logger: InifmtLogger = get_logger(__name__)


def unified_diff(
    before: Sequence[str],
    after: Sequence[str],
    *,
    name: str,
) -> list[str]:
    """Return a unified diff between two line sequences.

    Args:
        before (Sequence[str]): Original lines, without terminators.
        after (Sequence[str]): Formatted lines, without terminators.
        name (str): File name shown in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines without terminators; empty when the inputs are equal.
    """
    patch: list[str] = list(
        difflib.unified_diff(
            before,
            after,
            fromfile=f"{name} (original)",
            tofile=f"{name} (formatted)",
            lineterm="",
        )
    )
    logger.debug("Diff for %s has %d line(s)", name, len(patch))
    return patch


def render_patch(patch: Sequence[str], *, color: bool) -> str:
    """Render a unified diff as text, one line per entry.

    Args:
        patch (Sequence[str]): Diff lines as produced by `unified_diff`.
        color (bool): Color removals red, additions green and hunk markers cyan.

    Returns:
        str: The rendered diff, each line terminated by ``\\n``.
    """
    if not color:
        return "".join(f"{line}\n" for line in patch)

    def process_line(line: str) -> str:
        match line[:1]:
            case "-" if not line.startswith("---"):
                return chalk.red(line)
            case "+" if not line.startswith("+++"):
                return chalk.green(line)
            case "@":
                return chalk.cyan(line)
            case "-" | "+":
                return chalk.bold(line)
            case _:
                return line

    return "".join(f"{process_line(line)}\n" for line in patch)
