# topmark:header:start
#
#   project      : IniFmt
#   file         : __init__.py
#   file_relpath : src/inifmt/formatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure formatting core for INI-style files.

Both entry points take an ordered sequence of lines (without terminators) and
return a list of the same length. They perform no I/O and keep no state between
calls.

* [`format_aligned`][inifmt.formatter.align.format_aligned] aligns the ``=``
  delimiter in columns, globally or per section.
* [`format_single_space`][inifmt.formatter.single_space.format_single_space]
  canonicalizes spacing around ``=`` to a single space.

[`format_lines`][inifmt.formatter.format_lines] selects one of them from a
[`FormatOptions`][inifmt.formatter.options.FormatOptions] value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inifmt.formatter.align import format_aligned
from inifmt.formatter.lines import Line, LineKind, classify_line, normalize_header
from inifmt.formatter.options import FormatOptions
from inifmt.formatter.single_space import format_single_space

if TYPE_CHECKING:
    from collections.abc import Iterable


def format_lines(lines: Iterable[str], options: FormatOptions) -> list[str]:
    """Format ``lines`` with the mode selected by ``options``."""
    if options.single_space:
        return format_single_space(lines)
    return format_aligned(
        lines,
        per_section=options.per_section,
        include_comments=options.include_comments,
    )


__all__ = [
    "FormatOptions",
    "Line",
    "LineKind",
    "classify_line",
    "format_aligned",
    "format_lines",
    "format_single_space",
    "normalize_header",
]
