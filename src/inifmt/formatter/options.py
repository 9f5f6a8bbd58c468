# topmark:header:start
#
#   project      : IniFmt
#   file         : options.py
#   file_relpath : src/inifmt/formatter/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting options consumed by the formatter entry points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable selection of the formatting mode.

    Attributes:
        per_section (bool): Align each section body independently instead of the
            whole file at once.
        include_comments (bool): Let comment and blank lines take part in alignment
            (they are padded to the alignment width).
        single_space (bool): Use the single-space normalizer. When set, the two
            alignment options are ignored.
    """

    per_section: bool = False
    include_comments: bool = False
    single_space: bool = False
