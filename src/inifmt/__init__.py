# topmark:header:start
#
#   project      : IniFmt
#   file         : __init__.py
#   file_relpath : src/inifmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniFmt package.

IniFmt reformats INI-style configuration files line by line. It aligns the
``=`` delimiter of key/value lines into a common column (globally or per
section) or normalizes the spacing around it to a single space, and exposes
both a CLI and the pure formatting functions for programmatic use.
"""

from __future__ import annotations

from inifmt.formatter import (
    FormatOptions,
    format_aligned,
    format_lines,
    format_single_space,
)

__all__ = [
    "FormatOptions",
    "format_aligned",
    "format_lines",
    "format_single_space",
]
