# topmark:header:start
#
#   project      : IniFmt
#   file         : lines.py
#   file_relpath : src/inifmt/formatter/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line classification for INI-style text.

Every raw input line is classified from its *trimmed* content only. Classification
never rewrites the interior of a line; the only normalizations applied when a
[`Line`][inifmt.formatter.lines.Line] is built are:

* trailing spaces and tabs are removed from every line, and
* section headers are re-emitted in canonical form (see
  [`normalize_header`][inifmt.formatter.lines.normalize_header]).

The resulting kinds form a small closed set ([`LineKind`][inifmt.formatter.lines.LineKind])
which the aligner and rewriter dispatch on.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

DELIMITER: Final[str] = "="
COMMENT_MARKERS: Final[tuple[str, ...]] = (";", "#")
TRAILING_WHITESPACE: Final[str] = " \t"

HEADER_OPEN: Final[str] = "["
HEADER_CLOSE: Final[str] = "]"


class LineKind(Enum):
    """Kind of a single INI line.

    Attributes:
        SECTION_HEADER: ``[name]`` with an optional trailing annotation.
        COMMENT: Trimmed content starts with ``;`` or ``#``.
        BLANK: Trimmed content is empty.
        KEY_VALUE: Contains a delimiter and is not a header.
        OPAQUE: Anything else; passed through verbatim.
    """

    SECTION_HEADER = "section_header"
    COMMENT = "comment"
    BLANK = "blank"
    KEY_VALUE = "key_value"
    OPAQUE = "opaque"

    @property
    def is_spacer(self) -> bool:
        """Return True for comment and blank lines."""
        return self in (LineKind.COMMENT, LineKind.BLANK)


def strip_trailing(line: str) -> str:
    """Remove trailing spaces and tabs from ``line``."""
    return line.rstrip(TRAILING_WHITESPACE)


def split_header(trimmed: str) -> tuple[str, str] | None:
    """Split a trimmed line into ``(header, annotation)``.

    Args:
        trimmed (str): Line content with leading and trailing whitespace removed.

    Returns:
        tuple[str, str] | None: The header through the first ``]`` and the stripped
        text following it, or ``None`` when the line is not a section header
        (no leading ``[`` or no closing ``]``).
    """
    if not trimmed.startswith(HEADER_OPEN):
        return None
    idx: int = trimmed.find(HEADER_CLOSE)
    if idx == -1:
        return None
    return trimmed[: idx + 1], trimmed[idx + 1 :].strip()


def classify_line(line: str) -> LineKind:
    """Return the kind of ``line``.

    Detection only looks at the trimmed content; the first ``=`` anywhere in the
    line makes a non-header, non-comment line a key/value line.

    Args:
        line (str): Raw line without its line terminator.

    Returns:
        LineKind: The classification.
    """
    trimmed: str = line.strip()
    if split_header(trimmed) is not None:
        return LineKind.SECTION_HEADER
    if trimmed == "":
        return LineKind.BLANK
    if trimmed.startswith(COMMENT_MARKERS):
        return LineKind.COMMENT
    if DELIMITER in line:
        return LineKind.KEY_VALUE
    return LineKind.OPAQUE


def normalize_header(line: str) -> str:
    """Return the canonical form of a section header line.

    The header is the trimmed text through the first ``]``. Trailing text is kept on
    the same line: a comment marker is separated from its text by one space
    (``"[s] ; note"``), any other annotation is appended after a single space.

    Args:
        line (str): A line classified as
            [`LineKind.SECTION_HEADER`][inifmt.formatter.lines.LineKind].

    Returns:
        str: The normalized header line. Lines that are not headers are returned with
        trailing whitespace removed.
    """
    parts: tuple[str, str] | None = split_header(line.strip())
    if parts is None:
        return strip_trailing(line)
    header, rest = parts
    if not rest:
        return header
    if rest.startswith(COMMENT_MARKERS):
        marker: str = rest[0]
        text: str = rest[1:].strip()
        return f"{header} {marker} {text}" if text else f"{header} {marker}"
    return f"{header} {rest}"


@dataclass(frozen=True, slots=True)
class Line:
    """A classified input line.

    Attributes:
        text (str): The line after trailing-whitespace removal (and header
            normalization for section headers).
        kind (LineKind): Classification of the original line.
    """

    text: str
    kind: LineKind

    @classmethod
    def parse(cls, raw: str) -> Line:
        """Classify ``raw`` and apply the per-line normalization."""
        kind: LineKind = classify_line(raw)
        if kind is LineKind.SECTION_HEADER:
            return cls(text=normalize_header(raw), kind=kind)
        return cls(text=strip_trailing(raw), kind=kind)

    @property
    def delimiter_offset(self) -> int:
        """0-based offset of the first ``=`` in ``text``, or -1 if there is none."""
        return self.text.find(DELIMITER)
