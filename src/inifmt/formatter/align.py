# topmark:header:start
#
#   project      : IniFmt
#   file         : align.py
#   file_relpath : src/inifmt/formatter/align.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column alignment of the key/value delimiter.

The aligner works in two passes per block:

1. compute the alignment column: the largest raw offset of the first ``=`` among
   the block's eligible lines
   ([`compute_alignment_column`][inifmt.formatter.align.compute_alignment_column]);
2. rewrite every line of the block against that column
   ([`rewrite_line`][inifmt.formatter.align.rewrite_line]).

Offsets are counted from the start of the untrimmed line, so indentation in front
of a key is preserved and counts towards the column.

In global mode the whole input is a single block and section headers pass through
it without contributing. In per-section mode every header closes the current
block and is emitted between blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from inifmt.config.logging import get_logger
from inifmt.formatter.lines import DELIMITER, Line, LineKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from inifmt.config.logging import InifmtLogger

logger: InifmtLogger = get_logger(__name__)

# Width reserved after the column on padded spacer lines: " = "
SPACER_SLACK: Final[int] = 3


@dataclass
class Block:
    """A run of lines sharing one alignment column.

    In global mode a block may contain section headers; they are carried along in
    position but never contribute to the column.
    """

    lines: list[Line] = field(default_factory=lambda: [])


def is_eligible(line: Line, *, include_comments: bool) -> bool:
    """Return True if ``line`` contributes its delimiter offset to the column."""
    if line.kind is LineKind.KEY_VALUE:
        return True
    return include_comments and line.kind.is_spacer


def compute_alignment_column(lines: Sequence[Line], *, include_comments: bool) -> int:
    """Return the alignment column for a block.

    Args:
        lines (Sequence[Line]): The block's lines.
        include_comments (bool): Whether comment and blank lines are eligible.

    Returns:
        int: The maximum 0-based offset of the first ``=`` among eligible lines, or
        ``0`` when no line contributes.
    """
    offsets: list[int] = [
        line.delimiter_offset
        for line in lines
        if is_eligible(line, include_comments=include_comments)
    ]
    return max((pos for pos in offsets if pos >= 0), default=0)


def rewrite_line(line: Line, *, max_col: int, include_comments: bool) -> str:
    """Rewrite a single line against the block's alignment column.

    Args:
        line (Line): The classified line.
        max_col (int): The block's alignment column.
        include_comments (bool): Whether spacer lines are padded.

    Returns:
        str: The output line.
    """
    match line.kind:
        case LineKind.KEY_VALUE:
            pos: int = line.delimiter_offset
            key_text: str = line.text[:pos]
            value_text: str = line.text[pos + 1 :]
            pad: int = max(max_col - pos, 0)
            return f"{key_text}{' ' * pad}{DELIMITER}{value_text}"
        case LineKind.COMMENT | LineKind.BLANK if include_comments:
            return line.text.ljust(max_col + SPACER_SLACK)
        case _:
            return line.text


def align_block(block: Block, *, include_comments: bool) -> list[str]:
    """Compute the column of ``block`` and rewrite all of its lines."""
    max_col: int = compute_alignment_column(block.lines, include_comments=include_comments)
    logger.trace("Aligning block of %d line(s) at column %d", len(block.lines), max_col)
    return [
        rewrite_line(line, max_col=max_col, include_comments=include_comments)
        for line in block.lines
    ]


def partition_blocks(lines: Iterable[Line], *, per_section: bool) -> Iterator[Block | Line]:
    """Split classified lines into alignment blocks.

    Args:
        lines (Iterable[Line]): Classified lines in input order.
        per_section (bool): If False, yield a single block holding every line
            (headers included, as pass-through members). If True, yield blocks
            separated by the section header lines themselves.

    Yields:
        Block | Line: Blocks to align and, in per-section mode, the header lines
        between them. Empty blocks are never yielded.
    """
    if not per_section:
        block = Block(lines=list(lines))
        if block.lines:
            yield block
        return

    current = Block()
    for line in lines:
        if line.kind is LineKind.SECTION_HEADER:
            if current.lines:
                yield current
            yield line
            current = Block()
        else:
            current.lines.append(line)
    if current.lines:
        yield current


def format_aligned(
    lines: Iterable[str],
    per_section: bool = False,
    include_comments: bool = False,
) -> list[str]:
    """Align the ``=`` delimiter of INI lines.

    Args:
        lines (Iterable[str]): Raw input lines without line terminators.
        per_section (bool): Align every section body independently.
        include_comments (bool): Include comment and blank lines in alignment and
            pad them to the column width.

    Returns:
        list[str]: The formatted lines; always as many as were given, in order.
    """
    parsed: list[Line] = [Line.parse(raw) for raw in lines]
    result: list[str] = []
    for item in partition_blocks(parsed, per_section=per_section):
        if isinstance(item, Block):
            result.extend(align_block(item, include_comments=include_comments))
        else:
            result.append(item.text)
    logger.debug(
        "Aligned %d line(s) (per_section=%s, include_comments=%s)",
        len(result),
        per_section,
        include_comments,
    )
    return result
