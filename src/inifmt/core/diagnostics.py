# topmark:header:start
#
#   project      : IniFmt
#   file         : diagnostics.py
#   file_relpath : src/inifmt/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic types collected while loading and merging configuration.

Sections:
    * DiagnosticLevel: severity level (warnings only).
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticLog: mutable collection with helpers for adding diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from inifmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from inifmt.config.logging import InifmtLogger

logger: InifmtLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a diagnostic.

    Configuration problems are never fatal while merging, so only warnings are
    recorded; unreadable files named on the command line raise instead.
    """

    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics, in insertion order."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic and log it."""
        logger.warning("%s", message)
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)
