# topmark:header:start
#
#   project      : IniFmt
#   file         : keys.py
#   file_relpath : src/inifmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for IniFmt configuration.

This module defines the string constants used when reading and validating IniFmt
configuration from TOML sources (``inifmt.toml`` and ``[tool.inifmt]`` in
``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI option names are kept separate (see ``inifmt.cli.main``).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by IniFmt configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - Runtime intent (``--write``, ``--check``, ``--diff``) is CLI-only and has
          no TOML key.
    """

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_PER_SECTION: Final[str] = "per_section"
    KEY_INCLUDE_COMMENTS: Final[str] = "include_comments"
    KEY_SINGLE_SPACE: Final[str] = "single_space"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_ROOT,
            SECTION_FORMAT,
        }
    )

    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_FORMAT: frozenset(
            {
                KEY_PER_SECTION,
                KEY_INCLUDE_COMMENTS,
                KEY_SINGLE_SPACE,
            }
        ),
    }
