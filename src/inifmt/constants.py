# topmark:header:start
#
#   project      : IniFmt
#   file         : constants.py
#   file_relpath : src/inifmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniFmt Constants."""

from __future__ import annotations

from typing import Final

PACKAGE_NAME: Final[str] = "inifmt"

# Configuration files looked up during discovery (same-directory order matters).
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
INIFMT_TOML_NAME: Final[str] = "inifmt.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "inifmt"

LOG_LEVEL_ENV_VAR: Final[str] = "INIFMT_LOG_LEVEL"

DEFAULT_ENCODING: Final[str] = "utf-8"

STDIN_SENTINEL: Final[str] = "-"
STDIN_DISPLAY_NAME: Final[str] = "<stdin>"
