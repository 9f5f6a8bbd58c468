# topmark:header:start
#
#   project      : IniFmt
#   file         : __init__.py
#   file_relpath : src/inifmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for IniFmt.

The configuration layer turns defaults, discovered TOML files, explicitly named
TOML files and CLI arguments into one immutable [`Config`][inifmt.config.model.Config].

Public entry points:
    - [`MutableConfig`][inifmt.config.model.MutableConfig]: builder used while layering.
    - [`Config`][inifmt.config.model.Config]: frozen runtime snapshot.
    - [`TomlLoadError`][inifmt.config.io.TomlLoadError]: raised for unreadable
      explicit config files.
"""

from __future__ import annotations

from inifmt.config.io import TomlLoadError
from inifmt.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
    "TomlLoadError",
]
