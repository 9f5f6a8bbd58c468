# topmark:header:start
#
#   project      : IniFmt
#   file         : __init__.py
#   file_relpath : src/inifmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared building blocks used by the config layer and the CLI."""
