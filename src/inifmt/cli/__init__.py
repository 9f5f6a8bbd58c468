# topmark:header:start
#
#   project      : IniFmt
#   file         : __init__.py
#   file_relpath : src/inifmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for IniFmt."""
