# topmark:header:start
#
#   project      : IniFmt
#   file         : __main__.py
#   file_relpath : src/inifmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running IniFmt via ``python -m inifmt``.

Delegates to [`inifmt.cli.main.cli`][inifmt.cli.main.cli], the same entry point
as the ``inifmt`` console script.

Examples:
    Align a file in place::

        python -m inifmt --write settings.ini
"""

from __future__ import annotations

from inifmt.cli.main import cli

if __name__ == "__main__":
    cli()
