# topmark:header:start
#
#   project      : AlignChar
#   file         : __main__.py
#   file_relpath : src/alignchar/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Module entry point for running AlignChar via ``python -m alignchar``.

Delegates directly to :func:`alignchar.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how AlignChar is launched.

Examples:
    Align backslashes to column 80 in place::

        python -m alignchar -i macros.h --in-place
"""

from __future__ import annotations

from alignchar.cli.main import cli

if __name__ == "__main__":
    cli()
