# topmark:header:start
#
#   project      : PrettyVal
#   file         : __main__.py
#   file_relpath : src/prettyval/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PrettyVal via ``python -m prettyval``.

It delegates directly to :func:`prettyval.cli.main.cli`, so the module and the
``prettyval`` console script behave the same.

Examples:
    Pretty-print a JSON file::

        python -m prettyval render block.json
"""

from __future__ import annotations

from prettyval.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
