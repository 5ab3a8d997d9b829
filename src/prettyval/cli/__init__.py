# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for PrettyVal (Click).

The console script ``prettyval`` points at `prettyval.cli.main.cli`.
"""

from __future__ import annotations
