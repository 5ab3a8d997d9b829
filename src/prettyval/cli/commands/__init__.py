# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the PrettyVal CLI."""

from __future__ import annotations
