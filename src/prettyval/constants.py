# topmark:header:start
#
#   project      : PrettyVal
#   file         : constants.py
#   file_relpath : src/prettyval/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyVal Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    PRETTYVAL_VERSION: str = get_version("prettyval")
except PackageNotFoundError:  # running from a source checkout
    PRETTYVAL_VERSION = "0.0.0"

# Columns per nesting level
DISPLAY_INDENT_SIZE: int = 4
# Nesting level of the first rendered line
DISPLAY_INDENT_LEVEL: int = 0

# Name of the standalone config file, and the pyproject.toml table holding the same settings
CONFIG_FILE_NAME: str = "prettyval.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TABLE: tuple[str, ...] = ("tool", "prettyval")
