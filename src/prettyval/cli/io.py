# topmark:header:start
#
#   project      : PrettyVal
#   file         : io.py
#   file_relpath : src/prettyval/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for the `render` command.

Reads structured data from a file or STDIN (``-``) and parses it as JSON or
TOML. Parsing failures and filesystem errors are mapped to CLI errors with the
matching exit codes.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from prettyval.cli.errors import (
    PrettyvalDataError,
    PrettyvalFileNotFoundError,
    PrettyvalIOError,
    PrettyvalPermissionDeniedError,
)
from prettyval.config.io import parse_toml_text
from prettyval.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


class InputFormat(str, Enum):
    """Supported input data formats."""

    JSON = "json"
    TOML = "toml"


def guess_format(source: str) -> InputFormat:
    """Return the input format implied by a file name (JSON unless it ends in ``.toml``)."""
    if source != STDIN_SENTINEL and Path(source).suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def read_source_text(source: str) -> str:
    """Read the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        PrettyvalFileNotFoundError: If the path does not exist.
        PrettyvalPermissionDeniedError: If the path cannot be read.
        PrettyvalDataError: If the content is not valid UTF-8.
        PrettyvalIOError: On any other I/O failure.
    """
    if source == STDIN_SENTINEL:
        logger.debug("Reading input from STDIN")
        try:
            return click.get_text_stream("stdin", encoding="utf-8").read()
        except UnicodeDecodeError as e:
            raise PrettyvalDataError(f"STDIN is not valid UTF-8: {e}") from e

    path = Path(source)
    logger.debug("Reading input from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise PrettyvalFileNotFoundError(f"No such file: '{source}'") from e
    except PermissionError as e:
        raise PrettyvalPermissionDeniedError(f"Permission denied: '{source}'") from e
    except UnicodeDecodeError as e:
        raise PrettyvalDataError(f"'{source}' is not valid UTF-8: {e}") from e
    except OSError as e:
        raise PrettyvalIOError(f"Cannot read '{source}': {e}") from e


def parse_data(text: str, fmt: InputFormat, *, source: str = STDIN_SENTINEL) -> Any:
    """Parse structured data.

    Args:
        text (str): Raw input text.
        fmt (InputFormat): Format of the text.
        source (str): Name of the input, for error messages.

    Returns:
        Any: Plain Python data (dicts, lists and scalars).

    Raises:
        PrettyvalDataError: If the text is not valid in the given format.
    """
    name = "<stdin>" if source == STDIN_SENTINEL else source
    if fmt == InputFormat.TOML:
        try:
            return parse_toml_text(text)
        except TomlkitParseError as e:
            raise PrettyvalDataError(f"Invalid TOML in {name}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PrettyvalDataError(f"Invalid JSON in {name}: {e}") from e


def load_input(source: str, fmt: InputFormat | None = None) -> Any:
    """Read and parse ``source``, guessing the format from its name when not given."""
    effective = fmt or guess_format(source)
    logger.info("Loading %s input from %s", effective.value, source)
    return parse_data(read_source_text(source), effective, source=source)
