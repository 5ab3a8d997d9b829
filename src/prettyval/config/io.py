# topmark:header:start
#
#   project      : PrettyVal
#   file         : io.py
#   file_relpath : src/prettyval/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load PrettyVal configuration from TOML sources.

Settings are read from either:

- a standalone ``prettyval.toml`` (settings at the top level), or
- ``pyproject.toml`` (settings under ``[tool.prettyval]``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from prettyval.config.logging import get_logger
from prettyval.config.model import ConfigError, MutableRenderConfig, RenderConfig
from prettyval.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TABLE

if TYPE_CHECKING:
    from prettyval.config.logging import PrettyvalLogger

logger: PrettyvalLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ValueError: If the text is not valid TOML (tomlkit's `ParseError` is a ValueError).
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``prettyval.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        return parse_toml_text(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read configuration file '{path}': {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in configuration file '{path}': {e}") from e


def settings_table(path: Path, data: TomlTable) -> TomlTable:
    """Return the PrettyVal settings table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.prettyval]`` (empty when absent);
    any other file holds its settings at the top level.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_TABLE:
        table = table.get(part, {}) if isinstance(table, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"'[{'.'.join(PYPROJECT_TABLE)}]' in '{path}' must be a table")
    return cast("TomlTable", table)


def discover_config(start: Path) -> Path | None:
    """Find the nearest config file, walking up from ``start``.

    In each directory ``prettyval.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.prettyval]`` table.

    Args:
        start (Path): Directory (or file) to start from.

    Returns:
        Path | None: The config file, or None if there is none.
    """
    start = start.resolve()
    directory = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        standalone = candidate_dir / CONFIG_FILE_NAME
        if standalone.is_file():
            logger.debug("Found config file %s", standalone)
            return standalone
        pyproject = candidate_dir / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                table = settings_table(pyproject, load_toml_dict(pyproject))
            except ConfigError as e:
                logger.warning("Skipping unreadable %s: %s", pyproject, e)
                continue
            if table:
                logger.debug("Found [tool.prettyval] in %s", pyproject)
                return pyproject
    logger.trace("No config file found above %s", start)
    return None


def load_config(path: Path | str) -> MutableRenderConfig:
    """Read the settings of a config file into a mutable builder.

    Args:
        path (Path | str): ``prettyval.toml``, ``pyproject.toml`` or any TOML file
            holding the settings at the top level.

    Returns:
        MutableRenderConfig: Settings found in the file (unset fields stay None).

    Raises:
        ConfigError: If the file is unreadable, invalid TOML, or holds invalid values.
    """
    path = Path(path)
    logger.info("Loading configuration from %s", path)
    return MutableRenderConfig.from_toml_table(settings_table(path, load_toml_dict(path)))


def resolve_config(
    *,
    config_path: Path | str | None = None,
    search_from: Path | None = None,
    overrides: MutableRenderConfig | None = None,
) -> RenderConfig:
    """Compose the effective config: defaults → config file → overrides.

    Args:
        config_path (Path | str | None): Explicit config file; disables discovery.
        search_from (Path | None): Directory to start discovery from when no
            explicit path is given. Discovery is skipped when None.
        overrides (MutableRenderConfig | None): Highest-precedence values (e.g. CLI flags).

    Returns:
        RenderConfig: The frozen effective configuration.

    Raises:
        ConfigError: On any invalid source.
    """
    layered = MutableRenderConfig()
    source: Path | None = Path(config_path) if config_path is not None else None
    if source is None and search_from is not None:
        source = discover_config(search_from)
    if source is not None:
        layered = layered.merge_with(load_config(source))
    if overrides is not None:
        layered = layered.merge_with(overrides)
    return layered.freeze()
