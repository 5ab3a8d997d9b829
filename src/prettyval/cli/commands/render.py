# topmark:header:start
#
#   project      : PrettyVal
#   file         : render.py
#   file_relpath : src/prettyval/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyVal `render` command.

Reads structured data (JSON or TOML) from a file or STDIN, converts it into a
document and prints the rendered text.

Examples:
    ```bash
    prettyval render block.json
    cat block.json | prettyval render --indent 2
    prettyval --no-color render settings.toml > dump.txt
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from prettyval.api import pformat
from prettyval.cli.errors import PrettyvalConfigError, PrettyvalIOError, PrettyvalUsageError
from prettyval.cli.io import STDIN_SENTINEL, InputFormat, load_input
from prettyval.cli.options import layout_options
from prettyval.config import ConfigError, MutableRenderConfig, resolve_config
from prettyval.config.logging import get_logger

if TYPE_CHECKING:
    from prettyval.cli.console import ConsoleLike
    from prettyval.config import RenderConfig

logger = get_logger(__name__)


def resolve_render_config(
    *,
    indent_size: int | None,
    indent_level: int | None,
    config_path: str | None,
    no_config: bool,
) -> RenderConfig:
    """Compose the effective render settings: defaults → config file → CLI flags.

    Raises:
        PrettyvalUsageError: If ``--config`` and ``--no-config`` are combined.
        PrettyvalConfigError: If the config file is invalid.
    """
    if config_path is not None and no_config:
        raise PrettyvalUsageError("The '--config' and '--no-config' options are mutually exclusive.")

    overrides = MutableRenderConfig(indent_size=indent_size, indent_level=indent_level)
    try:
        return resolve_config(
            config_path=config_path,
            search_from=None if no_config else Path.cwd(),
            overrides=overrides,
        )
    except ConfigError as e:
        raise PrettyvalConfigError(str(e)) from e


@click.command(
    name="render",
    help="Pretty-print structured data (JSON or TOML) read from SOURCE ('-' for STDIN).",
)
@click.argument("source", required=False, default=STDIN_SENTINEL)
@click.option(
    "--format",
    "input_format",
    type=click.Choice([f.value for f in InputFormat]),
    default=None,
    help="Input format (default: from the file suffix, JSON for STDIN).",
)
@layout_options
def render_command(
    *,
    source: str,
    input_format: str | None,
    indent_size: int | None,
    indent_level: int | None,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Render SOURCE as an indented, aligned, colored outline."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config = resolve_render_config(
        indent_size=indent_size,
        indent_level=indent_level,
        config_path=config_path,
        no_config=no_config,
    )
    logger.debug("Effective render config: %s", config)

    data = load_input(source, InputFormat(input_format) if input_format else None)
    text = pformat(data, config)

    try:
        # Trees and lists already end with a newline; bare terminals do not.
        console.print(text, nl=bool(text) and not text.endswith("\n"))
    except OSError as e:
        raise PrettyvalIOError(f"Cannot write output: {e}") from e
