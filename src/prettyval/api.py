# topmark:header:start
#
#   project      : PrettyVal
#   file         : api.py
#   file_relpath : src/prettyval/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""High-level helpers: convert any value and render it in one call.

`pformat` returns the colored text; `pprint` writes it through `click.echo`,
which strips the color codes when the destination is not a terminal (or when
``color=False``).
"""

from __future__ import annotations

from typing import IO, Any

import click

from prettyval.config.model import RenderConfig
from prettyval.model.convert import to_document
from prettyval.rendering.renderer import render


def pformat(value: object, config: RenderConfig | None = None) -> str:
    """Convert ``value`` to a document and render it.

    Args:
        value (object): A document, a `Pretty` domain object or any Python value.
        config (RenderConfig | None): Layout settings; defaults to `RenderConfig()`.

    Returns:
        str: The rendered, color-annotated text.
    """
    cfg = config or RenderConfig()
    return render(to_document(value), indent_size=cfg.indent_size, indent_level=cfg.indent_level)


def pprint(
    value: object,
    config: RenderConfig | None = None,
    *,
    file: IO[Any] | None = None,
    color: bool | None = None,
) -> None:
    """Render ``value`` and print it.

    Args:
        value (object): A document, a `Pretty` domain object or any Python value.
        config (RenderConfig | None): Layout settings; defaults to `RenderConfig()`.
        file (IO[Any] | None): Destination stream; defaults to stdout.
        color (bool | None): Force color on or off; None lets Click decide
            from the destination stream.
    """
    text = pformat(value, config)
    # Trees and lists already end with a newline; bare terminals do not.
    click.echo(text, file=file, nl=bool(text) and not text.endswith("\n"), color=color)
