# topmark:header:start
#
#   project      : PrettyVal
#   file         : renderer.py
#   file_relpath : src/prettyval/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render documents into indented, color-annotated text.

Layout rules:

* A `Tree` emits one line per entry: ``- <key>:`` with the key left-aligned to
  the longest key among its *immediate* siblings. The width is recomputed for
  every tree and never inherited from an ancestor.
* A `List` emits one line per item, starting with a ``*`` bullet.
* A terminal value is written on the same line, after a single space.
* A nonterminal value starts on the next line, one indentation level deeper.
* Empty trees and lists emit nothing.

Semantic terminals are wrapped in the ANSI color of their `Category`. Color
codes are always emitted; stripping them is left to whoever owns the output
stream (e.g. `click.echo(..., color=False)`).

Example:
    ```python
    >>> doc = Tree([("name", Raw("zaphod")), ("age", Raw("42"))])
    >>> print(render(doc), end="")
    - name: zaphod
    - age : 42
    ```
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Protocol, assert_never

from prettyval.config.logging import get_logger
from prettyval.constants import DISPLAY_INDENT_LEVEL, DISPLAY_INDENT_SIZE
from prettyval.model.document import (
    BlockSig,
    Epoch,
    Hash,
    List,
    Raw,
    Signature,
    SlotId,
    Stakeholder,
    Tree,
    XPub,
    is_terminal,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from prettyval.config.logging import PrettyvalLogger
    from prettyval.model.document import Document, Terminal

logger: PrettyvalLogger = get_logger(__name__)


class TextSink(Protocol):
    """Anything accepting text chunks, such as an open text file or `io.StringIO`."""

    def write(self, s: str, /) -> object:
        """Write a chunk of text."""
        ...


def longest_key_length(entries: Sequence[tuple[str, Document]]) -> int:
    """Return the length of the longest key among ``entries`` (0 if empty)."""
    return max((len(key) for key, _ in entries), default=0)


def paint(term: Terminal) -> str:
    """Return the display text of a terminal, colored by its category.

    `Raw` text is returned verbatim.
    """
    match term:
        case Raw(text=text):
            return text
        case Hash() | Epoch() | SlotId() | BlockSig() | Signature() | XPub() | Stakeholder():
            return term.category.color(term.text())
        case _:
            assert_never(term)


def _write_indent(sink: TextSink, indent_size: int, indent_level: int) -> None:
    sink.write(" " * (indent_size * indent_level))


def _write_value(doc: Document, sink: TextSink, indent_size: int, indent_level: int) -> None:
    # Terminals go inline after the key or bullet, nonterminals on the next line.
    if is_terminal(doc):
        sink.write(" ")
        _write_pretty(doc, sink, indent_size, indent_level)
        sink.write("\n")
    else:
        sink.write("\n")
        _write_pretty(doc, sink, indent_size, indent_level)


def _write_pretty(doc: Document, sink: TextSink, indent_size: int, indent_level: int) -> None:
    match doc:
        case Tree(entries=entries):
            key_width = longest_key_length(entries)
            for key, value in entries:
                _write_indent(sink, indent_size, indent_level)
                sink.write(f"- {key:<{key_width}}:")
                _write_value(value, sink, indent_size, indent_level + 1)
        case List(items=items):
            for item in items:
                _write_indent(sink, indent_size, indent_level)
                sink.write("*")
                _write_value(item, sink, indent_size, indent_level + 1)
        case _:
            sink.write(paint(doc))


def _check_layout(indent_size: int, indent_level: int) -> None:
    if indent_size < 0:
        raise ValueError(f"indent_size must be >= 0, got {indent_size}")
    if indent_level < 0:
        raise ValueError(f"indent_level must be >= 0, got {indent_level}")


def write(
    doc: Document,
    sink: TextSink,
    indent_size: int = DISPLAY_INDENT_SIZE,
    indent_level: int = DISPLAY_INDENT_LEVEL,
) -> None:
    """Render ``doc`` into ``sink``, chunk by chunk.

    Errors raised by ``sink.write`` propagate unchanged and abort the render;
    whatever was already written stays written.

    Args:
        doc (Document): The document to render.
        sink (TextSink): Destination of the text.
        indent_size (int): Columns per nesting level.
        indent_level (int): Nesting level of the first line.

    Raises:
        ValueError: If ``indent_size`` or ``indent_level`` is negative.
    """
    _check_layout(indent_size, indent_level)
    logger.trace(
        "rendering %s (indent_size=%d, indent_level=%d)",
        type(doc).__name__,
        indent_size,
        indent_level,
    )
    _write_pretty(doc, sink, indent_size, indent_level)


def render(
    doc: Document,
    indent_size: int = DISPLAY_INDENT_SIZE,
    indent_level: int = DISPLAY_INDENT_LEVEL,
) -> str:
    """Render ``doc`` and return the resulting text.

    Args:
        doc (Document): The document to render.
        indent_size (int): Columns per nesting level.
        indent_level (int): Nesting level of the first line.

    Returns:
        str: The rendered text. Trees and lists end with a newline; a bare
            terminal does not.
    """
    buf = io.StringIO()
    write(doc, buf, indent_size=indent_size, indent_level=indent_level)
    text = buf.getvalue()
    logger.trace("rendered %d characters", len(text))
    return text
