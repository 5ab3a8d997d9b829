# topmark:header:start
#
#   project      : PrettyVal
#   file         : convert.py
#   file_relpath : src/prettyval/model/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversion of domain values into documents.

Two mechanisms map a value to a `Document`, and both are pure and total:

1. Domain types implement the `Pretty` protocol (a ``to_pretty()`` method)
   and build their own `Tree`/`List` in their natural reading order.
2. A `functools.singledispatch` table keyed by type covers builtins and
   third-party types that cannot grow a method (see `register` and
   `register_fields`). `Pretty` always wins over the table, so a domain type
   deriving from `list` or `str` still describes itself.

Anything without a dedicated conversion degrades to `Raw` with its debug
representation (`from_debug`); conversion never fails on its own.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping, Set
from functools import singledispatch
from typing import Protocol, TypeVar, runtime_checkable

from prettyval.config.logging import get_logger
from prettyval.model.document import Document, List, Raw, Tree, is_document

logger = get_logger(__name__)

T = TypeVar("T")


@runtime_checkable
class Pretty(Protocol):
    """Capability of a domain type to describe itself as a document."""

    def to_pretty(self) -> Document:
        """Return the document describing this value."""
        ...


def from_debug(value: object) -> Raw:
    """Return the debug representation of ``value`` as raw text."""
    return Raw(repr(value))


def from_display(value: object) -> Raw:
    """Return the display (``str``) form of ``value`` as raw text."""
    return Raw(str(value))


def variant(name: str, payload: Document) -> Tree:
    """Return the single-entry tree describing the active variant of a sum type.

    Args:
        name (str): Name of the active variant.
        payload (Document): The converted payload of that variant.

    Returns:
        Tree: ``Tree([(name, payload)])``.
    """
    return Tree([(name, payload)])


def pairs(*entries: tuple[str, object]) -> Tree:
    """Build a tree from ``(key, value)`` pairs, converting each value with `to_document`."""
    return Tree((key, to_document(value)) for key, value in entries)


def listing(values: Iterable[object], convert: Callable[[object], Document] | None = None) -> List:
    """Build a list document from an iterable, preserving its order.

    Args:
        values (Iterable[object]): Elements to convert.
        convert (Callable[[object], Document] | None): Per-element conversion;
            defaults to `to_document`.

    Returns:
        List: The converted elements.
    """
    conv = convert or to_document
    return List(conv(v) for v in values)


def to_document(value: object) -> Document:
    """Convert any value into a document.

    Resolution order:

    * document nodes are returned unchanged;
    * objects implementing `Pretty` convert themselves, even when they derive
      from a builtin such as `list` or `str`;
    * types with a registered conversion (builtins, `register`,
      `register_fields`) use it;
    * everything else falls back to `from_debug`.

    Args:
        value (object): The value to convert.

    Returns:
        Document: The document describing ``value``.
    """
    if is_document(value):
        return value  # type: ignore[return-value]
    if isinstance(value, Pretty):
        return value.to_pretty()
    return _convert(value)


@singledispatch
def _convert(value: object) -> Document:
    logger.trace("no conversion for %s, using debug representation", type(value).__name__)
    return from_debug(value)


@_convert.register(str)
def _(value: str) -> Document:
    return Raw(value)


@_convert.register(bool)
def _(value: bool) -> Document:
    return Raw("true" if value else "false")


@_convert.register(int)
@_convert.register(float)
def _(value: float) -> Document:
    return from_display(value)


@_convert.register(type(None))
def _(value: None) -> Document:
    return Raw("null")


@_convert.register(bytes)
@_convert.register(bytearray)
def _(value: bytes) -> Document:
    return Raw(value.hex())


@_convert.register(Mapping)
def _(value: Mapping[object, object]) -> Document:
    return Tree((str(k), to_document(v)) for k, v in value.items())


@_convert.register(list)
@_convert.register(tuple)
def _(value: list[object]) -> Document:
    return listing(value)


@_convert.register(Set)
def _(value: Set[object]) -> Document:
    # Sets have no order of their own; sort for deterministic output.
    return listing(sorted(value, key=repr))


def register(cls: type[T], func: Callable[[T], Document]) -> None:
    """Register a conversion for a type that cannot implement `Pretty` itself.

    Args:
        cls (type[T]): The type to register.
        func (Callable[[T], Document]): Its pure conversion function.
    """
    logger.debug("registering document conversion for %s", cls.__qualname__)
    _convert.register(cls, func)


def register_fields(cls: type[T]) -> type[T]:
    """Class decorator: convert instances of a dataclass to a tree of their fields.

    Keys follow the field declaration order, with underscores shown as spaces,
    so declare the fields in the order a reader expects them.

    Raises:
        TypeError: If ``cls`` is not a dataclass.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__qualname__} is not a dataclass")
    names = [f.name for f in dataclasses.fields(cls)]

    def _fields_tree(value: T) -> Document:
        return Tree((name.replace("_", " "), to_document(getattr(value, name))) for name in names)

    register(cls, _fields_tree)
    return cls
