# topmark:header:start
#
#   project      : PrettyVal
#   file         : document.py
#   file_relpath : src/prettyval/model/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The recursive document model rendered by PrettyVal.

A `Document` is one of:

* `Raw`: pre-formatted text, rendered verbatim.
* A semantic terminal (`Hash`, `Epoch`, `SlotId`, `BlockSig`, `Signature`,
  `XPub`, `Stakeholder`): a domain scalar tagged with a `Category` that selects
  its display color.
* `List`: an ordered sequence of documents.
* `Tree`: an ordered sequence of ``(key, document)`` pairs.

`List` and `Tree` are the only nonterminals. Every node is a frozen dataclass;
containers freeze their children into tuples at construction time, so a
document cannot change once built.

The set of kinds is closed. A new terminal kind must be added to
`TERMINAL_TYPES` and to the category dispatch in
`prettyval.rendering.renderer`, whose exhaustive ``match`` fails type checking
otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar, Union

from prettyval.model.category import Category


class _Node:
    """Shared behavior of all document nodes."""

    __slots__ = ()

    def __str__(self) -> str:
        # Imported lazily: the renderer depends on this module.
        from prettyval.rendering.renderer import render

        return render(self)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Raw(_Node):
    """Opaque pre-formatted text; the escape hatch for unclassified data."""

    text: str


@dataclass(frozen=True, slots=True)
class Hash(_Node):
    """A hash-like value, displayed as lowercase hex."""

    category: ClassVar[Category] = Category.HASH

    value: bytes

    def text(self) -> str:
        return self.value.hex()


@dataclass(frozen=True, slots=True)
class Epoch(_Node):
    """An epoch number."""

    category: ClassVar[Category] = Category.EPOCH

    value: int

    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class SlotId(_Node):
    """A slot identifier within an epoch."""

    category: ClassVar[Category] = Category.SLOT_ID

    value: int

    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class BlockSig(_Node):
    """A block-level signature, displayed with its debug representation."""

    category: ClassVar[Category] = Category.SIGNATURE

    value: object

    def text(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class Signature(_Node):
    """A transaction (or general purpose) signature, displayed with its debug representation."""

    category: ClassVar[Category] = Category.SIGNATURE

    value: object

    def text(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class XPub(_Node):
    """An extended public key."""

    category: ClassVar[Category] = Category.ACTOR

    value: object

    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Stakeholder(_Node):
    """A stakeholder identifier."""

    category: ClassVar[Category] = Category.ACTOR

    value: object

    def text(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True, init=False)
class List(_Node):
    """An ordered, possibly empty, sequence of documents."""

    items: tuple[Document, ...] = field(default=())

    def __init__(self, items: Iterable[Document] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))


@dataclass(frozen=True, slots=True, init=False)
class Tree(_Node):
    """An ordered, possibly empty, sequence of labeled documents.

    Keys are plain strings and need not be unique; their order is the display
    order.
    """

    entries: tuple[tuple[str, Document], ...] = field(default=())

    def __init__(self, entries: Iterable[tuple[str, Document]] = ()) -> None:
        object.__setattr__(self, "entries", tuple((key, value) for key, value in entries))

    def keys(self) -> list[str]:
        """Return the keys of the immediate children, in order."""
        return [key for key, _ in self.entries]


Terminal = Union[Raw, Hash, Epoch, SlotId, BlockSig, Signature, XPub, Stakeholder]
Nonterminal = Union[List, Tree]
Document = Union[Terminal, Nonterminal]

TERMINAL_TYPES: tuple[type, ...] = (
    Raw,
    Hash,
    Epoch,
    SlotId,
    BlockSig,
    Signature,
    XPub,
    Stakeholder,
)
NONTERMINAL_TYPES: tuple[type, ...] = (List, Tree)
DOCUMENT_TYPES: tuple[type, ...] = TERMINAL_TYPES + NONTERMINAL_TYPES


def is_terminal(doc: Document) -> bool:
    """Return True if ``doc`` renders inline on its parent's line."""
    return isinstance(doc, TERMINAL_TYPES)


def is_nonterminal(doc: Document) -> bool:
    """Return True if ``doc`` renders on the following lines, one level deeper."""
    return isinstance(doc, NONTERMINAL_TYPES)


def is_document(value: object) -> bool:
    """Return True if ``value`` is a document node of any kind."""
    return isinstance(value, DOCUMENT_TYPES)
