# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyVal package.

PrettyVal is a pretty-printing engine for structured records. Values are
converted into a small recursive document model (terminals, ordered trees and
lists) and rendered into indented, aligned and color-annotated text for
humans, e.g. to inspect decoded blockchain blocks from a terminal.
"""

from __future__ import annotations

from prettyval.api import pformat, pprint
from prettyval.config import RenderConfig
from prettyval.model import (
    BlockSig,
    Category,
    Document,
    Epoch,
    Hash,
    List,
    Pretty,
    Raw,
    Signature,
    SlotId,
    Stakeholder,
    Tree,
    XPub,
    from_debug,
    from_display,
    is_nonterminal,
    is_terminal,
    register,
    register_fields,
    to_document,
    variant,
)
from prettyval.rendering.renderer import longest_key_length, render, write

__all__ = [
    "BlockSig",
    "Category",
    "Document",
    "Epoch",
    "Hash",
    "List",
    "Pretty",
    "Raw",
    "RenderConfig",
    "Signature",
    "SlotId",
    "Stakeholder",
    "Tree",
    "XPub",
    "from_debug",
    "from_display",
    "is_nonterminal",
    "is_terminal",
    "longest_key_length",
    "pformat",
    "pprint",
    "register",
    "register_fields",
    "render",
    "to_document",
    "variant",
    "write",
]
