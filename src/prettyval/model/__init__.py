# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document model and the conversion contract."""

from __future__ import annotations

from prettyval.model.category import Category
from prettyval.model.convert import (
    Pretty,
    from_debug,
    from_display,
    listing,
    pairs,
    register,
    register_fields,
    to_document,
    variant,
)
from prettyval.model.document import (
    BlockSig,
    Document,
    Epoch,
    Hash,
    List,
    Raw,
    Signature,
    SlotId,
    Stakeholder,
    Tree,
    XPub,
    is_nonterminal,
    is_terminal,
)

__all__ = [
    "BlockSig",
    "Category",
    "Document",
    "Epoch",
    "Hash",
    "List",
    "Pretty",
    "Raw",
    "Signature",
    "SlotId",
    "Stakeholder",
    "Tree",
    "XPub",
    "from_debug",
    "from_display",
    "is_nonterminal",
    "is_terminal",
    "listing",
    "pairs",
    "register",
    "register_fields",
    "to_document",
    "variant",
]
