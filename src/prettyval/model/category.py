# topmark:header:start
#
#   project      : PrettyVal
#   file         : category.py
#   file_relpath : src/prettyval/model/category.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering categories for semantic terminals.

Every semantic terminal of the document model belongs to exactly one category,
and every category is painted with exactly one color. The table is static: the
color of a value never depends on the value itself or on where it appears.
"""

from __future__ import annotations

from prettyval.rendering.colored_enum import ColoredStrEnum, foreground


class Category(ColoredStrEnum):
    """Category of a semantic terminal, with its display color.

    Attributes:
        HASH: Hash-like values (green).
        EPOCH: Epoch numbers (blue).
        SLOT_ID: Slot identifiers within an epoch (magenta).
        SIGNATURE: Block signatures and transaction/general signatures (cyan).
        ACTOR: Actor identifiers: extended public keys and stakeholder ids (yellow).
    """

    HASH = ("hash", foreground("green"))
    EPOCH = ("epoch", foreground("blue"))
    SLOT_ID = ("slot-id", foreground("magenta"))
    SIGNATURE = ("signature", foreground("cyan"))
    ACTOR = ("actor", foreground("yellow"))
