# topmark:header:start
#
#   project      : PrettyVal
#   file         : types.py
#   file_relpath : src/prettyval/blockchain/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar blockchain types: hashes, identifiers, keys and signatures.

Each type knows how to describe itself as a document terminal. Hashes of
block headers, epochs, slots, signatures and actor identifiers map to the
semantic (colored) terminals; the remaining scalars use their display form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from prettyval.model import document as doc
from prettyval.model.convert import from_debug, from_display

EpochId = int


@dataclass(frozen=True, slots=True)
class HeaderHash:
    """Hash of a block header (the link to the previous block)."""

    digest: bytes

    def __str__(self) -> str:
        return self.digest.hex()

    def to_pretty(self) -> doc.Document:
        return doc.Hash(self.digest)


@dataclass(frozen=True, slots=True)
class Blake2b256:
    """A generic 32-byte Blake2b digest (proofs, transaction ids)."""

    digest: bytes

    def __str__(self) -> str:
        return self.digest.hex()

    def to_pretty(self) -> doc.Document:
        return from_display(self)


@dataclass(frozen=True, slots=True)
class ProtocolMagic:
    """Network discriminator carried by every block header."""

    magic: int

    def __str__(self) -> str:
        return str(self.magic)

    def to_pretty(self) -> doc.Document:
        return from_display(self)


@dataclass(frozen=True, slots=True)
class ChainDifficulty:
    """Number of main blocks from the genesis of the chain."""

    difficulty: int

    def __str__(self) -> str:
        return str(self.difficulty)

    def to_pretty(self) -> doc.Document:
        return from_display(self)


@dataclass(frozen=True, slots=True)
class SlotId:
    """Position of a block in time: an epoch and a slot within it."""

    epoch: EpochId
    slot_id: int

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("epoch", doc.Epoch(self.epoch)),
                ("slot id", doc.SlotId(self.slot_id)),
            ]
        )


@dataclass(frozen=True, slots=True)
class StakeholderId:
    """Hash identifying a stakeholder."""

    digest: bytes

    def __str__(self) -> str:
        return self.digest.hex()

    def to_pretty(self) -> doc.Document:
        return doc.Stakeholder(self)


@dataclass(frozen=True, slots=True)
class XPub:
    """Extended public key: a 32-byte public key followed by a 32-byte chain code."""

    key: bytes

    def __str__(self) -> str:
        return self.key.hex()

    def to_pretty(self) -> doc.Document:
        return doc.XPub(self)


@dataclass(frozen=True, slots=True)
class RedeemSignature:
    """Signature made with a redeem key (transactions, VSS certificates)."""

    signature: bytes

    def __repr__(self) -> str:
        return f"Signature({self.signature.hex()})"

    def to_pretty(self) -> doc.Document:
        return doc.Signature(self)


@dataclass(frozen=True, slots=True)
class BlockSignature:
    """Signature of a main block header.

    ``kind`` tells how the block was signed: directly by the slot leader
    (``"signature"``) or through a light/heavy delegation certificate
    (``"proxy-light"``, ``"proxy-heavy"``).
    """

    kind: str
    signature: bytes

    def __repr__(self) -> str:
        return f"BlockSignature::{self.kind}({self.signature.hex()})"

    def to_pretty(self) -> doc.Document:
        return doc.BlockSig(self)


@dataclass(frozen=True, slots=True)
class CborValue:
    """A decoded but otherwise uninterpreted CBOR item."""

    value: Any

    def to_pretty(self) -> doc.Document:
        # No structured view yet: dump it.
        return from_debug(self)
