# topmark:header:start
#
#   project      : PrettyVal
#   file         : genesis.py
#   file_relpath : src/prettyval/blockchain/genesis.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Genesis (epoch boundary) blocks."""

from __future__ import annotations

from dataclasses import dataclass

from prettyval.blockchain.types import (
    Blake2b256,
    CborValue,
    ChainDifficulty,
    EpochId,
    HeaderHash,
    ProtocolMagic,
    StakeholderId,
)
from prettyval.model import document as doc
from prettyval.model.convert import from_debug, listing


@dataclass(frozen=True, slots=True)
class BodyProof:
    """Hash of the genesis body (the slot leaders)."""

    digest: Blake2b256

    def to_pretty(self) -> doc.Document:
        return from_debug(self)


@dataclass(frozen=True, slots=True)
class Consensus:
    """Consensus data of a genesis block header."""

    epoch: EpochId
    chain_difficulty: ChainDifficulty

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("epoch", doc.Epoch(self.epoch)),
                ("chain difficulty", self.chain_difficulty.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class BlockHeader:
    """Header of a genesis block."""

    protocol_magic: ProtocolMagic
    previous_header: HeaderHash
    body_proof: BodyProof
    consensus: Consensus
    extra_data: CborValue

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("protocol magic", self.protocol_magic.to_pretty()),
                ("previous hash", self.previous_header.to_pretty()),
                ("body proof", self.body_proof.to_pretty()),
                ("consensus", self.consensus.to_pretty()),
                ("extra data", self.extra_data.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class Body:
    """Body of a genesis block: the slot leaders of the new epoch, in slot order."""

    slot_leaders: tuple[StakeholderId, ...] = ()

    def to_pretty(self) -> doc.Document:
        return listing(self.slot_leaders)


@dataclass(frozen=True, slots=True)
class GenesisBlock:
    """A genesis block: header, body and extra data."""

    header: BlockHeader
    body: Body
    extra: CborValue

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("header", self.header.to_pretty()),
                ("body", self.body.to_pretty()),
                ("extra", self.extra.to_pretty()),
            ]
        )
