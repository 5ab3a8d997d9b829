# topmark:header:start
#
#   project      : PrettyVal
#   file         : normal.py
#   file_relpath : src/prettyval/blockchain/normal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Main (normal) blocks: header, consensus data, body and proofs.

Every record lists its fields in the order a reader expects them (header,
body, extra; proof before consensus data, and so on), which is also the order
of the keys in its document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from prettyval.blockchain.tx import TxPayload, TxProof
from prettyval.blockchain.types import (
    Blake2b256,
    BlockSignature,
    CborValue,
    ChainDifficulty,
    EpochId,
    HeaderHash,
    ProtocolMagic,
    RedeemSignature,
    SlotId,
    XPub,
)
from prettyval.model import document as doc
from prettyval.model.convert import from_debug, listing, to_document


@dataclass(frozen=True, slots=True)
class HeaderExtraData:
    """Software/protocol versions announced by the block issuer."""

    block_version: tuple[int, int, int]
    software_version: tuple[str, int]
    attributes: CborValue
    extra_data_proof: Blake2b256

    def to_pretty(self) -> doc.Document:
        # TODO: expand into a tree once attributes have a typed decoding
        return from_debug(self)


@dataclass(frozen=True, slots=True)
class SscProof:
    """Commitment to the shared seed computation payload (a hash per SSC phase)."""

    kind: str
    hashes: tuple[Blake2b256, ...]

    def to_pretty(self) -> doc.Document:
        return from_debug(self)


@dataclass(frozen=True, slots=True)
class BodyProof:
    """Commitments to each part of a main block body."""

    tx: TxProof
    mpc: SscProof
    proxy_sk: Blake2b256
    update: Blake2b256

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("tx proof", self.tx.to_pretty()),
                ("mpc", self.mpc.to_pretty()),
                ("proxy sk", to_document(self.proxy_sk)),
                ("update", to_document(self.update)),
            ]
        )


@dataclass(frozen=True, slots=True)
class Consensus:
    """Consensus data of a main block header."""

    slot_id: SlotId
    leader_key: XPub
    chain_difficulty: ChainDifficulty
    block_signature: BlockSignature

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("slot", self.slot_id.to_pretty()),
                ("leader key", self.leader_key.to_pretty()),
                ("chain difficulty", self.chain_difficulty.to_pretty()),
                ("block signature", self.block_signature.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class BlockHeader:
    """Header of a main block."""

    protocol_magic: ProtocolMagic
    previous_header: HeaderHash
    body_proof: BodyProof
    consensus: Consensus
    extra_data: HeaderExtraData

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
class VssCertificate:
    """Certificate binding a VSS key to a stakeholder until an expiry epoch."""

    vss_key: bytes
    expiry_epoch: EpochId
    signature: RedeemSignature
    signing_key: XPub

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("vss key", to_document(self.vss_key)),
                ("expiry epoch", doc.Epoch(self.expiry_epoch)),
                ("signature", self.signature.to_pretty()),
                ("signing key", self.signing_key.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class VssCertificates:
    """The VSS certificates carried by an SSC payload, in payload order."""

    certificates: tuple[VssCertificate, ...] = ()

    def to_pretty(self) -> doc.Document:
        return listing(self.certificates)


@dataclass(frozen=True, slots=True)
class CommitmentsPayload:
    """SSC commitments phase."""

    commitments: CborValue
    vss_certificates: VssCertificates

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("commitments", self.commitments.to_pretty()),
                ("vss certificates", self.vss_certificates.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class OpeningsPayload:
    """SSC openings phase."""

    openings: CborValue
    vss_certificates: VssCertificates

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("openings", self.openings.to_pretty()),
                ("vss certificates", self.vss_certificates.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class SharesPayload:
    """SSC shares phase."""

    shares: CborValue
    vss_certificates: VssCertificates

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("shares", self.shares.to_pretty()),
                ("vss certificates", self.vss_certificates.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class CertificatesPayload:
    """SSC payload carrying only VSS certificates."""

    vss_certificates: VssCertificates

    def to_pretty(self) -> doc.Document:
        return doc.Tree([("vss certificates", self.vss_certificates.to_pretty())])


SscPayload = Union[CommitmentsPayload, OpeningsPayload, SharesPayload, CertificatesPayload]


@dataclass(frozen=True, slots=True)
class Body:
    """Body of a main block."""

    tx: TxPayload
    ssc: SscPayload
    delegation: CborValue
    update: CborValue

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("tx payload", self.tx.to_pretty()),
                ("ssc", self.ssc.to_pretty()),
                ("delegation", self.delegation.to_pretty()),
                ("update", self.update.to_pretty()),
            ]
        )


@dataclass(frozen=True, slots=True)
class MainBlock:
    """A main block: header, body and extra data."""

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
