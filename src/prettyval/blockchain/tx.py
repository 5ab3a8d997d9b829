# topmark:header:start
#
#   project      : PrettyVal
#   file         : tx.py
#   file_relpath : src/prettyval/blockchain/tx.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transactions, their witnesses and the transaction payload of a block."""

from __future__ import annotations

from dataclasses import dataclass

from prettyval.blockchain.types import Blake2b256, RedeemSignature, XPub
from prettyval.model import document as doc
from prettyval.model.convert import from_display, listing, to_document


@dataclass(frozen=True, slots=True)
class TxoPointer:
    """Reference to an output of a previous transaction."""

    tx_id: Blake2b256
    index: int

    def __str__(self) -> str:
        return f"{self.tx_id}@{self.index}"


@dataclass(frozen=True, slots=True)
class TxOut:
    """An amount of coin sent to an address."""

    address: str
    value: int

    def __str__(self) -> str:
        return f"{self.address} -> {self.value}"


@dataclass(frozen=True, slots=True)
class TxInWitness:
    """Proof that the spender owns an input: a public key and a signature."""

    xpub: XPub
    signature: RedeemSignature

    def __str__(self) -> str:
        return f"PkWitness({self.xpub}, {self.signature.signature.hex()})"


@dataclass(frozen=True, slots=True)
class Tx:
    """A transaction: the inputs it spends and the outputs it creates."""

    inputs: tuple[TxoPointer, ...] = ()
    outputs: tuple[TxOut, ...] = ()

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("inputs", listing(self.inputs, from_display)),
                ("outputs", listing(self.outputs, from_display)),
            ]
        )


@dataclass(frozen=True, slots=True)
class TxAux:
    """A transaction together with one witness per input."""

    tx: Tx
    witnesses: tuple[TxInWitness, ...] = ()

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("tx", self.tx.to_pretty()),
                ("witnesses", listing(self.witnesses, from_display)),
            ]
        )


@dataclass(frozen=True, slots=True)
class TxPayload:
    """The transactions of a main block, in block order."""

    txs: tuple[TxAux, ...] = ()

    def to_pretty(self) -> doc.Document:
        return listing(self.txs)


@dataclass(frozen=True, slots=True)
class TxProof:
    """Commitment to the transaction payload of a block."""

    number: int
    root: Blake2b256
    witnesses_hash: Blake2b256

    def to_pretty(self) -> doc.Document:
        return doc.Tree(
            [
                ("number", from_display(self.number)),
                ("root", to_document(self.root)),
                ("witness hash", to_document(self.witnesses_hash)),
            ]
        )
