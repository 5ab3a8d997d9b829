# topmark:header:start
#
#   project      : PrettyVal
#   file         : __init__.py
#   file_relpath : src/prettyval/blockchain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoded blockchain records that know how to pretty-print themselves.

Main-chain records live in `prettyval.blockchain.normal`, epoch-boundary
records in `prettyval.blockchain.genesis`; both modules define a
``BlockHeader``, ``Consensus``, ``Body`` and ``BodyProof``, so import them by
module.
"""

from __future__ import annotations

from prettyval.blockchain import genesis, normal
from prettyval.blockchain.block import Block
from prettyval.blockchain.genesis import GenesisBlock
from prettyval.blockchain.normal import MainBlock
from prettyval.blockchain.tx import Tx, TxAux, TxInWitness, TxoPointer, TxOut, TxPayload, TxProof
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
    StakeholderId,
    XPub,
)

__all__ = [
    "Blake2b256",
    "Block",
    "BlockSignature",
    "CborValue",
    "ChainDifficulty",
    "EpochId",
    "GenesisBlock",
    "HeaderHash",
    "MainBlock",
    "ProtocolMagic",
    "RedeemSignature",
    "SlotId",
    "StakeholderId",
    "Tx",
    "TxAux",
    "TxInWitness",
    "TxOut",
    "TxPayload",
    "TxProof",
    "TxoPointer",
    "XPub",
    "genesis",
    "normal",
]
