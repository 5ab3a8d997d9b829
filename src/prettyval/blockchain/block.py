# topmark:header:start
#
#   project      : PrettyVal
#   file         : block.py
#   file_relpath : src/prettyval/blockchain/block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A block of either kind, as found on the chain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from prettyval.blockchain.genesis import GenesisBlock
from prettyval.blockchain.normal import MainBlock
from prettyval.model import document as doc
from prettyval.model.convert import variant


@dataclass(frozen=True, slots=True)
class Block:
    """Either a genesis block or a main block.

    Its document is a single-entry tree naming the kind of block.
    """

    inner: Union[GenesisBlock, MainBlock]

    @property
    def is_genesis(self) -> bool:
        return isinstance(self.inner, GenesisBlock)

    def to_pretty(self) -> doc.Document:
        name = "GenesisBlock" if self.is_genesis else "MainBlock"
        return variant(name, self.inner.to_pretty())
