# topmark:header:start
#
#   project      : PrettyVal
#   file         : test_block_documents.py
#   file_relpath : tests/blockchain/test_block_documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the documents produced by decoded blockchain records."""

from __future__ import annotations

import click
import pytest

from prettyval import pformat, render, to_document
from prettyval.blockchain import (
    Blake2b256,
    Block,
    BlockSignature,
    CborValue,
    ChainDifficulty,
    GenesisBlock,
    HeaderHash,
    MainBlock,
    ProtocolMagic,
    RedeemSignature,
    SlotId,
    StakeholderId,
    Tx,
    TxAux,
    TxInWitness,
    TxoPointer,
    TxOut,
    TxPayload,
    TxProof,
    XPub,
    genesis,
    normal,
)
from prettyval.model import document as doc

D1 = Blake2b256(bytes.fromhex("11" * 4))
D2 = Blake2b256(bytes.fromhex("22" * 4))
PREV = HeaderHash(bytes.fromhex("ab" * 4))
LEADER = XPub(bytes.fromhex("cd" * 4))
SIG = RedeemSignature(bytes.fromhex("ef01"))


def _main_block() -> MainBlock:
    tx = TxAux(
        tx=Tx(
            inputs=(TxoPointer(D1, 0),),
            outputs=(TxOut("Ae2tdPwUPEZ", 1000), TxOut("DdzFFzCqrht", 42)),
        ),
        witnesses=(TxInWitness(LEADER, SIG),),
    )
    return MainBlock(
        header=normal.BlockHeader(
            protocol_magic=ProtocolMagic(764824073),
            previous_header=PREV,
            body_proof=normal.BodyProof(
                tx=TxProof(1, D1, D2),
                mpc=normal.SscProof("commitments", (D1,)),
                proxy_sk=D1,
                update=D2,
            ),
            consensus=normal.Consensus(
                slot_id=SlotId(epoch=3, slot_id=120),
                leader_key=LEADER,
                chain_difficulty=ChainDifficulty(64000),
                block_signature=BlockSignature("signature", bytes.fromhex("99")),
            ),
            extra_data=normal.HeaderExtraData(
                block_version=(0, 1, 0),
                software_version=("cardano-sl", 1),
                attributes=CborValue({}),
                extra_data_proof=D2,
            ),
        ),
        body=normal.Body(
            tx=TxPayload((tx,)),
            ssc=normal.CertificatesPayload(normal.VssCertificates()),
            delegation=CborValue([]),
            update=CborValue(None),
        ),
        extra=CborValue(None),
    )


def _genesis_block() -> GenesisBlock:
    return GenesisBlock(
        header=genesis.BlockHeader(
            protocol_magic=ProtocolMagic(1),
            previous_header=PREV,
            body_proof=genesis.BodyProof(D1),
            consensus=genesis.Consensus(epoch=4, chain_difficulty=ChainDifficulty(7)),
            extra_data=CborValue({}),
        ),
        body=genesis.Body((StakeholderId(b"\x01"), StakeholderId(b"\x02"))),
        extra=CborValue(None),
    )


def test_main_block_reading_order() -> None:
    block = _main_block()
    tree = block.to_pretty()
    assert isinstance(tree, doc.Tree)
    assert tree.keys() == ["header", "body", "extra"]

    header = tree.entries[0][1]
    assert isinstance(header, doc.Tree)
    assert header.keys() == [
        "protocol magic",
        "previous hash",
        "body proof",
        "consensus",
        "extra data",
    ]
    consensus = dict(header.entries)["consensus"]
    assert isinstance(consensus, doc.Tree)
    assert consensus.keys() == ["slot", "leader key", "chain difficulty", "block signature"]

    body = tree.entries[1][1]
    assert isinstance(body, doc.Tree)
    assert body.keys() == ["tx payload", "ssc", "delegation", "update"]


def test_semantic_terminals_in_headers() -> None:
    header = _main_block().header.to_pretty()
    assert isinstance(header, doc.Tree)
    entries = dict(header.entries)
    assert entries["previous hash"] == doc.Hash(PREV.digest)
    assert entries["protocol magic"] == doc.Raw("764824073")

    consensus = entries["consensus"]
    assert isinstance(consensus, doc.Tree)
    c = dict(consensus.entries)
    assert c["slot"] == doc.Tree([("epoch", doc.Epoch(3)), ("slot id", doc.SlotId(120))])
    assert c["leader key"] == doc.XPub(LEADER)
    assert c["block signature"].text() == "BlockSignature::signature(99)"  # type: ignore[union-attr]


def test_slot_id_rendering_is_colored() -> None:
    text = render(SlotId(epoch=3, slot_id=120).to_pretty())
    assert text == (
        f"- epoch  : {click.style('3', fg='blue')}\n"
        f"- slot id: {click.style('120', fg='magenta')}\n"
    )


def test_block_variants() -> None:
    main = Block(_main_block())
    gen = Block(_genesis_block())
    assert not main.is_genesis
    assert gen.is_genesis
    main_doc = main.to_pretty()
    gen_doc = gen.to_pretty()
    assert isinstance(main_doc, doc.Tree) and main_doc.keys() == ["MainBlock"]
    assert isinstance(gen_doc, doc.Tree) and gen_doc.keys() == ["GenesisBlock"]
    assert main_doc.entries[0][1] == main.inner.to_pretty()


def test_genesis_block_layout() -> None:
    text = click.unstyle(pformat(_genesis_block()))
    assert text.startswith("- header:\n    - protocol magic: 1\n    - previous hash : abababab\n")
    assert "    - consensus     :\n        - epoch           : 4\n" in text
    assert "- body  :\n    * 01\n    * 02\n" in text
    assert text.endswith("- extra : CborValue(value=None)\n")


def test_slot_leaders_are_actors() -> None:
    body = genesis.Body((StakeholderId(b"\xaa"),)).to_pretty()
    assert body == doc.List([doc.Stakeholder(StakeholderId(b"\xaa"))])
    assert render(body) == f"* {click.style('aa', fg='yellow')}\n"


def test_transactions() -> None:
    text = click.unstyle(pformat(_main_block().body.tx))
    assert text == (
        "*\n"
        "    - tx       :\n"
        "        - inputs :\n"
        "            * 11111111@0\n"
        "        - outputs:\n"
        "            * Ae2tdPwUPEZ -> 1000\n"
        "            * DdzFFzCqrht -> 42\n"
        "    - witnesses:\n"
        "        * PkWitness(cdcdcdcd, ef01)\n"
    )


def test_tx_proof() -> None:
    assert TxProof(2, D1, D2).to_pretty() == doc.Tree(
        [
            ("number", doc.Raw("2")),
            ("root", doc.Raw("11111111")),
            ("witness hash", doc.Raw("22222222")),
        ]
    )


def test_empty_payloads_render_nothing() -> None:
    assert render(TxPayload().to_pretty()) == ""
    assert render(Tx().to_pretty()) == "- inputs :\n- outputs:\n"


@pytest.mark.parametrize(
    ("payload", "keys"),
    [
        (
            normal.CommitmentsPayload(CborValue({}), normal.VssCertificates()),
            ["commitments", "vss certificates"],
        ),
        (
            normal.OpeningsPayload(CborValue({}), normal.VssCertificates()),
            ["openings", "vss certificates"],
        ),
        (
            normal.SharesPayload(CborValue({}), normal.VssCertificates()),
            ["shares", "vss certificates"],
        ),
        (normal.CertificatesPayload(normal.VssCertificates()), ["vss certificates"]),
    ],
)
def test_ssc_payload_variants(payload: normal.SscPayload, keys: list[str]) -> None:
    tree = payload.to_pretty()
    assert isinstance(tree, doc.Tree)
    assert tree.keys() == keys


def test_vss_certificate() -> None:
    cert = normal.VssCertificate(
        vss_key=b"\x0a\x0b",
        expiry_epoch=9,
        signature=SIG,
        signing_key=LEADER,
    )
    assert cert.to_pretty() == doc.Tree(
        [
            ("vss key", doc.Raw("0a0b")),
            ("expiry epoch", doc.Epoch(9)),
            ("signature", doc.Signature(SIG)),
            ("signing key", doc.XPub(LEADER)),
        ]
    )
    assert doc.Signature(SIG).text() == "Signature(ef01)"


def test_opaque_parts_fall_back_to_debug() -> None:
    extra = normal.HeaderExtraData((0, 1, 0), ("x", 1), CborValue({}), D2)
    assert extra.to_pretty() == doc.Raw(repr(extra))
    assert CborValue([1]).to_pretty() == doc.Raw("CborValue(value=[1])")
    assert genesis.BodyProof(D1).to_pretty() == doc.Raw(repr(genesis.BodyProof(D1)))


def test_records_convert_through_to_document() -> None:
    block = _main_block()
    assert to_document(block) == block.to_pretty()
    assert to_document([Block(block)]) == doc.List([Block(block).to_pretty()])
