"""Ledger headers and the ledger summary built on them."""

from __future__ import annotations

from dataclasses import dataclass, field

from rippledata.format import HashPrefix, NodeType
from rippledata.hashes import Hash256
from rippledata.rippletime import RippleTime


@dataclass
class LedgerHeader:
    """The fields of a ledger that are hashed to give its identity."""

    ledger_sequence: int = 0
    total_xrp: int = 0
    previous_ledger: Hash256 = field(default_factory=Hash256)
    transaction_hash: Hash256 = field(default_factory=Hash256)
    state_hash: Hash256 = field(default_factory=Hash256)
    parent_close_time: RippleTime = field(default_factory=RippleTime)
    close_time: RippleTime = field(default_factory=RippleTime)
    close_resolution: int = 0
    close_flags: int = 0


@dataclass
class Ledger(LedgerHeader):
    """A ledger header with its hash and consensus status."""

    hash: Hash256 = field(default_factory=Hash256)
    closed: bool = False
    accepted: bool = False

    @staticmethod
    def empty(sequence: int) -> Ledger:
        """A ledger with only its sequence number set."""
        return Ledger(ledger_sequence=sequence)

    @property
    def type_name(self) -> str:
        return "LedgerMaster"

    @property
    def prefix(self) -> HashPrefix:
        return HashPrefix.LEDGER_MASTER

    @property
    def node_type(self) -> NodeType:
        return NodeType.LEDGER

    @property
    def ledger(self) -> int:
        return self.ledger_sequence

    @property
    def node_id(self) -> Hash256:
        return self.hash

    @property
    def human_time(self) -> str:
        return str(self.close_time)

    @property
    def time(self) -> int:
        return int(self.close_time)