"""Consensus proposals exchanged between validators."""

from __future__ import annotations

from dataclasses import dataclass, field

from rippledata.format import HashPrefix
from rippledata.hashes import Hash256, PublicKey, VariableLength
from rippledata.rippletime import RippleTime
from rippledata.util import sha512_half


def _u32(value: int) -> bytes:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value out of uint32 range: {value}")
    return value.to_bytes(4, "big")


@dataclass
class Proposal:
    """A validator's proposed ledger for a consensus round."""

    hash: Hash256 = field(default_factory=Hash256)
    ledger_hash: Hash256 = field(default_factory=Hash256)
    previous_ledger: Hash256 = field(default_factory=Hash256)
    sequence: int = 0
    close_time: RippleTime = field(default_factory=RippleTime)
    public_key: PublicKey = field(default_factory=PublicKey)
    signature: VariableLength = field(default_factory=VariableLength)

    def __post_init__(self) -> None:
        self.hash = Hash256(self.hash)
        self.ledger_hash = Hash256(self.ledger_hash)
        self.previous_ledger = Hash256(self.previous_ledger)
        self.public_key = PublicKey(self.public_key)
        self.signature = VariableLength(self.signature)

    @property
    def type_name(self) -> str:
        return "Proposal"

    @property
    def prefix(self) -> HashPrefix:
        return HashPrefix.PROPOSAL

    @property
    def signing_prefix(self) -> HashPrefix:
        return HashPrefix.PROPOSAL

    def signing_bytes(self) -> bytes:
        """The fields covered by the signature, in wire order."""
        return b"".join((
            _u32(self.sequence),
            _u32(int(self.close_time)),
            bytes(self.previous_ledger),
            bytes(self.ledger_hash),
        ))

    def suppression_id(self) -> Hash256:
        """Hash identifying this proposal for duplicate suppression."""
        return Hash256(sha512_half(
            bytes(self.ledger_hash),
            bytes(self.previous_ledger),
            _u32(self.sequence),
            _u32(int(self.close_time)),
            bytes(self.public_key),
            bytes(self.signature),
        ))