"""Ledger indexes: the keys under which ledger entries are stored."""

from __future__ import annotations

from typing import Optional

from rippledata.format import LedgerNamespace
from rippledata.hashes import Account, Hash160, Hash256
from rippledata.util import sha512_half

_UINT64_MAX = (1 << 64) - 1


def _u32(value: int) -> bytes:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"value out of uint32 range: {value}")
    return value.to_bytes(4, "big")


def _u64(value: int) -> bytes:
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"value out of uint64 range: {value}")
    return value.to_bytes(8, "big")


def _index(namespace: LedgerNamespace, *items: bytes) -> Hash256:
    return Hash256(sha512_half(bytes(namespace), *(bytes(i) for i in items)))


def next_node_index(index: Optional[int]) -> Optional[int]:
    """The following directory node index, or None at the end of the range."""
    if index is None or index == _UINT64_MAX:
        return None
    return index + 1


def previous_node_index(index: Optional[int]) -> Optional[int]:
    """The preceding directory node index, or None before the first."""
    if index is None or index == 0:
        return None
    return index - 1


def account_root_index(account: Account) -> Hash256:
    """Index of an account's root entry."""
    return _index(LedgerNamespace.ACCOUNT, Account(account))


def offer_index(account: Account, sequence: int) -> Hash256:
    """Index of the offer created by ``account`` with ``sequence``."""
    return _index(LedgerNamespace.OFFER, Account(account), _u32(sequence))


def ripple_state_index(a: Account, b: Account, currency: bytes) -> Hash256:
    """Index of the trust line between two accounts in ``currency``."""
    low, high = (a, b) if bytes(a) < bytes(b) else (b, a)
    return _index(
        LedgerNamespace.RIPPLE_STATE, Account(low), Account(high), Hash160(currency)
    )


def directory_node_index(root: Hash256, index: Optional[int]) -> Hash256:
    """Index of page ``index`` of the directory at ``root``; the root itself if None."""
    if index is None:
        return Hash256(root)
    return _index(LedgerNamespace.DIRECTORY_NODE, Hash256(root), _u64(index))


def owner_directory_index(account: Account) -> Hash256:
    """Index of the directory of things owned by ``account``."""
    return _index(LedgerNamespace.OWNER_DIRECTORY, Account(account))


def book_index(
    pays_currency: Hash160,
    gets_currency: Hash160,
    pays_issuer: Hash160,
    gets_issuer: Hash160,
) -> Hash256:
    """Base index of an order book directory; the last eight bytes are zero.

    The currencies are hashed twice in place of the issuers, which are only
    checked for length.
    """
    Hash160(pays_issuer)
    Hash160(gets_issuer)
    pays, gets = Hash160(pays_currency), Hash160(gets_currency)
    digest = _index(LedgerNamespace.BOOK_DIRECTORY, pays, gets, pays, gets)
    return Hash256(bytes(digest[:24]) + bytes(8))


def fee_index() -> Hash256:
    """Index of the fee settings entry."""
    return _index(LedgerNamespace.FEE)


def amendments_index() -> Hash256:
    """Index of the amendments entry."""
    return _index(LedgerNamespace.AMENDMENT)


def ledger_hash_index() -> Hash256:
    """Index of the skip list of recent ledger hashes."""
    return _index(LedgerNamespace.SKIP_LIST)


def previous_ledger_hash_index(sequence: int) -> Hash256:
    """Index of the skip list holding the hash of ledger ``sequence``."""
    return _index(LedgerNamespace.SKIP_LIST, _u32(sequence >> 16))