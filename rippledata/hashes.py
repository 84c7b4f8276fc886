"""Fixed-size hashes, keys and account identifiers of the binary format."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from rippledata.util import b2h


class KeyType(IntEnum):
    """Signature algorithm a key belongs to."""

    ECDSA = 0
    Ed25519 = 1

    def __str__(self) -> str:
        return self.name


class _FixedBytes(bytes):
    """Immutable bytes of an exact length; all zeros when built without data."""

    SIZE = 0

    def __new__(cls, data: Union[bytes, bytearray, memoryview, None] = None):
        raw = bytes(cls.SIZE) if data is None else bytes(data)
        if len(raw) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__}: wrong length {len(raw)} expected: {cls.SIZE}"
            )
        return super().__new__(cls, raw)

    @classmethod
    def from_hex(cls, text: str):
        """Build from a hexadecimal string of the right length."""
        return cls(bytes.fromhex(text))

    def _zero(self) -> bool:
        return not any(self)

    def __str__(self) -> str:
        return b2h(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({b2h(self)!r})"


class Hash128(_FixedBytes):
    """A 16-byte hash."""

    SIZE = 16


class Hash160(_FixedBytes):
    """A 20-byte hash."""

    SIZE = 20

    def account(self) -> Account:
        """The same 20 bytes as an account identifier."""
        return Account(self)


class Hash256(_FixedBytes):
    """A 32-byte hash."""

    SIZE = 32

    @staticmethod
    def from_value(value: Union[bytes, bytearray, str]) -> Hash256:
        """Build from 32 raw bytes or from their hexadecimal string."""
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 32:
                raise ValueError(f"NewHash256: Wrong length {b2h(value)}")
            return Hash256(value)
        if isinstance(value, str):
            raw = bytes.fromhex(value)
            if len(raw) != 32:
                raise ValueError(f"NewHash256: Wrong length {value}")
            return Hash256(raw)
        raise TypeError(f"NewHash256: Wrong type {value!r}")

    def is_zero(self) -> bool:
        """Whether every byte is zero."""
        return self._zero()

    def xor(self, other: Hash256) -> Hash256:
        """Byte-wise exclusive or of two hashes."""
        return Hash256(bytes(a ^ b for a, b in zip(self, other)))

    def compare(self, other: Hash256) -> int:
        """-1, 0 or 1 comparing the bytes lexicographically."""
        a, b = bytes(self), bytes(other)
        return (a > b) - (a < b)

    def truncated(self, length: int) -> str:
        """Hexadecimal string of the first ``length`` bytes."""
        if not 0 <= length <= self.SIZE:
            raise ValueError(f"truncation length out of range: {length}")
        return b2h(self[:length])


class Vector256(list):
    """A list of 256-bit hashes."""

    def __str__(self) -> str:
        return "[" + ",".join(str(Hash256(h)) for h in self) + "]"


class VariableLength(bytes):
    """A byte string of any length, shown as hexadecimal."""

    def __str__(self) -> str:
        return b2h(self)

    def __repr__(self) -> str:
        return f"VariableLength({b2h(self)!r})"


class PublicKey(_FixedBytes):
    """A 33-byte public key; the all-zero key stands for "no key"."""

    SIZE = 33

    def is_zero(self) -> bool:
        """Whether the key is unset."""
        return self._zero()

    def __str__(self) -> str:
        return "" if self.is_zero() else b2h(self)


class Account(_FixedBytes):
    """A 20-byte account identifier."""

    SIZE = 20

    def is_zero(self) -> bool:
        """Whether every byte is zero."""
        return self._zero()

    def compare(self, other: Account) -> int:
        """-1, 0 or 1 comparing the bytes lexicographically."""
        a, b = bytes(self), bytes(other)
        return (a > b) - (a < b)

    def hash256(self) -> Hash256:
        """The identifier padded with zeros to 32 bytes."""
        return Hash256(bytes(self) + bytes(Hash256.SIZE - self.SIZE))


class RegularKey(_FixedBytes):
    """A 20-byte identifier of an account's regular key."""

    SIZE = 20