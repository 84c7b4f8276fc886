"""Reading and writing hashes, keys, vectors and results in the binary format."""

from __future__ import annotations

from typing import BinaryIO, Type, TypeVar

from rippledata.format import read_exact, read_variable_length, write_variable_length
from rippledata.hashes import (
    Account,
    Hash256,
    PublicKey,
    RegularKey,
    VariableLength,
    Vector256,
)
from rippledata.result import TransactionResult

_T = TypeVar("_T", bound=bytes)


def read_hash(reader: BinaryIO, cls: Type[_T]) -> _T:
    """Read a fixed-size hash of type ``cls``."""
    return cls(read_exact(reader, cls.SIZE, cls.__name__))


def write_hash(writer: BinaryIO, value: bytes) -> None:
    """Write the raw bytes of a fixed-size hash."""
    writer.write(bytes(value))


def read_vector256(reader: BinaryIO) -> Vector256:
    """Read a length-prefixed run of 256-bit hashes."""
    count = read_variable_length(reader) // Hash256.SIZE
    return Vector256(read_hash(reader, Hash256) for _ in range(count))


def write_vector256(writer: BinaryIO, vector: Vector256) -> None:
    """Write a run of 256-bit hashes with a length prefix."""
    write_variable_length(writer, b"".join(bytes(Hash256(h)) for h in vector))


def read_variable_bytes(reader: BinaryIO) -> VariableLength:
    """Read a length-prefixed byte string."""
    length = read_variable_length(reader)
    return VariableLength(read_exact(reader, length, "VariableLength"))


def write_variable_bytes(writer: BinaryIO, data: bytes) -> None:
    """Write a byte string with a length prefix."""
    write_variable_length(writer, bytes(data))


def _read_expected(reader: BinaryIO, cls: Type[_T], prefix: str) -> _T:
    try:
        length = read_variable_length(reader)
    except (ValueError, EOFError) as exc:
        raise ValueError(f"{prefix}: {exc}") from exc
    if length == 0:
        return cls()
    if length != cls.SIZE:
        raise ValueError(f"{prefix}: wrong length {length} expected: {cls.SIZE}")
    return cls(read_exact(reader, length, prefix))


def read_account(reader: BinaryIO) -> Account:
    """Read a length-prefixed account; an empty one reads as the zero account."""
    return _read_expected(reader, Account, "Account")


def write_account(writer: BinaryIO, account: Account) -> None:
    """Write an account with its length prefix."""
    write_variable_length(writer, bytes(account))


def read_regular_key(reader: BinaryIO) -> RegularKey:
    """Read a length-prefixed regular key."""
    return _read_expected(reader, RegularKey, "RegularKey")


def write_regular_key(writer: BinaryIO, key: RegularKey) -> None:
    """Write a regular key with its length prefix."""
    write_variable_length(writer, bytes(key))


def read_public_key(reader: BinaryIO) -> PublicKey:
    """Read a length-prefixed public key; an empty one reads as the zero key."""
    return _read_expected(reader, PublicKey, "PublicKey")


def write_public_key(writer: BinaryIO, key: PublicKey) -> None:
    """Write a public key; the zero key is written as an empty string."""
    write_variable_length(writer, b"" if key.is_zero() else bytes(key))


def read_result(reader: BinaryIO) -> TransactionResult:
    """Read a one-byte transaction result."""
    return TransactionResult(read_exact(reader, 1, "TransactionResult")[0])


def write_result(writer: BinaryIO, result: int) -> None:
    """Write a transaction result as one byte."""
    code = int(result)
    if not 0 <= code <= 0xFF:
        raise ValueError(f"Cannot marshal transaction result: {code}")
    writer.write(bytes([code]))