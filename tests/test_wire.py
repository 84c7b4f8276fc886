import io

import pytest

from rippledata.hashes import (
    Account,
    Hash128,
    Hash160,
    Hash256,
    PublicKey,
    RegularKey,
    Vector256,
)
from rippledata.result import TransactionResult
from rippledata.wire import (
    read_account,
    read_hash,
    read_public_key,
    read_regular_key,
    read_result,
    read_variable_bytes,
    read_vector256,
    write_account,
    write_hash,
    write_public_key,
    write_regular_key,
    write_result,
    write_variable_bytes,
    write_vector256,
)


def _round_trip(write, read, value):
    buf = io.BytesIO()
    write(buf, value)
    buf.seek(0)
    result = read(buf)
    assert buf.read() == b""
    return result


@pytest.mark.parametrize("cls", [Hash128, Hash160, Hash256])
def test_hash_round_trip(cls):
    value = cls(bytes(range(cls.SIZE)))
    result = _round_trip(write_hash, lambda r: read_hash(r, cls), value)
    assert result == value
    assert isinstance(result, cls)


def test_hash_short_read():
    with pytest.raises(ValueError):
        read_hash(io.BytesIO(b"\x01\x02"), Hash256)


def test_vector256_round_trip():
    vector = Vector256([Hash256(bytes([i]) * 32) for i in range(3)])
    assert _round_trip(write_vector256, read_vector256, vector) == vector


def test_vector256_empty():
    buf = io.BytesIO()
    write_vector256(buf, Vector256())
    assert buf.getvalue() == b"\x00"


@pytest.mark.parametrize("size", [0, 5, 192, 193, 12480, 12481, 20000])
def test_variable_bytes_round_trip(size):
    data = bytes(i % 251 for i in range(size))
    buf = io.BytesIO()
    write_variable_bytes(buf, data)
    buf.seek(0)
    assert read_variable_bytes(buf) == data
    assert buf.read() == b""


def test_variable_bytes_short_read():
    with pytest.raises(ValueError):
        read_variable_bytes(io.BytesIO(b"\x05ab"))


def test_account_round_trip_and_prefix():
    account = Account(bytes(range(20)))
    buf = io.BytesIO()
    write_account(buf, account)
    assert buf.getvalue() == bytes([20]) + bytes(account)
    assert _round_trip(write_account, read_account, account) == account


def test_account_empty_reads_zero():
    account = read_account(io.BytesIO(b"\x00"))
    assert account.is_zero()


def test_account_wrong_length():
    with pytest.raises(ValueError):
        read_account(io.BytesIO(b"\x03abc"))


def test_regular_key_round_trip():
    key = RegularKey(b"\x07" * 20)
    assert _round_trip(write_regular_key, read_regular_key, key) == key


def test_public_key_round_trip():
    key = PublicKey(b"\x03" + bytes(range(32)))
    assert _round_trip(write_public_key, read_public_key, key) == key


def test_zero_public_key_written_empty():
    buf = io.BytesIO()
    write_public_key(buf, PublicKey())
    assert buf.getvalue() == b"\x00"
    buf.seek(0)
    assert read_public_key(buf).is_zero()


def test_result_round_trip():
    result = TransactionResult.tecPATH_DRY
    buf = io.BytesIO()
    write_result(buf, result)
    assert buf.getvalue() == bytes([int(result)])
    buf.seek(0)
    assert read_result(buf) is result
    assert buf.read() == b""


def test_result_success_byte():
    assert read_result(io.BytesIO(b"\x00")) is TransactionResult.tesSUCCESS


def test_negative_result_rejected():
    with pytest.raises(ValueError):
        write_result(io.BytesIO(), TransactionResult.temMALFORMED)


def test_result_missing_byte():
    with pytest.raises(ValueError):
        read_result(io.BytesIO(b""))