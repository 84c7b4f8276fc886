import pytest

from rippledata.util import b2h, sha512_half


def test_b2h_is_upper_case_hex():
    assert b2h(b"\xab\xcd\x01") == "ABCD01"


def test_b2h_round_trips_through_fromhex():
    data = bytes(range(256))
    assert bytes.fromhex(b2h(data)) == data


def test_b2h_empty():
    assert b2h(b"") == ""


def test_sha512_half_known_vector():
    assert sha512_half(b"abc").hex() == (
        "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
    )


def test_sha512_half_hashes_concatenation():
    assert sha512_half(b"ab", bytearray(b"c")) == sha512_half(b"abc")


def test_sha512_half_length():
    assert len(sha512_half(b"\x00" * 100)) == 32


def test_sha512_half_rejects_text():
    with pytest.raises(TypeError):
        sha512_half("abc")