import io

import pytest

from rippledata.value import Value

NON_NATIVE_ZERO_BYTES = bytes.fromhex("8000000000000000")


def test_parse_decimal_text_round_trip():
    assert str(Value.parse("1.5", False)) == "1.5"


def test_native_decimal_is_xrp_and_integer_is_drops():
    assert Value.parse("1.5", True) == Value.parse("1500000", True)


def test_native_string_is_in_xrp():
    assert str(Value.parse("2500000", True)) == "2.5"


def test_native_to_text_is_drops():
    assert Value.from_native(-5).to_text() == "-5"
    assert Value.parse("1500000", True).to_text() == "1500000"


def test_scientific_string():
    assert str(Value.parse("1e-30", False)) == "1e-30"


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        Value.parse("abc", False)


def test_overlong_number_raises():
    with pytest.raises(ValueError):
        Value.parse("1" * 33, False)


def test_native_out_of_range_raises():
    with pytest.raises(ValueError):
        Value.from_native(9000000000000000001)


def test_non_native_overflow_raises():
    with pytest.raises(ValueError):
        Value.parse("1e200", False)


def test_non_native_underflow_is_zero():
    value = Value.parse("1e-200", False)
    assert value == Value.parse("0", False)
    assert value.to_bytes() == NON_NATIVE_ZERO_BYTES
    assert str(value) == "0"


def test_zero_is_not_negative():
    zero = Value.parse("-0", False)
    assert zero.is_zero
    assert not zero.negative


def test_add_then_subtract_returns_original():
    a = Value.parse("123.456", False)
    b = Value.parse("7.89", False)
    assert a.add(b).subtract(b) == a


def test_add_mixed_kinds_raises():
    with pytest.raises(ValueError):
        Value.parse("1", True).add(Value.parse("1", False))


def test_add_zero_returns_other():
    b = Value.parse("42", False)
    assert Value.parse("0", False).add(b) == b


def test_multiply_then_divide_returns_original():
    a = Value.parse("2", False)
    b = Value.parse("3", False)
    assert a.multiply(b).divide(b) == a


def test_multiply_by_zero_is_zero():
    product = Value.parse("5", False).multiply(Value.parse("0", False))
    assert product == Value.parse("0", False)
    assert product.to_bytes() == NON_NATIVE_ZERO_BYTES
    assert str(product) == "0"


def test_native_multiply_overflow_raises():
    big = Value.from_native(3000000001)
    with pytest.raises(ValueError):
        big.multiply(big)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Value.parse("1", False).divide(Value.parse("0", False))


def test_ratio_reads_native_as_xrp():
    xrp = Value.parse("2.0", True)
    iou = Value.parse("2", False)
    result = xrp.ratio(iou)
    assert not result.native
    assert result == iou.divide(iou)


def test_ordering():
    values = [Value.parse(t, False) for t in ("5", "-3", "0", "0.25")]
    ordered = sorted(values)
    assert [v.compare(w) for v, w in zip(ordered, ordered[1:])] == [-1, -1, -1]
    assert ordered[0].negative


def test_negate_and_abs():
    v = Value.parse("-7.5", False)
    assert v.negate().negate() == v
    assert v.abs() == v.negate()
    assert not v.abs().negative


def test_zero_clone_keeps_kind():
    assert Value.parse("10", True).zero_clone().native
    assert not Value.parse("10", False).zero_clone().native
    assert Value.parse("10", False).zero_clone().is_zero


def test_kind_conversion_preserves_value():
    v = Value.parse("1500000", True)
    converted = v.to_non_native()
    assert not converted.native
    assert converted == v
    assert converted.to_native() == v


def test_wire_bytes_of_zeros():
    assert Value.from_native(0).to_bytes() == bytes.fromhex("4000000000000000")
    assert Value.parse("0", False).to_bytes() == NON_NATIVE_ZERO_BYTES


@pytest.mark.parametrize(
    "text,native",
    [("1", True), ("123456789", True), ("1.5", False), ("-42.125", False), ("1e-30", False)],
)
def test_bytes_round_trip(text, native):
    v = Value.parse(text, native)
    data = v.to_bytes()
    assert len(data) == 8
    back = Value.from_bytes(data)
    assert back == v
    assert back.native == native


def test_wire_flag_bits():
    assert Value.parse("1", True).to_bytes()[0] & 0x80 == 0
    assert Value.parse("1", False).to_bytes()[0] & 0x80 == 0x80
    assert Value.parse("-1", False).to_bytes()[0] & 0x40 == 0
    assert Value.parse("1", False).to_bytes()[0] & 0x40 == 0x40


def test_write_and_read_stream():
    first = Value.parse("3.25", False)
    second = Value.from_native(77)
    buffer = io.BytesIO()
    first.write(buffer)
    second.write(buffer)
    buffer.seek(0)
    assert Value.read(buffer) == first
    assert Value.read(buffer) == second


def test_short_read_raises():
    with pytest.raises(ValueError):
        Value.read(io.BytesIO(b"\x40\x00"))


def test_from_bytes_wrong_length_raises():
    with pytest.raises(ValueError):
        Value.from_bytes(b"\x00" * 7)


def test_equal_values_hash_equal():
    a = Value.parse("1.50", False)
    b = Value.parse("1.5", False)
    assert a == b
    assert hash(a) == hash(b)