"""The numeric type of the ledger: native drops or a decimal mantissa and exponent."""

from __future__ import annotations

import re
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import BinaryIO

from rippledata.format import read_exact

MIN_OFFSET = -96
MAX_OFFSET = 80
MIN_VALUE = 1000000000000000
MAX_VALUE = 9999999999999999
MAX_NATIVE = 9000000000000000000
MAX_NATIVE_NETWORK = 100000000000000000
MAX_NATIVE_SQRT = 3000000000
MAX_NATIVE_DIV = 2095475792
XRP_PRECISION = 1000000

_TEN_TO_14 = 10**14
_TEN_TO_17 = 10**17
_UINT64_MAX = (1 << 64) - 1
_INT64_MAX = (1 << 63) - 1
_MASK_62 = (1 << 62) - 1
_MASK_54 = (1 << 54) - 1

# sign, integer part, fraction with '.', fraction, exponent with 'e', exponent sign, exponent
_VALUE_PATTERN = re.compile(r"([+-]?)([0-9]*)(\.([0-9]*))?([eE]([+-]?)([0-9]+))?")


def _truncate(value: int, digits: int) -> int:
    """Divide a signed integer by 10**digits, truncating toward zero."""
    quotient = abs(value) // 10 ** min(digits, 100)
    return -quotient if value < 0 else quotient


def _debug(native: bool, negative: bool, num: int, offset: int) -> str:
    return f"Native: {native} Negative: {negative} Value: {num} Offset: {offset}"


def _float_string(value: Fraction, precision: int) -> str:
    """Render ``value`` with ``precision`` decimals, rounding half away from zero."""
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    scale = 10 ** max(precision, 0)
    scaled = magnitude * scale
    quotient, remainder = divmod(scaled.numerator, scaled.denominator)
    if 2 * remainder >= scaled.denominator:
        quotient += 1
    if precision <= 0:
        return sign + str(quotient)
    whole, fraction = divmod(quotient, scale)
    return f"{sign}{whole}.{str(fraction).rjust(precision, '0')}"


def _canonical(native: bool, negative: bool, num: int, offset: int) -> Value:
    if native:
        if num == 0:
            return Value(True, False, 0, 0)
        if offset < 0:
            num //= 10 ** min(-offset, 100)
        elif offset > 0:
            if offset > 40:
                raise ValueError(
                    f"Native amount out of range: {_debug(native, negative, num, offset)}"
                )
            num *= 10**offset
        if num > MAX_NATIVE:
            raise ValueError(
                f"Native amount out of range: {_debug(native, negative, num, 0)}"
            )
        return Value(True, negative, num, 0)

    if num == 0:
        return Value(False, False, 0, -100)
    while num < MIN_VALUE and offset > MIN_OFFSET:
        num *= 10
        offset -= 1
    while num > MAX_VALUE:
        if offset >= MAX_OFFSET:
            raise ValueError(f"Value overflow: {_debug(native, negative, num, offset)}")
        num //= 10
        offset += 1
    if offset < MIN_OFFSET or num < MIN_VALUE:
        return Value(False, False, 0, 0)
    if offset > MAX_OFFSET:
        raise ValueError(f"Value overflow: {_debug(native, negative, num, offset)}")
    return Value(False, negative, num, offset)


def _normalise(a: Value, b: Value) -> tuple[int, int, int, int]:
    av, bv, ao, bo = a.num, b.num, a.offset, b.offset
    if a.native:
        while av < MIN_VALUE:
            av *= 10
            ao -= 1
    if b.native:
        while bv < MIN_VALUE:
            bv *= 10
            bo -= 1
    return av, bv, ao, bo


@total_ordering
@dataclass(frozen=True, eq=False)
class Value:
    """An amount: native values count drops, non-native ones are num * 10**offset."""

    native: bool = False
    negative: bool = False
    num: int = 0
    offset: int = 0

    @staticmethod
    def from_native(n: int) -> Value:
        """A native value of ``n`` drops."""
        return _canonical(True, n < 0, abs(n), 0)

    @staticmethod
    def from_non_native(n: int, offset: int) -> Value:
        """A non-native value of ``n * 10**offset``."""
        return _canonical(False, n < 0, abs(n), offset)

    @staticmethod
    def parse(text: str, native: bool) -> Value:
        """Parse a decimal string; a native value with a decimal point counts XRP, else drops."""
        match = _VALUE_PATTERN.match(text)
        sign, integer, dotted, fraction, exponent, exp_sign, exp_digits = (
            group or "" for group in match.groups()
        )
        if len(integer) + len(fraction) > 32:
            raise ValueError(f"Overlong Number: {text}")
        digits = integer + fraction if fraction else integer
        if not digits:
            raise ValueError(f"Invalid Number: {text}")
        num = int(digits)
        if num > _UINT64_MAX:
            raise ValueError(f"Invalid Number: {text} Reason: value out of range")
        offset = -len(fraction)
        if exponent:
            exp = int(exp_digits)
            if exp > _INT64_MAX:
                raise ValueError(f"Invalid Number: {text} exponent out of range")
            offset = offset - exp if exp_sign == "-" else offset + exp
        if native and dotted:
            offset += 6
        return _canonical(native, sign == "-", num, offset)

    @property
    def is_zero(self) -> bool:
        return self.num == 0

    def to_native(self) -> Value:
        """A copy of this value in native form."""
        return _canonical(True, self.negative, self.num, self.offset)

    def to_non_native(self) -> Value:
        """A copy of this value in non-native form."""
        return _canonical(False, self.negative, self.num, self.offset)

    def zero_clone(self) -> Value:
        """A zero of the same kind, native or not."""
        return _ZERO_NATIVE if self.native else _ZERO_NON_NATIVE

    def abs(self) -> Value:
        """A copy with a positive sign."""
        return Value(self.native, False, self.num, self.offset)

    def negate(self) -> Value:
        """A copy with the opposite sign."""
        return Value(self.native, not self.negative, self.num, self.offset)

    def _factor(self, other: Value) -> tuple[int, int, int]:
        av = -self.num if self.negative else self.num
        bv = -other.num if other.negative else other.num
        if self.is_zero:
            return av, bv, other.offset
        if other.is_zero:
            return av, bv, self.offset
        ao, bo = self.offset, other.offset
        if ao < bo:
            av = _truncate(av, bo - ao)
            ao = bo
        elif bo < ao:
            bv = _truncate(bv, ao - bo)
        return av, bv, ao

    def add(self, other: Value) -> Value:
        """The sum of two values of the same kind."""
        if self.native != other.native:
            raise ValueError("Cannot add native and non-native values")
        if self.is_zero:
            return other
        if other.is_zero:
            return self
        av, bv, offset = self._factor(other)
        total = av + bv
        return _canonical(self.native, total < 0, abs(total), offset)

    def subtract(self, other: Value) -> Value:
        """The difference of two values of the same kind."""
        return self.add(other.negate())

    def multiply(self, other: Value) -> Value:
        """The product, of the kind of ``self``."""
        if self.is_zero or other.is_zero:
            return self.zero_clone()
        if self.native and other.native:
            low, high = min(self.num, other.num), max(self.num, other.num)
            if low > MAX_NATIVE_SQRT or (high >> 32) * low > MAX_NATIVE_DIV:
                raise ValueError(
                    f"Native value overflow: "
                    f"{_debug(*self._fields())}*{_debug(*other._fields())}"
                )
            return Value.from_native(low * high)
        av, bv, ao, bo = _normalise(self, other)
        product = av * bv // _TEN_TO_14
        return _canonical(
            self.native, self.negative != other.negative, product + 7, ao + bo + 14
        )

    def divide(self, other: Value) -> Value:
        """The quotient, of the kind of ``self``."""
        if other.is_zero:
            raise ZeroDivisionError("Division by zero")
        if self.is_zero:
            return self.zero_clone()
        av, bv, ao, bo = _normalise(self, other)
        quotient = av * _TEN_TO_17 // bv
        return _canonical(
            self.native, self.negative != other.negative, quotient + 5, ao - bo - 17
        )

    def ratio(self, other: Value) -> Value:
        """``self / other`` as a non-native value, reading native values as XRP."""
        num, den = self, other
        if num.native:
            num = num.to_non_native().divide(_XRP_MULTIPLIER)
        if den.native:
            den = den.to_non_native().divide(_XRP_MULTIPLIER)
        return num.divide(den)

    def compare(self, other: Value) -> int:
        """-1, 0 or 1 as ``self`` is less than, equal to or greater than ``other``."""
        a, b = self.to_fraction(), other.to_fraction()
        return (a > b) - (a < b)

    def to_fraction(self) -> Fraction:
        """The exact numeric value (drops for native values)."""
        num = -self.num if self.negative else self.num
        if self.offset >= 0:
            return Fraction(num * 10**self.offset)
        return Fraction(num, 10 ** -self.offset)

    def _fields(self) -> tuple[bool, bool, int, int]:
        return self.native, self.negative, self.num, self.offset

    def to_bytes(self) -> bytes:
        """The eight-byte wire form."""
        u = 0
        if not self.negative and (self.num > 0 or self.native):
            u |= 1 << 62
        if self.native:
            u |= self.num & _MASK_62
        else:
            u |= 1 << 63
            u |= self.num & _MASK_54
            if self.num > 0:
                u |= ((self.offset + 97) & 0xFF) << 54
        return (u & _UINT64_MAX).to_bytes(8, "big")

    @staticmethod
    def from_bytes(data: bytes) -> Value:
        """Decode the eight-byte wire form."""
        if len(data) != 8:
            raise ValueError(f"Value: wrong length {len(data)} expected: 8")
        u = int.from_bytes(data, "big")
        native = (u >> 63) == 0
        negative = (u >> 62) & 1 == 0
        if native:
            return Value(True, negative, u & _MASK_62, 0)
        return Value(False, negative, u & _MASK_54, ((u >> 54) & 0xFF) - 97)

    @staticmethod
    def read(reader: BinaryIO) -> Value:
        """Read a value in wire form from ``reader``."""
        return Value.from_bytes(read_exact(reader, 8, "Value"))

    def write(self, writer: BinaryIO) -> None:
        """Write the wire form to ``writer``."""
        writer.write(self.to_bytes())

    def to_text(self) -> str:
        """Text form used in JSON: drops for native values, decimal otherwise."""
        if self.native:
            return ("-" if self.negative else "") + str(self.num)
        return str(self)

    def _is_scientific(self) -> bool:
        return self.offset != 0 and (self.offset < -25 or self.offset > -5)

    def __str__(self) -> str:
        if self.is_zero:
            return "0"
        if not self.native and self._is_scientific():
            digits = str(self.num)
            trimmed = digits.rstrip("0")
            exponent = self.offset + len(digits) - len(trimmed)
            return f"{'-' if self.negative else ''}{trimmed}e{exponent}"
        rat = self.to_fraction()
        if self.native:
            rat /= XRP_PRECISION
        left = _float_string(rat, 0)
        if rat.denominator == 1:
            return left
        length = len(left) - (1 if self.negative else 0)
        return _float_string(rat, 32 - length).rstrip("0")

    def __float__(self) -> float:
        if self.native:
            result = self.num / XRP_PRECISION
        else:
            result = float(self.num) * 10.0**self.offset
        return -result if self.negative else result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self.to_fraction())


_ZERO_NATIVE = _canonical(True, False, 0, 0)
_ZERO_NON_NATIVE = _canonical(False, False, 0, 0)
_XRP_MULTIPLIER = _canonical(True, False, XRP_PRECISION, 0)