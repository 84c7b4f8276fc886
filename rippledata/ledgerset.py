"""Bookkeeping of which ledgers are still missing and which are being fetched."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable

_RETAKE_AFTER_SECONDS = 90


@dataclass
class LedgerRange:
    """An inclusive range of ledger sequences and the most to take from it."""

    start: int
    end: int
    max: int


class LedgerSet:
    """Tracks missing ledgers; a ledger is handed out again after 90 seconds."""

    def __init__(
        self, start: int, capacity: int, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self._start = start
        self._length = capacity
        full, rest = divmod(capacity, 8)
        self._bits = bytearray(b"\xff" * full)
        if rest:
            self._bits.append((1 << rest) - 1)
        self._taken: dict[int, float] = {}
        self._returned = 0
        self._duration = 0.0
        self._clock = clock

    def _test(self, i: int) -> bool:
        return 0 <= i < self._length and bool(self._bits[i >> 3] & (1 << (i & 7)))

    def _grow(self, length: int) -> None:
        needed = (length + 7) // 8
        if needed > len(self._bits):
            self._bits.extend(bytes(needed - len(self._bits)))
        self._length = length

    def _set_bit(self, i: int) -> None:
        if i >= self._length:
            self._grow(i + 1)
        self._bits[i >> 3] |= 1 << (i & 7)

    def _clear_bit(self, i: int) -> None:
        if 0 <= i < self._length:
            self._bits[i >> 3] &= ~(1 << (i & 7)) & 0xFF

    def count(self) -> int:
        """Number of ledgers that are no longer missing."""
        return self._length - int.from_bytes(self._bits, "little").bit_count()

    def taken(self) -> int:
        """Number of ledgers handed out and not yet returned."""
        return len(self._taken)

    def max(self) -> int:
        """Number of ledger slots tracked."""
        return self._length

    def extend(self, index: int) -> None:
        """Grow the set so that ledgers up to ``index - 1`` are tracked as missing."""
        for j in range(index - 1, self._length, -1):
            self._set_bit(j)

    def set(self, index: int) -> timedelta:
        """Mark a ledger as present; return how long it was out, if it was taken."""
        self.extend(index)
        self._clear_bit(index)
        when = self._taken.pop(index, None)
        if when is None:
            return timedelta(0)
        self._returned += 1
        elapsed = self._clock() - when
        self._duration += elapsed
        return timedelta(seconds=elapsed)

    def _take(self, i: int) -> bool:
        if not self._test(i):
            return False
        now = self._clock()
        when = self._taken.get(i)
        if when is None or now - when > _RETAKE_AFTER_SECONDS:
            self._taken[i] = now
            return True
        return False

    def take_middle(self, ledger_range: LedgerRange) -> list[int]:
        """Take missing ledgers from the range, lowest first."""
        ledgers: list[int] = []
        current = max(ledger_range.start, self._start)
        end = min(ledger_range.end, self._length)
        while current <= end and len(ledgers) < ledger_range.max:
            if self._take(current):
                ledgers.append(current)
            current += 1
        return ledgers

    def take_bottom(self, n: int) -> list[int]:
        """Take up to ``n`` of the lowest missing ledgers."""
        return self.take_middle(LedgerRange(self._start, self._length, n))

    def take_top(self, n: int) -> list[int]:
        """Take up to ``n`` of the highest missing ledgers, returned in ascending order."""
        ledgers: list[int] = []
        current = self._length - 1
        while current >= self._start and len(ledgers) < n:
            if self._take(current):
                ledgers.append(current)
            current -= 1
        return sorted(ledgers)

    def __str__(self) -> str:
        rate = self._duration / self._returned if self._returned else 0.0
        return f"Count: {self.count()} Taken: {self.taken()} Avg: {rate:0.04f} secs"