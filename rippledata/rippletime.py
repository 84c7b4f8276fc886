"""Times counted in seconds since the ledger epoch, 2000-01-01 00:00:00 UTC."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

EPOCH_SECONDS = 946684800
_EPOCH = datetime(2000, 1, 1, tzinfo=timezone.utc)
_UINT32_MASK = 0xFFFFFFFF

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_NUMBERS = {name.lower(): number for number, name in enumerate(_MONTHS, start=1)}
_TEXT_PATTERN = re.compile(
    r"(\d{4})-([A-Za-z]{3})-(\d{2}) (\d{2}):(\d{2}):(\d{2})"
)


@dataclass(frozen=True, order=True)
class RippleTime:
    """A moment as an unsigned 32-bit count of seconds since the epoch."""

    seconds: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.seconds <= _UINT32_MASK:
            raise ValueError(f"RippleTime out of range: {self.seconds}")

    @staticmethod
    def now() -> RippleTime:
        """The current time."""
        return RippleTime.from_datetime(datetime.now(timezone.utc))

    @staticmethod
    def from_datetime(moment: datetime) -> RippleTime:
        """Convert a datetime (naive ones are taken as UTC), truncating to whole seconds."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        delta = moment - _EPOCH
        micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
        seconds = abs(micros) // 1_000_000
        if micros < 0:
            seconds = -seconds
        return RippleTime(seconds & _UINT32_MASK)

    @staticmethod
    def parse(text: str) -> RippleTime:
        """Parse a time written as ``2006-Jan-02 15:04:05`` (UTC)."""
        match = _TEXT_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"cannot parse time: {text!r}")
        year, month_name, day, hour, minute, second = match.groups()
        month = _MONTH_NUMBERS.get(month_name.lower())
        if month is None:
            raise ValueError(f"cannot parse time: {text!r}: bad month")
        moment = datetime(
            int(year), month, int(day), int(hour), int(minute), int(second),
            tzinfo=timezone.utc,
        )
        return RippleTime.from_datetime(moment)

    def to_datetime(self) -> datetime:
        """The moment as an aware UTC datetime."""
        return _EPOCH + timedelta(seconds=self.seconds)

    def short(self) -> str:
        """The time of day as ``15:04:05``."""
        return self.to_datetime().strftime("%H:%M:%S")

    def __int__(self) -> int:
        return self.seconds

    def __str__(self) -> str:
        moment = self.to_datetime()
        return (
            f"{moment.year:04d}-{_MONTHS[moment.month - 1]}-{moment.day:02d} "
            f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        )