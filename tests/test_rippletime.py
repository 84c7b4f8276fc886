from datetime import datetime, timedelta, timezone

import pytest

from rippledata.rippletime import EPOCH_SECONDS, RippleTime


def test_epoch_string():
    assert str(RippleTime(0)) == "2000-Jan-01 00:00:00"


def test_epoch_datetime_matches_unix_offset():
    moment = RippleTime(0).to_datetime()
    assert moment.timestamp() == EPOCH_SECONDS
    assert moment.tzinfo is not None


def test_parse_round_trip():
    text = "2013-Jan-01 03:21:10"
    parsed = RippleTime.parse(text)
    assert str(parsed) == text
    assert parsed.short() == "03:21:10"


def test_parse_month_case_insensitive():
    assert RippleTime.parse("2015-mar-04 10:00:00") == RippleTime.parse("2015-Mar-04 10:00:00")


def test_datetime_round_trip():
    original = RippleTime(123456789)
    assert RippleTime.from_datetime(original.to_datetime()) == original


def test_from_naive_datetime_is_utc():
    aware = datetime(2020, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    naive = datetime(2020, 5, 6, 7, 8, 9)
    assert RippleTime.from_datetime(naive) == RippleTime.from_datetime(aware)


def test_from_datetime_truncates_fraction():
    base = RippleTime(1000).to_datetime()
    assert RippleTime.from_datetime(base + timedelta(milliseconds=999)) == RippleTime(1000)


def test_int_and_ordering():
    assert int(RippleTime(42)) == 42
    assert RippleTime(1) < RippleTime(2)


def test_now_is_current():
    before = RippleTime.from_datetime(datetime.now(timezone.utc))
    current = RippleTime.now()
    after = RippleTime.from_datetime(datetime.now(timezone.utc))
    assert before <= current <= after


@pytest.mark.parametrize("text", ["2013-01-01 03:21:10", "2013-Foo-01 03:21:10", "garbage"])
def test_parse_rejects_bad_text(text):
    with pytest.raises(ValueError):
        RippleTime.parse(text)


def test_out_of_range_rejected():
    with pytest.raises(ValueError):
        RippleTime(-1)
    with pytest.raises(ValueError):
        RippleTime(1 << 32)