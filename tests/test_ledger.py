from rippledata.format import HashPrefix, NodeType
from rippledata.hashes import Hash256
from rippledata.ledger import Ledger
from rippledata.rippletime import RippleTime


def test_empty_ledger():
    ledger = Ledger.empty(5)
    assert ledger.ledger_sequence == 5
    assert ledger.ledger == 5
    assert ledger.hash.is_zero()
    assert ledger.closed is False
    assert ledger.accepted is False
    assert ledger.total_xrp == 0


def test_ledger_identity():
    digest = Hash256(bytes(range(32)))
    ledger = Ledger(ledger_sequence=9, hash=digest)
    assert ledger.node_id == digest
    assert ledger.node_type is NodeType.LEDGER
    assert ledger.prefix is HashPrefix.LEDGER_MASTER
    assert ledger.type_name == "LedgerMaster"


def test_ledger_times():
    close = RippleTime.parse("2014-Feb-03 04:05:06")
    ledger = Ledger(close_time=close)
    assert ledger.human_time == "2014-Feb-03 04:05:06"
    assert ledger.time == int(close)


def test_default_close_time_is_epoch():
    assert Ledger.empty(1).human_time == "2000-Jan-01 00:00:00"


def test_separate_ledgers_do_not_share_state():
    first, second = Ledger.empty(1), Ledger.empty(2)
    first.closed = True
    assert second.closed is False
    assert first.ledger != second.ledger