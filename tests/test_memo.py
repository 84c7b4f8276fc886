from rippledata.hashes import VariableLength
from rippledata.memo import Memo


def test_default_memo_is_empty():
    memo = Memo()
    assert memo.memo_type == b""
    assert memo.type_text == ""


def test_setting_text_stores_bytes():
    memo = Memo()
    memo.type_text = "text/plain"
    memo.data_text = "hello"
    memo.format_text = "utf8"
    assert memo.memo_type == b"text/plain"
    assert memo.memo_data == b"hello"
    assert memo.memo_format == b"utf8"
    assert isinstance(memo.memo_data, VariableLength)


def test_from_text_round_trip():
    memo = Memo.from_text("kind", "café", "fmt")
    assert (memo.type_text, memo.data_text, memo.format_text) == ("kind", "café", "fmt")


def test_raw_bytes_survive_text_round_trip():
    memo = Memo(memo_data=b"\xff\x00\x80")
    memo.data_text = memo.data_text
    assert memo.memo_data == b"\xff\x00\x80"


def test_bytes_are_shown_as_hex():
    memo = Memo(memo_type=b"AB")
    assert str(memo.memo_type) == "4142"