"""Memos attached to transactions."""

from __future__ import annotations

from dataclasses import dataclass, field

from rippledata.hashes import VariableLength

MEMO_CHARACTERS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~:/?#[]@!$&'()*+,;=%"
)


def _decode(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="surrogateescape")


def _encode(text: str) -> VariableLength:
    return VariableLength(text.encode("utf-8", errors="surrogateescape"))


@dataclass
class Memo:
    """A memo with a type, data and format, each an arbitrary byte string."""

    memo_type: VariableLength = field(default_factory=VariableLength)
    memo_data: VariableLength = field(default_factory=VariableLength)
    memo_format: VariableLength = field(default_factory=VariableLength)

    def __post_init__(self) -> None:
        self.memo_type = VariableLength(self.memo_type)
        self.memo_data = VariableLength(self.memo_data)
        self.memo_format = VariableLength(self.memo_format)

    @classmethod
    def from_text(cls, memo_type: str = "", memo_data: str = "", memo_format: str = "") -> Memo:
        """Build a memo from text fields."""
        return cls(_encode(memo_type), _encode(memo_data), _encode(memo_format))

    @property
    def type_text(self) -> str:
        return _decode(self.memo_type)

    @type_text.setter
    def type_text(self, text: str) -> None:
        self.memo_type = _encode(text)

    @property
    def data_text(self) -> str:
        return _decode(self.memo_data)

    @data_text.setter
    def data_text(self, text: str) -> None:
        self.memo_data = _encode(text)

    @property
    def format_text(self) -> str:
        return _decode(self.memo_format)

    @format_text.setter
    def format_text(self, text: str) -> None:
        self.memo_format = _encode(text)