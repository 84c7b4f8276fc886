"""Data types, binary encodings, ledger indexes and ledger times for XRP Ledger data."""

__version__ = "0.1.0"

__all__ = [
    "format",
    "hashes",
    "index",
    "inner",
    "ledger",
    "ledgerset",
    "memo",
    "proposal",
    "reader",
    "result",
    "rippletime",
    "util",
    "value",
    "wire",
]