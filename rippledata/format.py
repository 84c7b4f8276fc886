"""Field encodings, hash prefixes and variable-length framing of the binary format."""

from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

from rippledata.reader import LimitedReader

_MAX_VARIABLE_LENGTH = 918744


class HashPrefix(IntEnum):
    """Four-byte prefixes that are hashed in front of serialized objects."""

    TRANSACTION_ID = 0x54584E00
    TRANSACTION_NODE = 0x534E4400
    LEAF_NODE = 0x4D4C4E00
    INNER_NODE = 0x4D494E00
    LEDGER_MASTER = 0x4C575200
    TRANSACTION_SIGN = 0x53545800
    VALIDATION = 0x56414C00
    PROPOSAL = 0x50525000
    TRANSACTION_MULTISIGN = 0x534D5400
    PAYMENT_CHANNEL_CLAIM = 0x434C4D00

    def __bytes__(self) -> bytes:
        return int(self).to_bytes(4, "big")

    def __str__(self) -> str:
        return bytes(self).decode("latin-1")


class NodeType(IntEnum):
    """Kinds of stored nodes."""

    UNKNOWN = 0
    LEDGER = 1
    TRANSACTION = 2
    ACCOUNT_NODE = 3
    TRANSACTION_NODE = 4

    def __str__(self) -> str:
        return _NODE_TYPE_NAMES[self]


_NODE_TYPE_NAMES = {
    NodeType.UNKNOWN: "Unknown",
    NodeType.LEDGER: "Ledger",
    NodeType.TRANSACTION: "Transaction",
    NodeType.ACCOUNT_NODE: "Account Node",
    NodeType.TRANSACTION_NODE: "Transaction Node",
}


class NodeFormat(IntEnum):
    """Ways a node can be serialized."""

    PREFIX = 1
    HASH = 2
    WIRE = 3


class LedgerNamespace(IntEnum):
    """Two-byte namespaces used when computing ledger indexes."""

    ACCOUNT = ord("a")
    DIRECTORY_NODE = ord("d")
    RIPPLE_STATE = ord("r")
    OFFER = ord("o")
    OWNER_DIRECTORY = ord("O")
    BOOK_DIRECTORY = ord("B")
    SKIP_LIST = ord("s")
    AMENDMENT = ord("f")
    FEE = ord("e")
    SUSPAY = ord("u")
    TICKET = ord("T")
    SIGNER_LIST = ord("S")
    XRPU_CHANNEL = ord("x")

    def __bytes__(self) -> bytes:
        return int(self).to_bytes(2, "big")


class SerializedType(IntEnum):
    """Type codes of serialized fields."""

    UINT16 = 1
    UINT32 = 2
    UINT64 = 3
    HASH128 = 4
    HASH256 = 5
    AMOUNT = 6
    VL = 7
    ACCOUNT = 8
    OBJECT = 14
    ARRAY = 15
    UINT8 = 16
    HASH160 = 17
    PATHSET = 18
    VECTOR256 = 19


_FIELD_TABLE = {
    SerializedType.UINT16: {1: "LedgerEntryType", 2: "TransactionType", 3: "SignerWeight"},
    SerializedType.UINT32: {
        2: "Flags", 3: "SourceTag", 4: "Sequence", 5: "PreviousTxnLgrSeq",
        6: "LedgerSequence", 7: "CloseTime", 8: "ParentCloseTime", 9: "SigningTime",
        10: "Expiration", 11: "TransferRate", 12: "WalletSize", 13: "OwnerCount",
        14: "DestinationTag", 16: "HighQualityIn", 17: "HighQualityOut",
        18: "LowQualityIn", 19: "LowQualityOut", 20: "QualityIn", 21: "QualityOut",
        22: "StampEscrow", 23: "BondAmount", 24: "LoadFee", 25: "OfferSequence",
        26: "FirstLedgerSequence", 27: "LastLedgerSequence", 28: "TransactionIndex",
        29: "OperationLimit", 30: "ReferenceFeeUnits", 31: "ReserveBase",
        32: "ReserveIncrement", 33: "SetFlag", 34: "ClearFlag", 35: "SignerQuorum",
        36: "CancelAfter", 37: "FinishAfter", 38: "SignerListID", 39: "SettleDelay",
    },
    SerializedType.UINT64: {
        1: "IndexNext", 2: "IndexPrevious", 3: "BookNode", 4: "OwnerNode",
        5: "BaseFee", 6: "ExchangeRate", 7: "LowNode", 8: "HighNode",
    },
    SerializedType.HASH128: {1: "EmailHash"},
    SerializedType.HASH256: {
        1: "LedgerHash", 2: "ParentHash", 3: "TransactionHash", 4: "AccountHash",
        5: "PreviousTxnID", 6: "LedgerIndex", 7: "WalletLocator", 8: "RootIndex",
        9: "AccountTxnID", 16: "BookDirectory", 17: "InvoiceID", 18: "Nickname",
        19: "Amendment", 20: "TicketID", 21: "Digest", 22: "Channel", 24: "CheckID",
    },
    SerializedType.AMOUNT: {
        1: "Amount", 2: "Balance", 3: "LimitAmount", 4: "TakerPays", 5: "TakerGets",
        6: "LowLimit", 7: "HighLimit", 8: "Fee", 9: "SendMax", 10: "DeliverMin",
        16: "MinimumOffer", 17: "RippleEscrow", 18: "DeliveredAmount",
    },
    SerializedType.VL: {
        1: "PublicKey", 2: "MessageKey", 3: "SigningPubKey", 4: "TxnSignature",
        5: "Generator", 6: "Signature", 7: "Domain", 8: "FundCode", 9: "RemoveCode",
        10: "ExpireCode", 11: "CreateCode", 12: "MemoType", 13: "MemoData",
        14: "MemoFormat", 16: "Fulfillment", 17: "Condition", 18: "MasterSignature",
    },
    SerializedType.ACCOUNT: {
        1: "Account", 2: "Owner", 3: "Destination", 4: "Issuer", 7: "Target",
        8: "RegularKey",
    },
    SerializedType.OBJECT: {
        1: "EndOfObject", 2: "TransactionMetaData", 3: "CreatedNode", 4: "DeletedNode",
        5: "ModifiedNode", 6: "PreviousFields", 7: "FinalFields", 8: "NewFields",
        9: "TemplateEntry", 10: "Memo", 11: "SignerEntry", 16: "Signer", 18: "Majority",
    },
    SerializedType.ARRAY: {
        1: "EndOfArray", 2: "SigningAccounts", 3: "Signers", 4: "SignerEntries",
        5: "Template", 6: "Necessary", 7: "Sufficient", 8: "AffectedNodes", 9: "Memos",
        16: "Majorities",
    },
    SerializedType.UINT8: {
        1: "CloseResolution", 2: "Method", 3: "TransactionResult", 16: "TickSize",
    },
    SerializedType.HASH160: {
        1: "TakerPaysCurrency", 2: "TakerPaysIssuer", 3: "TakerGetsCurrency",
        4: "TakerGetsIssuer",
    },
    SerializedType.PATHSET: {1: "Paths"},
    SerializedType.VECTOR256: {1: "Indexes", 2: "Hashes", 3: "Amendments"},
}

_NAMES = {
    (int(type_code), field): name
    for type_code, fields in _FIELD_TABLE.items()
    for field, name in fields.items()
}
_BY_NAME = {name: key for key, name in _NAMES.items()}


@dataclass(frozen=True)
class Encoding:
    """A serialized field identifier: a type code and a field code."""

    type_code: int
    field: int

    def priority(self) -> int:
        """Sort key giving canonical field order."""
        return (int(self.type_code) << 16) | int(self.field)

    def is_signing_field(self) -> bool:
        """Whether the field holds a signature and is left out when signing."""
        name = _NAMES.get((int(self.type_code), int(self.field)))
        return name is not None and "Signature" in name

    def name(self) -> str:
        """Name of the field; KeyError if the encoding is not known."""
        try:
            return _NAMES[(int(self.type_code), int(self.field))]
        except KeyError:
            raise KeyError(f"unknown encoding: {self.type_code}/{self.field}") from None


def encoding_for_name(name: str) -> Encoding:
    """Look up the encoding of a field by its name."""
    try:
        type_code, field = _BY_NAME[name]
    except KeyError:
        raise KeyError(f"unknown field: {name}") from None
    return Encoding(type_code, field)


def _read_byte(reader: BinaryIO) -> int:
    data = reader.read(1)
    if not data:
        raise EOFError("unexpected end of data")
    return data[0]


def read_encoding(reader: BinaryIO) -> Encoding:
    """Read a field identifier from ``reader``."""
    first = _read_byte(reader)
    type_code, field = first >> 4, first & 0x0F
    if type_code == 0:
        type_code = _read_byte(reader)
    if field == 0:
        field = _read_byte(reader)
    return Encoding(type_code, field)


def write_encoding(writer: BinaryIO, encoding: Encoding) -> None:
    """Write a field identifier to ``writer``."""
    type_code, field = int(encoding.type_code), int(encoding.field)
    if not (0 <= type_code <= 0xFF and 0 <= field <= 0xFF):
        raise ValueError(f"encoding out of range: {type_code}/{field}")
    if type_code < 16 and field < 16:
        data = bytes([type_code << 4 | field])
    elif type_code < 16:
        data = bytes([type_code << 4, field])
    elif field < 16:
        data = bytes([field, type_code])
    else:
        data = bytes([0, type_code, field])
    writer.write(data)


def encode_variable_length(data: bytes) -> bytes:
    """Return ``data`` preceded by its variable-length prefix."""
    n = len(data)
    if n > _MAX_VARIABLE_LENGTH:
        raise ValueError(f"Unsupported Variable Length encoding: {n}")
    if n <= 192:
        prefix = bytes([n])
    elif n <= 12480:
        n -= 193
        prefix = bytes([193 + (n >> 8), n & 0xFF])
    else:
        n -= 12481
        prefix = bytes([241 + (n >> 16), (n >> 8) & 0xFF, n & 0xFF])
    return prefix + bytes(data)


def write_variable_length(writer: BinaryIO, data: bytes) -> None:
    """Write ``data`` with its variable-length prefix."""
    writer.write(encode_variable_length(data))


def read_variable_length(reader: BinaryIO) -> int:
    """Read a variable-length prefix and return the length it encodes."""
    first = _read_byte(reader)
    if first <= 192:
        return first
    if first <= 240:
        second = _read_byte(reader)
        return 193 + (first - 193) * 256 + second
    if first <= 254:
        second = _read_byte(reader)
        third = _read_byte(reader)
        return 12481 + (first - 241) * 65536 + second * 256 + third
    raise ValueError("Unsupported Variable Length encoding")


def read_exact(reader: BinaryIO, size: int, prefix: str) -> bytes:
    """Read exactly ``size`` bytes, raising ValueError on a short read."""
    data = reader.read(size)
    if len(data) != size:
        raise ValueError(f"{prefix}: short read: {len(data)} expected: {size}")
    return data


def variable_reader(reader: BinaryIO) -> LimitedReader:
    """Read a length prefix and return a reader limited to that many bytes."""
    return LimitedReader(reader, read_variable_length(reader))