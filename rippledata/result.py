"""Transaction result codes with their tokens and human-readable descriptions."""

from __future__ import annotations

from enum import IntEnum

_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1


class TransactionResult(IntEnum):
    """Engine result of applying a transaction."""

    # Success
    tesSUCCESS = 0

    # Claim fee only
    tecCLAIM = 100
    tecPATH_PARTIAL = 101
    tecUNFUNDED_ADD = 102
    tecUNFUNDED_OFFER = 103
    tecUNFUNDED_PAYMENT = 104
    tecFAILED_PROCESSING = 105
    tecDIR_FULL = 121
    tecINSUF_RESERVE_LINE = 122
    tecINSUF_RESERVE_OFFER = 123
    tecNO_DST = 124
    tecNO_DST_INSUF_XRP = 125
    tecNO_LINE_INSUF_RESERVE = 126
    tecNO_LINE_REDUNDANT = 127
    tecPATH_DRY = 128
    tecUNFUNDED = 129
    tecNO_ALTERNATIVE_KEY = 130
    tecNO_REGULAR_KEY = 131
    tecOWNERS = 132
    tecNO_ISSUER = 133
    tecNO_AUTH = 134
    tecNO_LINE = 135
    tecINSUFF_FEE = 136
    tecFROZEN = 137
    tecNO_TARGET = 138
    tecNO_PERMISSION = 139
    tecNO_ENTRY = 140
    tecINSUFFICIENT_RESERVE = 141
    tecNEED_MASTER_KEY = 142
    tecDST_TAG_NEEDED = 143
    tecINTERNAL = 144
    tecOVERSIZE = 145
    tecCRYPTOCONDITION_ERROR = 146
    tecINVARIANT_FAILED = 147

    # Local error
    telLOCAL_ERROR = -399
    telBAD_DOMAIN = -398
    telBAD_PATH_COUNT = -397
    telBAD_PUBLIC_KEY = -396
    telFAILED_PROCESSING = -395
    telINSUF_FEE_P = -394
    telNO_DST_PARTIAL = -393
    telCAN_NOT_QUEUE = -392
    telCAN_NOT_QUEUE_BALANCE = -391
    telCAN_NOT_QUEUE_BLOCKS = -390
    telCAN_NOT_QUEUE_BLOCKED = -389
    telCAN_NOT_QUEUE_FEE = -388
    telCAN_NOT_QUEUE_FULL = -387

    # Malformed
    temMALFORMED = -299
    temBAD_AMOUNT = -298
    temBAD_CURRENCY = -297
    temBAD_EXPIRATION = -296
    temBAD_FEE = -295
    temBAD_ISSUER = -294
    temBAD_LIMIT = -293
    temBAD_OFFER = -292
    temBAD_PATH = -291
    temBAD_PATH_LOOP = -290
    temBAD_SEND_XRP_LIMIT = -289
    temBAD_SEND_XRP_MAX = -288
    temBAD_SEND_XRP_NO_DIRECT = -287
    temBAD_SEND_XRP_PARTIAL = -286
    temBAD_SEND_XRP_PATHS = -285
    temBAD_SEQUENCE = -284
    temBAD_SIGNATURE = -283
    temBAD_SRC_ACCOUNT = -282
    temBAD_TRANSFER_RATE = -281
    temDST_IS_SRC = -280
    temDST_NEEDED = -279
    temINVALID = -278
    temINVALID_FLAG = -277
    temREDUNDANT = -276
    temRIPPLE_EMPTY = -275
    temDISABLED = -274
    temBAD_SIGNER = -273
    temBAD_QUORUM = -272
    temBAD_WEIGHT = -271
    temBAD_TICK_SIZE = -270
    temUNCERTAIN = -269
    temUNKNOWN = -268

    # Failure
    tefFAILURE = -199
    tefALREADY = -198
    tefBAD_ADD_AUTH = -197
    tefBAD_AUTH = -196
    tefBAD_CLAIM_ID = -195
    tefBAD_GEN_AUTH = -194
    tefBAD_LEDGER = -193
    tefCLAIMED = -192
    tefCREATED = -191
    tefDST_TAG_NEEDED = -190
    tefEXCEPTION = -189
    tefGEN_IN_USE = -188
    tefINTERNAL = -187
    tefNO_AUTH_REQUIRED = -186
    tefPAST_SEQ = -185
    tefWRONG_PRIOR = -184
    tefMASTER_DISABLED = -183
    tefMAX_LEDGER = -182
    tefBAD_SIGNATURE = -181
    tefBAD_QUORUM = -180
    tefNOT_MULTI_SIGNING = -179
    tefBAD_AUTH_MASTER = -178
    tefINVARIANT_FAILED = -177

    # Retry
    terRETRY = -99
    terFUNDS_SPENT = -98
    terINSUF_FEE_B = -97
    terNO_ACCOUNT = -96
    terNO_AUTH = -95
    terNO_LINE = -94
    terOWNERS = -93
    terPRE_SEQ = -92
    terLAST = -91
    terNO_RIPPLE = -90
    terQUEUED = -89

    @classmethod
    def _missing_(cls, value: object) -> TransactionResult | None:
        # Codes read off the wire need not be known; keep them as unnamed results.
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not _INT16_MIN <= value <= _INT16_MAX:
            return None
        member = int.__new__(cls, value)
        member._name_ = f"UNKNOWN_{value}"
        member._value_ = value
        return cls._value2member_map_.setdefault(value, member)

    @classmethod
    def parse(cls, token: str) -> TransactionResult:
        """Look up a result by its token, e.g. ``"tesSUCCESS"``."""
        if token in _HUMAN:
            return cls[token]
        raise ValueError(f"Unknown TransactionResult: {token}")

    def token(self) -> str:
        """The token of the result, or an empty string if it has none."""
        return self._name_ if self._name_ in _HUMAN else ""

    def human(self) -> str:
        """A human-readable description, or an empty string if there is none."""
        return _HUMAN.get(self._name_, "")

    def success(self) -> bool:
        """Whether the transaction was applied successfully."""
        return self is TransactionResult.tesSUCCESS

    def queued(self) -> bool:
        """Whether the transaction is held in the queue."""
        return self is TransactionResult.terQUEUED

    def symbol(self) -> str:
        """A one-character summary of the outcome."""
        return _SYMBOLS.get(self._name_, "✗")

    def __str__(self) -> str:
        return self.token()


_SYMBOLS = {
    "tesSUCCESS": "✓",
    "tecCLAIM": "✓",
    "tecPATH_PARTIAL": "½",
    "tecPATH_DRY": "½",
    "tecUNFUNDED": "$",
    "tecUNFUNDED_ADD": "$",
    "tecUNFUNDED_OFFER": "$",
    "tecUNFUNDED_PAYMENT": "$",
}

_HUMAN = {
    "tesSUCCESS": "The transaction was applied.",
    "tecCLAIM": "Fee claimed. Sequence used. No action.",
    "tecDIR_FULL": "Can not add entry to full directory.",
    "tecFAILED_PROCESSING": "Failed to correctly process transaction.",
    "tecINSUF_RESERVE_LINE": "Insufficient reserve to add trust line.",
    "tecINSUF_RESERVE_OFFER": "Insufficient reserve to create offer.",
    "tecNO_DST": "Destination does not exist. Send XRP to create it.",
    "tecNO_DST_INSUF_XRP": "Destination does not exist. Too little XRP sent to create it.",
    "tecNO_LINE_INSUF_RESERVE": "No such line. Too little reserve to create it.",
    "tecNO_LINE_REDUNDANT": "Can't set non-existant line to default.",
    "tecPATH_DRY": "Path could not send partial amount.",
    "tecPATH_PARTIAL": "Path could not send full amount.",
    "tecNO_ALTERNATIVE_KEY": "The operation would remove the ability to sign transactions with the account.",
    "tecNO_REGULAR_KEY": "Regular key is not set.",
    "tecUNFUNDED": "One of _ADD, _OFFER, or _SEND. Deprecated.",
    "tecUNFUNDED_ADD": "Insufficient XRP balance for WalletAdd.",
    "tecUNFUNDED_OFFER": "Insufficient balance to fund created offer.",
    "tecUNFUNDED_PAYMENT": "Insufficient XRP balance to send.",
    "tecOWNERS": "Non-zero owner count.",
    "tecNO_ISSUER": "Issuer account does not exist.",
    "tecNO_AUTH": "Not authorized to hold asset.",
    "tecNO_LINE": "No such line.",
    "tecINSUFF_FEE": "Insufficient balance to pay fee.",
    "tecFROZEN": "Asset is frozen.",
    "tecNO_TARGET": "Target account does not exist.",
    "tecNO_PERMISSION": "No permission to perform requested operation.",
    "tecNO_ENTRY": "No matching entry found.",
    "tecINSUFFICIENT_RESERVE": "Insufficient reserve to complete requested operation.",
    "tecNEED_MASTER_KEY": "The operation requires the use of the Master Key.",
    "tecDST_TAG_NEEDED": "A destination tag is required.",
    "tecINTERNAL": "An internal error has occurred during processing.",
    "tecCRYPTOCONDITION_ERROR": "Malformed, invalid, or mismatched conditional or fulfillment.",
    "tecINVARIANT_FAILED": "One or more invariants for the transaction were not satisfied.",
    "tecOVERSIZE": "Object exceeded serialization limits",
    "tefFAILURE": "Failed to apply.",
    "tefALREADY": "The exact transaction was already in this ledger.",
    "tefBAD_ADD_AUTH": "Not authorized to add account.",
    "tefBAD_AUTH": "Transaction's public key is not authorized.",
    "tefBAD_CLAIM_ID": "Malformed: Bad claim id.",
    "tefBAD_GEN_AUTH": "Not authorized to claim generator.",
    "tefBAD_LEDGER": "Ledger in unexpected state.",
    "tefCLAIMED": "Can not claim a previously claimed account.",
    "tefCREATED": "Can't add an already created account.",
    "tefDST_TAG_NEEDED": "Destination tag required.",
    "tefEXCEPTION": "Unexpected program state.",
    "tefGEN_IN_USE": "Generator already in use.",
    "tefINTERNAL": "Internal error.",
    "tefNO_AUTH_REQUIRED": "Auth is not required.",
    "tefPAST_SEQ": "This sequence number has already past.",
    "tefWRONG_PRIOR": "This previous transaction does not match.",
    "tefMASTER_DISABLED": "Master key is disabled.",
    "tefMAX_LEDGER": "Ledger sequence too high.",
    "tefBAD_AUTH_MASTER": "Auth for unclaimed account needs correct master key.",
    "tefINVARIANT_FAILED": "Fee claim violated invariants for the transaction.",
    "telLOCAL_ERROR": "Local failure.",
    "telBAD_DOMAIN": "Domain too long.",
    "telBAD_PATH_COUNT": "Malformed: Too many paths.",
    "telBAD_PUBLIC_KEY": "Public key too long.",
    "telFAILED_PROCESSING": "Failed to correctly process transaction.",
    "telINSUF_FEE_P": "Fee insufficient.",
    "telNO_DST_PARTIAL": "Partial payment to create account not allowed.",
    "telCAN_NOT_QUEUE": "Can not queue at this time.",
    "telCAN_NOT_QUEUE_BALANCE": "Can not queue at this time: insufficient balance to pay all queued fees.",
    "telCAN_NOT_QUEUE_BLOCKS": "Can not queue at this time: would block later queued transaction(s).",
    "telCAN_NOT_QUEUE_BLOCKED": "Can not queue at this time: blocking transaction in queue.",
    "telCAN_NOT_QUEUE_FEE": "Can not queue at this time: fee insufficient to replace queued transaction.",
    "telCAN_NOT_QUEUE_FULL": "Can not queue at this time: queue is full.",
    "temMALFORMED": "Malformed transaction.",
    "temBAD_AMOUNT": "Can only send positive amounts.",
    "temBAD_CURRENCY": "Malformed: Bad currency.",
    "temBAD_FEE": "Invalid fee, negative or not XRP.",
    "temBAD_EXPIRATION": "Malformed: Bad expiration.",
    "temBAD_ISSUER": "Malformed: Bad issuer.",
    "temBAD_LIMIT": "Limits must be non-negative.",
    "temBAD_OFFER": "Malformed: Bad offer.",
    "temBAD_PATH": "Malformed: Bad path.",
    "temBAD_PATH_LOOP": "Malformed: Loop in path.",
    "temBAD_SIGNATURE": "Malformed: Bad signature.",
    "temBAD_SRC_ACCOUNT": "Malformed: Bad source account.",
    "temBAD_TRANSFER_RATE": "Malformed: Transfer rate must be >= 1.0",
    "temBAD_SEQUENCE": "Malformed: Sequence is not in the past.",
    "temBAD_SEND_XRP_LIMIT": "Malformed: Limit quality is not allowed for XRP to XRP.",
    "temBAD_SEND_XRP_MAX": "Malformed: Send max is not allowed for XRP to XRP.",
    "temBAD_SEND_XRP_NO_DIRECT": "Malformed: No Ripple direct is not allowed for XRP to XRP.",
    "temBAD_SEND_XRP_PARTIAL": "Malformed: Partial payment is not allowed for XRP to XRP.",
    "temBAD_SEND_XRP_PATHS": "Malformed: Paths are not allowed for XRP to XRP.",
    "temDST_IS_SRC": "Destination may not be source.",
    "temDST_NEEDED": "Destination not specified.",
    "temINVALID": "The transaction is ill-formed.",
    "temINVALID_FLAG": "The transaction has an invalid flag.",
    "temREDUNDANT": "Sends same currency to self.",
    "temRIPPLE_EMPTY": "PathSet with no paths.",
    "temUNCERTAIN": "In process of determining result. Never returned.",
    "temUNKNOWN": "The transactions requires logic not implemented yet.",
    "temDISABLED": "The transaction requires logic that is currently disabled.",
    "temBAD_TICK_SIZE": "Malformed: Tick size out of range.",
    "terRETRY": "Retry transaction.",
    "terFUNDS_SPENT": "Can't set password, password set funds already spent.",
    "terINSUF_FEE_B": "Account balance can't pay fee.",
    "terLAST": "Process last.",
    "terNO_RIPPLE": "Path does not permit rippling.",
    "terNO_ACCOUNT": "The source account does not exist.",
    "terNO_AUTH": "Not authorized to hold IOUs.",
    "terNO_LINE": "No such line.",
    "terPRE_SEQ": "Missing/inapplicable prior transaction.",
    "terOWNERS": "Non-zero owner count.",
    "terQUEUED": "Held until escalated fee drops.",
}