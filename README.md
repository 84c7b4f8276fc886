# rippledata

Plain Python data types and binary encodings for XRP Ledger data: amounts,
hashes, accounts, transaction results, field encodings, ledger indexes and
ledger times. The package has no third-party runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `rippledata.value` – `Value`, the ledger's numeric type. Native values count
  drops; non-native values are a mantissa and an exponent. Build them with
  `Value.from_native`, `Value.from_non_native` or `Value.parse`; combine them
  with `add`, `subtract`, `multiply`, `divide` and `ratio`; compare with
  `compare` or the usual operators; convert with `to_fraction`, `float()`,
  `str()` and `to_text`. `to_bytes`, `from_bytes`, `read` and `write` handle
  the 8-byte wire form. Out-of-range values raise `ValueError`, division by
  zero raises `ZeroDivisionError`.
- `rippledata.result` – `TransactionResult`, an `IntEnum` of every result code,
  with `parse`, `token`, `human`, `success`, `queued` and `symbol`.
- `rippledata.hashes` – `Hash128`, `Hash160`, `Hash256`, `Vector256`,
  `VariableLength`, `PublicKey`, `Account`, `RegularKey` and `KeyType`.
  Fixed-size types are `bytes` subclasses that check their length and print
  as upper-case hexadecimal.
- `rippledata.format` – `HashPrefix`, `NodeType`, `NodeFormat`,
  `LedgerNamespace`, `SerializedType`, field identifiers (`Encoding`,
  `encoding_for_name`, `read_encoding`, `write_encoding`) and the
  variable-length prefix (`encode_variable_length`, `write_variable_length`,
  `read_variable_length`, `variable_reader`, `read_exact`).
- `rippledata.reader` – `LimitedReader`, which stops reading after a fixed
  number of bytes.
- `rippledata.wire` – `read_*`/`write_*` functions for hashes, `Vector256`,
  variable-length byte strings, accounts, regular keys, public keys and
  transaction results.
- `rippledata.index` – ledger object indexes: `account_root_index`,
  `offer_index`, `ripple_state_index`, `directory_node_index`,
  `owner_directory_index`, `book_index`, `fee_index`, `amendments_index`,
  `ledger_hash_index`, `previous_ledger_hash_index`, plus
  `next_node_index` and `previous_node_index`.
- `rippledata.rippletime` – `RippleTime`, seconds since 2000-01-01 UTC, printed
  as `2000-Jan-01 00:00:00`; `parse`, `now`, `from_datetime`, `to_datetime`,
  `short`.
- `rippledata.ledgerset` – `LedgerSet` and `LedgerRange`: bookkeeping of which
  ledgers are still missing while fetching a history. A ledger that was taken
  and not set is handed out again after 90 seconds.
- `rippledata.inner.InnerNode`, `rippledata.memo.Memo`,
  `rippledata.proposal.Proposal`, `rippledata.ledger.LedgerHeader` and
  `rippledata.ledger.Ledger` – record types for tree nodes, memos, consensus
  proposals and ledger headers.
- `rippledata.util` – `b2h` (upper-case hex) and `sha512_half`.

## Examples

```python
from rippledata.value import Value

price = Value.parse("1.5", False)
qty = Value.parse("4", False)
print(price.multiply(qty))          # 6

drops = Value.parse("1.25", True)   # a decimal point means XRP
print(drops.to_text())              # 1250000
print(Value.from_bytes(drops.to_bytes()).compare(drops))  # 0
```

```python
from rippledata.result import TransactionResult

result = TransactionResult.parse("tecPATH_DRY")
print(result.human(), result.symbol())   # Path could not send partial amount. ½
```

```python
from rippledata.rippletime import RippleTime

t = RippleTime.parse("2014-Jan-01 00:00:00")
print(t.short(), t.to_datetime())
```

```python
import io
from rippledata.hashes import Account
from rippledata.index import account_root_index
from rippledata.wire import read_account, write_account

account = Account(bytes(range(20)))
buffer = io.BytesIO()
write_account(buffer, account)
buffer.seek(0)
assert read_account(buffer) == account
print(account_root_index(account))
```

## What this package does not do

- Accounts, regular keys and seeds are shown and parsed as hexadecimal only;
  there is no base58 address encoding or decoding.
- There is no key derivation, signing or signature checking.
- There are no transaction, ledger entry, metadata, path or amount-with-currency
  objects, and no JSON reading or writing of them.
- There is no network client; nothing here talks to a server.