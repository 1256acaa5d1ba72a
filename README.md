# rollshares

Split block data into fixed-size, namespaced shares and parse it back.

Every share is 512 bytes long and begins with a universal prefix:

| namespace version | namespace id | info byte | sequence length (first share only) |
|-------------------|--------------|-----------|------------------------------------|
| 1 byte            | 32 bytes     | 1 byte    | 4 bytes, big endian                |

The info byte packs a 7-bit share version with a one-bit "sequence start" flag
(`rollshares.info_byte`).

There are two kinds of share:

- **Compact shares** hold transactions in the transaction and PayForBlob
  namespaces. Each transaction is prefixed with its length as a varint, and each
  compact share has four reserved bytes giving the index of the first unit that
  starts in it (`rollshares.reserved_bytes`).
- **Sparse shares** hold blob data for a single namespace directly after the
  prefix.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Namespaces

```python
from rollshares.namespace import Namespace, TX_NAMESPACE, random_blob_namespace

ns = Namespace.v0(bytes(range(1, 11)))         # 10-byte user id, zero-prefixed
assert Namespace.from_bytes(ns.to_bytes()) == ns
assert TX_NAMESPACE.is_tx()

blob_ns = random_blob_namespace()
blob_ns.validate_blob_namespace()               # raises NamespaceError for reserved ids
```

A `Namespace` validates itself on construction: only versions 0 and 255 are
accepted, the ID must be 32 bytes, and version-0 IDs must start with 22 zero
bytes. The reserved namespaces (`TX_NAMESPACE`, `PAY_FOR_BLOB_NAMESPACE`,
`TAIL_PADDING_NAMESPACE`, `PARITY_SHARES_NAMESPACE` and others) are module
constants.

## Splitting and parsing transactions

```python
from rollshares.appconsts import SHARE_VERSION_ZERO, SUPPORTED_SHARE_VERSIONS
from rollshares.namespace import TX_NAMESPACE
from rollshares.split_compact_shares import CompactShareSplitter
from rollshares.parse_compact_shares import parse_compact_shares

splitter = CompactShareSplitter(TX_NAMESPACE, SHARE_VERSION_ZERO)
for tx in (b"first", b"second" * 200):
    splitter.write_tx(tx)

shares, ranges = splitter.export(0)
assert parse_compact_shares(shares, SUPPORTED_SHARE_VERSIONS) == [b"first", b"second" * 200]
```

`export(offset)` returns the shares together with a mapping from each
transaction's key (`rollshares.utils.tx_key`, the SHA-256 of its bytes) to the
`ShareRange` of shares it occupies, shifted by `offset`. Exporting twice gives
the same shares, and writing after an export continues the same sequence.
`count()` tells you how many shares an export would produce now.

## Working with single shares

```python
from rollshares.shares import new_share

share = new_share(shares[0].to_bytes())
share.is_sequence_start()   # True for the first share of a sequence
share.sequence_len()        # total bytes in the sequence
share.raw_data()            # payload without prefix or reserved bytes
```

`Builder` in `rollshares.share_builder` assembles one share at a time.
`ShareSequence`, `compact_shares_needed` and `sparse_shares_needed` in
`rollshares.share_sequence` read sequences back and work out how many shares
data takes. `rollshares.utils` holds the varint delimiter helpers
(`encode_uvarint`, `parse_delimiter`, `marshal_delimited_tx`, `delim_len`) and
`zero_pad_if_necessary`.

## Other helpers

- `rollshares.appconsts` — share sizes, content sizes per share kind, square
  limits and supported share versions.
- `rollshares.logger.Logger` — logs a message with trailing key/value pairs
  through the standard `logging` module.
- `rollshares.testfactory` — `generate_random_txs` and
  `generate_randomly_sized_txs` for producing random transactions.

Invalid input raises a subclass of `ValueError` (`NamespaceError`,
`ShareError`, `InfoByteError`, `ReservedBytesError`, `BuilderError`,
`CompactShareParseError` and so on).

## What it does not do

There is no splitter that lays blobs out across sparse shares, no padding-share
generation and no assembly of a full data square; sparse shares can only be
built one at a time with `Builder`. The package has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```