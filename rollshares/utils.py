"""Length delimiters, padding and transaction helpers for share encoding."""

from __future__ import annotations

import hashlib

MAX_VARINT_LEN64 = 10


class VarintError(ValueError):
    """Raised when a length delimiter cannot be decoded."""


def encode_uvarint(value: int) -> bytes:
    """Encode an unsigned integer as a little-endian base-128 varint."""
    if value < 0:
        raise VarintError(f"cannot encode negative value {value}")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def _decode_uvarint(data: bytes) -> int:
    result = 0
    shift = 0
    for position, byte in enumerate(data[:MAX_VARINT_LEN64]):
        if byte < 0x80:
            if position == MAX_VARINT_LEN64 - 1 and byte > 1:
                raise VarintError("varint overflows a 64-bit integer")
            return result | (byte << shift)
        result |= (byte & 0x7F) << shift
        shift += 7
    if len(data) < MAX_VARINT_LEN64:
        raise VarintError("unexpected end of varint")
    raise VarintError("varint overflows a 64-bit integer")


def delim_len(size: int) -> int:
    """Return the number of bytes of the length delimiter for a unit of ``size``."""
    return len(encode_uvarint(size))


def zero_pad_if_necessary(share: bytes, width: int) -> tuple[bytes, int]:
    """Pad ``share`` with trailing zeros up to ``width``.

    Returns the padded bytes and the number of padding bytes added.
    """
    missing = width - len(share)
    if missing <= 0:
        return bytes(share), 0
    return bytes(share) + bytes(missing), missing


def parse_delimiter(data: bytes) -> tuple[bytes, int]:
    """Split a varint length delimiter off the front of ``data``.

    Returns the data after the delimiter and the unit length it encodes.
    """
    if not data:
        return bytes(data), 0
    delimiter, _ = zero_pad_if_necessary(data[:MAX_VARINT_LEN64], MAX_VARINT_LEN64)
    unit_len = _decode_uvarint(delimiter)
    return bytes(data[delim_len(unit_len):]), unit_len


def marshal_delimited_tx(tx: bytes) -> bytes:
    """Prefix a transaction with its length encoded as a varint."""
    return encode_uvarint(len(tx)) + bytes(tx)


def tx_key(tx: bytes) -> bytes:
    """Return the key identifying a transaction: the SHA-256 of its bytes."""
    return hashlib.sha256(tx).digest()