"""Reserved bytes of a compact share: the index of the first unit it starts."""

from __future__ import annotations

from rollshares import appconsts


class ReservedBytesError(ValueError):
    """Raised for reserved bytes that are malformed or out of range."""


def new_reserved_bytes(byte_index: int) -> bytes:
    """Encode the byte index of the first unit starting in a compact share."""
    if byte_index >= appconsts.SHARE_SIZE:
        raise ReservedBytesError(
            f"byte index {byte_index} must be less than share size "
            f"{appconsts.SHARE_SIZE}"
        )
    if byte_index < 0:
        raise ReservedBytesError(f"byte index {byte_index} must not be negative")
    return byte_index.to_bytes(appconsts.COMPACT_SHARE_RESERVED_BYTES, "big")


def parse_reserved_bytes(reserved_bytes: bytes) -> int:
    """Decode reserved bytes into a byte index."""
    if len(reserved_bytes) != appconsts.COMPACT_SHARE_RESERVED_BYTES:
        raise ReservedBytesError(
            f"reserved bytes must be of length {appconsts.COMPACT_SHARE_RESERVED_BYTES}"
        )
    byte_index = int.from_bytes(reserved_bytes, "big")
    if byte_index >= appconsts.SHARE_SIZE:
        raise ReservedBytesError(
            f"byteIndex must be less than share size {appconsts.SHARE_SIZE}"
        )
    return byte_index