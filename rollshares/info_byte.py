"""The info byte: a 7-bit share version followed by a sequence start flag."""

from __future__ import annotations

from rollshares import appconsts


class InfoByteError(ValueError):
    """Raised for an info byte that cannot be represented or parsed."""


class InfoByte(int):
    """A share info byte.

    The upper seven bits hold the share version in big endian form; the lowest
    bit is 1 for the first share of a sequence and 0 for a continuation share.
    """

    def __new__(cls, value: int) -> InfoByte:
        if not 0 <= value <= 0xFF:
            raise InfoByteError(f"info byte {value} does not fit in one byte")
        return super().__new__(cls, value)

    def version(self) -> int:
        """Return the share version encoded in this info byte."""
        return int(self) >> 1

    def is_sequence_start(self) -> bool:
        """Return whether the share is the first of its sequence."""
        return int(self) % 2 == 1


def new_info_byte(version: int, is_sequence_start: bool) -> InfoByte:
    """Build an info byte from a share version and a sequence start flag."""
    if version > appconsts.MAX_SHARE_VERSION:
        raise InfoByteError(
            f"version {version} must be less than or equal to "
            f"{appconsts.MAX_SHARE_VERSION}"
        )
    if version < 0:
        raise InfoByteError(f"version {version} must not be negative")
    return InfoByte((version << 1) | int(bool(is_sequence_start)))


def parse_info_byte(value: int) -> InfoByte:
    """Parse a raw byte value into an info byte."""
    if not 0 <= value <= 0xFF:
        raise InfoByteError(f"info byte {value} does not fit in one byte")
    return new_info_byte(value >> 1, value % 2 == 1)