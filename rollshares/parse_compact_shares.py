"""Parsing compact shares back into the units they hold."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rollshares.shares import Share
from rollshares.utils import parse_delimiter


class CompactShareParseError(ValueError):
    """Raised when compact shares cannot be parsed into units."""


def parse_compact_shares(
    shares: Sequence[Share], supported_share_versions: Iterable[int]
) -> list[bytes]:
    """Return the units held by a sequence of compact shares.

    The units have no namespace, info byte, length or delimiter left on them.
    """
    if not shares:
        return []
    if not shares[0].is_sequence_start():
        raise CompactShareParseError("first share is not the start of a sequence")
    validate_share_versions(shares, supported_share_versions)
    return parse_raw_data(extract_raw_data(shares))


def validate_share_versions(
    shares: Iterable[Share], supported_share_versions: Iterable[int]
) -> None:
    """Raise if any share carries a version that is not supported."""
    supported = list(supported_share_versions)
    for share in shares:
        share.does_support_versions(supported)


def parse_raw_data(raw_data: bytes) -> list[bytes]:
    """Split raw data into units using the length delimiter before each."""
    units: list[bytes] = []
    rest = bytes(raw_data)
    while True:
        data, unit_len = parse_delimiter(rest)
        if unit_len == 0:
            return units
        if unit_len > len(data):
            raise CompactShareParseError(
                f"unit length {unit_len} exceeds the {len(data)} bytes remaining"
            )
        units.append(data[:unit_len])
        rest = data[unit_len:]


def extract_raw_data(shares: Iterable[Share]) -> bytes:
    """Concatenate the raw data of each share."""
    return b"".join(share.raw_data() for share in shares)