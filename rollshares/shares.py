"""Shares: fixed-size chunks of block data carrying a namespace.

Every share starts with a universal prefix: a 1-byte namespace version, a
32-byte namespace ID and an info byte holding the share version and a sequence
start flag. The first share of a sequence then holds a 4-byte big endian
sequence length. Compact shares (transactions and PayForBlob transactions)
additionally reserve 4 bytes for the index of the first unit that starts in
the share; each unit is prefixed with a varint length delimiter. Sparse shares
hold blob data directly after the prefix.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rollshares import appconsts
from rollshares.info_byte import InfoByte, parse_info_byte
from rollshares.namespace import NAMESPACE_SIZE, Namespace


class ShareError(ValueError):
    """Raised for a share that is malformed or unsupported."""


@dataclass(frozen=True)
class Share:
    """Raw share data, namespace included."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def validate(self) -> None:
        """Raise ShareError unless the share has exactly the share size."""
        _validate_size(self.data)

    def namespace(self) -> Namespace:
        """Return the namespace at the start of the share."""
        if len(self.data) < NAMESPACE_SIZE:
            raise ShareError(
                f"share {self.data.hex()} is too short to contain a namespace"
            )
        return Namespace.from_bytes(self.data[:NAMESPACE_SIZE])

    def info_byte(self) -> InfoByte:
        """Return the info byte that follows the namespace."""
        if len(self.data) < NAMESPACE_SIZE + appconsts.SHARE_INFO_BYTES:
            raise ShareError(
                f"share {self.data.hex()} is too short to contain an info byte"
            )
        return parse_info_byte(self.data[NAMESPACE_SIZE])

    def version(self) -> int:
        """Return the share version."""
        return self.info_byte().version()

    def does_support_versions(self, supported_share_versions: Iterable[int]) -> None:
        """Raise ShareError if the share version is not among those supported."""
        supported = list(supported_share_versions)
        version = self.version()
        if version not in supported:
            raise ShareError(
                f"unsupported share version {version} is not present in the list "
                f"of supported share versions {supported}"
            )

    def is_sequence_start(self) -> bool:
        """Return whether this is the first share of a sequence."""
        return self.info_byte().is_sequence_start()

    def is_compact_share(self) -> bool:
        """Return whether this share belongs to a compact (transaction) namespace."""
        namespace = self.namespace()
        return namespace.is_tx() or namespace.is_pay_for_blob()

    def sequence_len(self) -> int:
        """Return the sequence length, or 0 for a continuation share."""
        if not self.is_sequence_start():
            return 0
        start = NAMESPACE_SIZE + appconsts.SHARE_INFO_BYTES
        end = start + appconsts.SEQUENCE_LEN_BYTES
        if len(self.data) < end:
            raise ShareError(
                f"share {self.data.hex()} with length {len(self.data)} is too short "
                "to contain a sequence length"
            )
        return int.from_bytes(self.data[start:end], "big")

    def is_padding(self) -> bool:
        """Return whether this share is namespace, tail or reserved padding."""
        is_namespace_padding = self.is_sequence_start() and self.sequence_len() == 0
        namespace = self.namespace()
        return (
            is_namespace_padding
            or namespace.is_tail_padding()
            or namespace.is_reserved_padding()
        )

    def to_bytes(self) -> bytes:
        return self.data

    def __bytes__(self) -> bytes:
        return self.data

    def raw_data(self) -> bytes:
        """Return the data after the namespace, info byte, length and reserved bytes."""
        start = self._raw_data_start_index()
        if len(self.data) < start:
            raise ShareError(f"share {self.data.hex()} is too short to contain raw data")
        return self.data[start:]

    def _raw_data_start_index(self) -> int:
        index = NAMESPACE_SIZE + appconsts.SHARE_INFO_BYTES
        if self.is_sequence_start():
            index += appconsts.SEQUENCE_LEN_BYTES
        if self.is_compact_share():
            index += appconsts.COMPACT_SHARE_RESERVED_BYTES
        return index


def _validate_size(data: bytes) -> None:
    if len(data) != appconsts.SHARE_SIZE:
        raise ShareError(
            f"share data must be {appconsts.SHARE_SIZE} bytes, got {len(data)}"
        )


def new_share(data: bytes) -> Share:
    """Return a share over ``data``, which must be exactly one share in size."""
    _validate_size(data)
    return Share(data)


def shares_to_bytes(shares: Iterable[Share]) -> list[bytes]:
    """Return the raw bytes of each share."""
    return [share.to_bytes() for share in shares]


def shares_from_bytes(raw_shares: Iterable[bytes]) -> list[Share]:
    """Build validated shares from raw share bytes."""
    return [new_share(raw) for raw in raw_shares]