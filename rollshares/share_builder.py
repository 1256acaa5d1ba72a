"""Incremental construction of a single share."""

from __future__ import annotations

from rollshares import appconsts
from rollshares.info_byte import new_info_byte
from rollshares.namespace import Namespace
from rollshares.reserved_bytes import new_reserved_bytes, parse_reserved_bytes
from rollshares.shares import Share, new_share
from rollshares.utils import zero_pad_if_necessary

_INFO_BYTE_INDEX = appconsts.NAMESPACE_SIZE
_SEQUENCE_LEN_INDEX = appconsts.NAMESPACE_SIZE + appconsts.SHARE_INFO_BYTES


class BuilderError(ValueError):
    """Raised when a share builder is used in a way its share does not allow."""


def is_compact_namespace(namespace: Namespace | None) -> bool:
    """Return whether shares in ``namespace`` use the compact layout."""
    return namespace is not None and (namespace.is_tx() or namespace.is_pay_for_blob())


class Builder:
    """Builds one share: writes its prefix, then accepts data until it is full."""

    def __init__(
        self,
        namespace: Namespace | None,
        share_version: int = appconsts.SHARE_VERSION_ZERO,
        is_first_share: bool = False,
    ) -> None:
        self.namespace = namespace
        self.share_version = share_version
        self.is_first_share = is_first_share
        self.is_compact_share = is_compact_namespace(namespace)
        self._raw = bytearray()

    @classmethod
    def empty(cls) -> Builder:
        """Return a builder with no namespace, meant for importing a raw share."""
        return cls(None)

    def init(self) -> Builder:
        """Write the share prefix; call this right after construction."""
        if self.namespace is None:
            raise BuilderError("cannot initialise a builder without a namespace")
        info_byte = new_info_byte(self.share_version, self.is_first_share)
        raw = bytearray(self.namespace.to_bytes())
        raw.append(info_byte)
        if self.is_first_share:
            raw.extend(bytes(appconsts.SEQUENCE_LEN_BYTES))
        if self.is_compact_share:
            raw.extend(bytes(appconsts.COMPACT_SHARE_RESERVED_BYTES))
        self._raw = raw
        return self

    @property
    def raw_share_data(self) -> bytes:
        """The bytes written to the share so far."""
        return bytes(self._raw)

    def available_bytes(self) -> int:
        """Return how many more bytes fit into the share."""
        return appconsts.SHARE_SIZE - len(self._raw)

    def import_raw_share(self, raw_bytes: bytes) -> Builder:
        """Replace the share contents with ``raw_bytes``."""
        self._raw = bytearray(raw_bytes)
        return self

    def add_data(self, raw_data: bytes) -> bytes | None:
        """Append as much of ``raw_data`` as fits.

        Returns the bytes that did not fit, or None if everything was written.
        """
        pending_left = self.available_bytes()
        if len(raw_data) <= pending_left:
            self._raw.extend(raw_data)
            return None
        self._raw.extend(raw_data[:pending_left])
        return bytes(raw_data[pending_left:])

    def build(self) -> Share:
        """Return the finished share; it must be exactly one share in size."""
        return new_share(bytes(self._raw))

    def is_empty_share(self) -> bool:
        """Return whether no data has been written after the prefix."""
        expected = appconsts.NAMESPACE_SIZE + appconsts.SHARE_INFO_BYTES
        if self.is_compact_share:
            expected += appconsts.COMPACT_SHARE_RESERVED_BYTES
        if self.is_first_share:
            expected += appconsts.SEQUENCE_LEN_BYTES
        return len(self._raw) == expected

    def zero_pad_if_necessary(self) -> int:
        """Pad the share with zeros to full size; return the padding added."""
        padded, padding = zero_pad_if_necessary(bytes(self._raw), appconsts.SHARE_SIZE)
        self._raw = bytearray(padded)
        return padding

    def _index_of_reserved_bytes(self) -> int:
        index = appconsts.NAMESPACE_SIZE + appconsts.SHARE_INFO_BYTES
        if self.is_first_share:
            index += appconsts.SEQUENCE_LEN_BYTES
        return index

    def _reserved_bytes_are_empty(self) -> bool:
        start = self._index_of_reserved_bytes()
        end = start + appconsts.COMPACT_SHARE_RESERVED_BYTES
        return parse_reserved_bytes(bytes(self._raw[start:end])) == 0

    def maybe_write_reserved_bytes(self) -> None:
        """Record where the next unit starts, unless already recorded."""
        if not self.is_compact_share:
            raise BuilderError("this is not a compact share")
        if not self._reserved_bytes_are_empty():
            return
        reserved = new_reserved_bytes(len(self._raw))
        start = self._index_of_reserved_bytes()
        self._raw[start : start + appconsts.COMPACT_SHARE_RESERVED_BYTES] = reserved

    def write_sequence_len(self, sequence_len: int) -> None:
        """Write the sequence length into the first share of a sequence."""
        if not self.is_first_share:
            raise BuilderError("not the first share")
        try:
            encoded = sequence_len.to_bytes(appconsts.SEQUENCE_LEN_BYTES, "big")
        except OverflowError as exc:
            raise BuilderError(
                f"sequence length {sequence_len} does not fit in "
                f"{appconsts.SEQUENCE_LEN_BYTES} bytes"
            ) from exc
        end = _SEQUENCE_LEN_INDEX + appconsts.SEQUENCE_LEN_BYTES
        if len(self._raw) < end:
            raise BuilderError("share is too short to hold a sequence length")
        self._raw[_SEQUENCE_LEN_INDEX:end] = encoded

    def flip_sequence_start(self) -> None:
        """Toggle the sequence start flag in the info byte."""
        self._raw[_INFO_BYTE_INDEX] ^= 0x01