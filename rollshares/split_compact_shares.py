"""Lazy splitting of transactions into a sequence of compact shares."""

from __future__ import annotations

from dataclasses import dataclass

from rollshares import appconsts
from rollshares.namespace import Namespace
from rollshares.share_builder import Builder
from rollshares.shares import Share
from rollshares.utils import marshal_delimited_tx, tx_key


@dataclass(frozen=True)
class ShareRange:
    """The indexes of the first and last shares occupied by a unit."""

    start: int
    end: int


class CompactShareSplitter:
    """Writes units compactly across a growing list of shares.

    Share ranges recorded for transactions assume this splitter is the only
    thing in the data square, so the first transaction starts at share 0.
    """

    def __init__(
        self,
        namespace: Namespace,
        share_version: int = appconsts.SHARE_VERSION_ZERO,
    ) -> None:
        self.namespace = namespace
        self.share_version = share_version
        self._shares: list[Share] = []
        self._builder = Builder(namespace, share_version, True).init()
        self._done = False
        self._share_ranges: dict[bytes, ShareRange] = {}

    def write_tx(self, tx: bytes) -> None:
        """Write a transaction, prefixed with its length delimiter."""
        raw_data = marshal_delimited_tx(tx)
        start_share = len(self._shares)
        self.write(raw_data)
        end_share = self.count() - 1
        self._share_ranges[tx_key(tx)] = ShareRange(start_share, end_share)

    def write(self, raw_data: bytes) -> None:
        """Append already delimited data to the shares."""
        if self._done:
            if not self._builder.is_empty_share():
                self._shares.pop()
            self._done = False

        self._builder.maybe_write_reserved_bytes()

        leftover: bytes | None = bytes(raw_data)
        while True:
            leftover = self._builder.add_data(leftover)
            if leftover is None:
                break
            self._stack_pending()

        if self._builder.available_bytes() == 0:
            self._stack_pending()

    def _stack_pending(self) -> None:
        self._shares.append(self._builder.build())
        self._builder = Builder(self.namespace, self.share_version, False).init()

    def export(
        self, share_range_offset: int = 0
    ) -> tuple[list[Share], dict[bytes, ShareRange]]:
        """Finalise and return the shares and the share range of each transaction.

        Every share range is shifted by ``share_range_offset``. Exporting more
        than once returns the same shares.
        """
        share_ranges: dict[bytes, ShareRange] = {}
        if self._is_empty():
            return [], share_ranges

        share_ranges = {
            key: ShareRange(rng.start + share_range_offset, rng.end + share_range_offset)
            for key, rng in self._share_ranges.items()
        }

        if self._done:
            return list(self._shares), share_ranges

        bytes_of_padding = 0
        if not self._builder.is_empty_share():
            bytes_of_padding = self._builder.zero_pad_if_necessary()
            self._stack_pending()

        self._write_sequence_len(self._sequence_len(bytes_of_padding))
        self._done = True
        return list(self._shares), share_ranges

    def _write_sequence_len(self, sequence_len: int) -> None:
        if self._is_empty():
            return
        builder = Builder(self.namespace, self.share_version, True).init()
        builder.import_raw_share(self._shares[0].to_bytes())
        builder.write_sequence_len(sequence_len)
        self._shares[0] = builder.build()

    def _sequence_len(self, bytes_of_padding: int) -> int:
        if not self._shares:
            return 0
        continuation_count = len(self._shares) - 1
        return (
            appconsts.FIRST_COMPACT_SHARE_CONTENT_SIZE
            + continuation_count * appconsts.CONTINUATION_COMPACT_SHARE_CONTENT_SIZE
            - bytes_of_padding
        )

    def _is_empty(self) -> bool:
        return not self._shares and self._builder.is_empty_share()

    def count(self) -> int:
        """Return the number of shares an export would produce now."""
        if not self._builder.is_empty_share() and not self._done:
            return len(self._shares) + 1
        return len(self._shares)