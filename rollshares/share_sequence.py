"""Share sequences and the number of shares a sequence needs."""

from __future__ import annotations

from dataclasses import dataclass, field

from rollshares import appconsts
from rollshares.namespace import Namespace
from rollshares.shares import Share


class ShareSequenceError(ValueError):
    """Raised for a share sequence that cannot be read."""


@dataclass
class ShareSequence:
    """Contiguous shares of one namespace and one blob (or one reserved namespace)."""

    namespace: Namespace
    shares: list[Share] = field(default_factory=list)

    def raw_data(self) -> bytes:
        """Return the sequence's data without prefixes and trailing padding."""
        data = b"".join(share.raw_data() for share in self.shares)
        return data[: self.sequence_len()]

    def sequence_len(self) -> int:
        """Return the sequence length recorded in the first share."""
        if not self.shares:
            raise ShareSequenceError(
                "invalid sequence length because share sequence has no shares"
            )
        return self.shares[0].sequence_len()


def _shares_needed(sequence_len: int, first: int, continuation: int) -> int:
    if sequence_len <= 0:
        return 0
    if sequence_len <= first:
        return 1
    return 1 + -(-(sequence_len - first) // continuation)


def compact_shares_needed(sequence_len: int) -> int:
    """Return how many compact shares hold ``sequence_len`` bytes of units."""
    return _shares_needed(
        sequence_len,
        appconsts.FIRST_COMPACT_SHARE_CONTENT_SIZE,
        appconsts.CONTINUATION_COMPACT_SHARE_CONTENT_SIZE,
    )


def sparse_shares_needed(sequence_len: int) -> int:
    """Return how many sparse shares hold ``sequence_len`` bytes of blob data."""
    return _shares_needed(
        sequence_len,
        appconsts.FIRST_SPARSE_SHARE_CONTENT_SIZE,
        appconsts.CONTINUATION_SPARSE_SHARE_CONTENT_SIZE,
    )