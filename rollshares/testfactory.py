"""Random transaction generators for tests and experiments."""

from __future__ import annotations

import random


def generate_randomly_sized_txs(count: int, max_size: int) -> list[bytes]:
    """Return ``count`` random transactions of sizes between 1 and ``max_size - 1``."""
    txs = []
    for _ in range(count):
        size = random.randrange(max_size) or 1
        txs.append(random.randbytes(size))
    return txs


def generate_random_txs(count: int, size: int) -> list[bytes]:
    """Return ``count`` random transactions of exactly ``size`` bytes."""
    return [random.randbytes(size) for _ in range(count)]