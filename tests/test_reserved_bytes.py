import pytest

from rollshares.reserved_bytes import (
    ReservedBytesError,
    new_reserved_bytes,
    parse_reserved_bytes,
)


@pytest.mark.parametrize(
    "raw, want",
    [
        (bytes([0, 0, 0, 0]), 0),
        (bytes([0, 0, 0, 2]), 2),
        (bytes([0, 0, 0, 4]), 4),
        (bytes([0, 0, 0, 8]), 8),
        (bytes([0, 0, 0, 16]), 16),
        (bytes([0, 0, 0, 32]), 32),
        (bytes([0, 0, 0, 64]), 64),
        (bytes([0, 0, 0, 128]), 128),
        (bytes([0, 0, 1, 0]), 256),
        (bytes([0, 0, 1, 255]), 511),
    ],
)
def test_parse_reserved_bytes(raw, want):
    assert parse_reserved_bytes(raw) == want


@pytest.mark.parametrize(
    "raw",
    [
        b"",
        bytes([1]),
        bytes([3, 3, 3]),
        bytes([0, 0, 0, 0, 0]),
        bytes([0, 0, 3, 232]),
    ],
    ids=["empty", "too few", "another too few", "too many", "index too high"],
)
def test_parse_reserved_bytes_errors(raw):
    with pytest.raises(ReservedBytesError):
        parse_reserved_bytes(raw)


@pytest.mark.parametrize(
    "index, want",
    [
        (0, bytes([0, 0, 0, 0])),
        (2, bytes([0, 0, 0, 2])),
        (4, bytes([0, 0, 0, 4])),
        (8, bytes([0, 0, 0, 8])),
        (16, bytes([0, 0, 0, 16])),
        (32, bytes([0, 0, 0, 32])),
        (64, bytes([0, 0, 0, 64])),
        (128, bytes([0, 0, 0, 128])),
        (256, bytes([0, 0, 1, 0])),
        (511, bytes([0, 0, 1, 255])),
    ],
)
def test_new_reserved_bytes(index, want):
    assert new_reserved_bytes(index) == want


@pytest.mark.parametrize("index", [512, 1000])
def test_new_reserved_bytes_errors(index):
    with pytest.raises(ReservedBytesError):
        new_reserved_bytes(index)


@pytest.mark.parametrize("index", [0, 1, 100, 511])
def test_round_trip(index):
    assert parse_reserved_bytes(new_reserved_bytes(index)) == index