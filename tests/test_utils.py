import random

import pytest

from rollshares.utils import (
    VarintError,
    delim_len,
    encode_uvarint,
    marshal_delimited_tx,
    parse_delimiter,
    tx_key,
    zero_pad_if_necessary,
)


@pytest.mark.parametrize(
    "share, width, want_padded, want_padding",
    [
        (bytes([1, 2, 3]), 6, bytes([1, 2, 3, 0, 0, 0]), 3),
        (bytes([1, 2, 3]), 3, bytes([1, 2, 3]), 0),
        (bytes([1, 2, 3]), 2, bytes([1, 2, 3]), 0),
    ],
    ids=["pad", "equal to width", "greater than width"],
)
def test_zero_pad_if_necessary(share, width, want_padded, want_padding):
    padded, padding = zero_pad_if_necessary(share, width)
    assert padded == want_padded
    assert padding == want_padding


def test_parse_delimiter_round_trip():
    rng = random.Random(1)
    for size in range(100):
        tx = rng.randbytes(size)
        rest, tx_len = parse_delimiter(marshal_delimited_tx(tx))
        assert tx_len == size
        assert rest == tx


def test_parse_delimiter_empty_input():
    assert parse_delimiter(b"") == (b"", 0)


def test_parse_delimiter_keeps_trailing_data():
    tx = b"\x07" * 200
    rest, tx_len = parse_delimiter(marshal_delimited_tx(tx) + b"tail")
    assert tx_len == 200
    assert rest == tx + b"tail"


def test_parse_delimiter_overflow():
    with pytest.raises(VarintError):
        parse_delimiter(b"\xff" * 11)


@pytest.mark.parametrize(
    "value, want",
    [(0, b"\x00"), (1, b"\x01"), (127, b"\x7f"), (128, b"\x80\x01"), (300, b"\xac\x02")],
)
def test_encode_uvarint(value, want):
    assert encode_uvarint(value) == want


def test_encode_uvarint_negative():
    with pytest.raises(VarintError):
        encode_uvarint(-1)


@pytest.mark.parametrize("size, want", [(0, 1), (127, 1), (128, 2), (2**64 - 1, 10)])
def test_delim_len(size, want):
    assert delim_len(size) == want


def test_marshal_delimited_tx_prefix():
    assert marshal_delimited_tx(b"\x01\x02") == b"\x02\x01\x02"


def test_tx_key_empty():
    assert tx_key(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_tx_key_distinguishes_txs():
    assert tx_key(b"\x01") != tx_key(b"\x02")
    assert len(tx_key(b"\x01")) == 32