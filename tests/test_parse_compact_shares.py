import pytest

from rollshares import appconsts
from rollshares.info_byte import new_info_byte
from rollshares.namespace import TX_NAMESPACE
from rollshares.parse_compact_shares import (
    CompactShareParseError,
    extract_raw_data,
    parse_compact_shares,
    parse_raw_data,
    validate_share_versions,
)
from rollshares.shares import ShareError, new_share, shares_to_bytes
from rollshares.split_compact_shares import CompactShareSplitter
from rollshares.testfactory import generate_random_txs, generate_randomly_sized_txs

SUPPORTED = appconsts.SUPPORTED_SHARE_VERSIONS
CONT = appconsts.CONTINUATION_COMPACT_SHARE_CONTENT_SIZE
EXACT_TX_SHARE_SIZE = appconsts.FIRST_COMPACT_SHARE_CONTENT_SIZE - 1


def split_txs(txs):
    writer = CompactShareSplitter(TX_NAMESPACE, appconsts.SHARE_VERSION_ZERO)
    for tx in txs:
        writer.write_tx(tx)
    shares, _ = writer.export(0)
    return shares


def test_compact_share_splitter_round_trip():
    txs = generate_random_txs(33, 200)
    shares = split_txs(txs)
    assert parse_compact_shares(shares, SUPPORTED) == txs


CASES = [
    ("single small tx", CONT // 8, 1),
    ("many small txs", CONT // 8, 10),
    ("single big tx", CONT * 4, 1),
    ("many big txs", CONT * 4, 10),
    ("single exact size tx", EXACT_TX_SHARE_SIZE, 1),
    ("many exact size txs", EXACT_TX_SHARE_SIZE, 100),
]


@pytest.mark.parametrize("name, tx_size, tx_count", CASES)
def test_process_compact_shares_identically_sized(name, tx_size, tx_count):
    txs = generate_random_txs(tx_count, tx_size)
    parsed = parse_compact_shares(split_txs(txs), SUPPORTED)
    assert parsed == txs


@pytest.mark.parametrize("name, tx_size, tx_count", CASES)
def test_process_compact_shares_randomly_sized(name, tx_size, tx_count):
    txs = generate_randomly_sized_txs(tx_count, tx_size)
    parsed = parse_compact_shares(split_txs(txs), SUPPORTED)
    assert parsed == txs


def test_compact_share_contains_info_byte():
    shares = split_txs(generate_random_txs(1, CONT // 4))
    assert len(shares) == 1
    info_byte = shares[0].to_bytes()[appconsts.NAMESPACE_SIZE]
    assert info_byte == new_info_byte(appconsts.SHARE_VERSION_ZERO, True)


def test_contiguous_compact_share_contains_info_byte():
    shares = split_txs(generate_random_txs(1, CONT * 4))
    assert len(shares) > 1
    info_byte = shares[1].to_bytes()[appconsts.NAMESPACE_SIZE]
    assert info_byte == new_info_byte(appconsts.SHARE_VERSION_ZERO, False)


def test_parse_rejects_share_without_start_indicator():
    shares = split_txs(generate_random_txs(2, CONT * 4))
    with pytest.raises(CompactShareParseError):
        parse_compact_shares(shares[1:], SUPPORTED)


def test_parse_rejects_unsupported_share_version():
    shares = split_txs(generate_random_txs(2, CONT * 4))
    raw = bytearray(shares_to_bytes(shares)[0])
    raw[appconsts.NAMESPACE_SIZE] = new_info_byte(5, True)
    bad_share = new_share(bytes(raw))
    with pytest.raises(ShareError):
        parse_compact_shares([bad_share], SUPPORTED)


def test_parse_empty_shares():
    assert parse_compact_shares([], SUPPORTED) == []


def test_validate_share_versions_raises_for_unsupported():
    shares = split_txs([b"\x01\x02\x03"])
    validate_share_versions(shares, SUPPORTED)
    with pytest.raises(ShareError):
        validate_share_versions(shares, [3])


def test_parse_raw_data_splits_units():
    assert parse_raw_data(b"\x01a\x02bc\x00\x00\x00") == [b"a", b"bc"]


def test_parse_raw_data_empty():
    assert parse_raw_data(b"") == []


def test_parse_raw_data_truncated_unit():
    with pytest.raises(CompactShareParseError):
        parse_raw_data(b"\x05ab")


def test_extract_raw_data_strips_prefixes():
    shares = split_txs([b"\x07\x08"])
    raw = extract_raw_data(shares)
    assert raw.startswith(b"\x02\x07\x08")
    assert len(raw) == appconsts.FIRST_COMPACT_SHARE_CONTENT_SIZE