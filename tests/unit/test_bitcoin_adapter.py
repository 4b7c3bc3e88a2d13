"""
Tests for offline Bitcoin timestamp extraction.
"""

from __future__ import annotations

import pytest

from epochclock.adapters.bitcoin import (
    BitcoinDecodeError,
    locktime_from_tx,
    timestamp_from_header,
)

# Bitcoin genesis block header, nTime 1231006505
GENESIS_HEADER = (
    "01000000"
    + "00" * 32
    + "3ba3edfd7a7b12b27ac72c3e67768f617fc81bc3888a51323a9fb8aa4b1e5e4a"
    + "29ab5f49"
    + "ffff001d"
    + "1dac2b7c"
)


def make_tx(locktime: int) -> str:
    body = "02000000" + "01" + "00" * 40 + "01" + "00" * 12
    return body + locktime.to_bytes(4, "little").hex()


class TestHeader:
    def test_genesis_header_time(self) -> None:
        assert timestamp_from_header(GENESIS_HEADER) == 1231006505

    def test_accepts_0x_prefix_and_whitespace(self) -> None:
        assert timestamp_from_header("  0x" + GENESIS_HEADER + "\n") == 1231006505

    def test_wrong_length(self) -> None:
        with pytest.raises(BitcoinDecodeError, match="80 bytes"):
            timestamp_from_header(GENESIS_HEADER[:-2])

    def test_not_hex(self) -> None:
        with pytest.raises(BitcoinDecodeError, match="not valid hex"):
            timestamp_from_header("zz" * 80)


class TestLocktime:
    def test_timestamp_locktime(self) -> None:
        assert locktime_from_tx(make_tx(1710000000)) == 1710000000

    def test_threshold_is_a_timestamp(self) -> None:
        assert locktime_from_tx(make_tx(500_000_000)) == 500_000_000

    def test_height_locktime_rejected(self) -> None:
        with pytest.raises(BitcoinDecodeError, match="block height"):
            locktime_from_tx(make_tx(840_000))

    def test_too_short(self) -> None:
        with pytest.raises(BitcoinDecodeError, match="too short"):
            locktime_from_tx("0200000000")
