"""
Offline extraction of consensus timestamps from serialized Bitcoin data.

Nothing here talks to a node. Callers paste the raw hex they obtained
elsewhere (block explorer, bitcoin-cli getblockheader <hash> false,
getrawtransaction) and get back the embedded UNIX timestamp.

Whether the data was actually confirmed is not checked.
"""

from __future__ import annotations

import logging
import struct

logger = logging.getLogger(__name__)

HEADER_SIZE = 80
HEADER_TIME_OFFSET = 68  # version(4) + prev_hash(32) + merkle_root(32)

# nLockTime values below this are block heights, not timestamps
LOCKTIME_THRESHOLD = 500_000_000

# version(4) + input count(1) + output count(1) + locktime(4)
MIN_TX_SIZE = 10


class BitcoinDecodeError(ValueError):
    """Raw header or transaction could not be decoded."""


def _decode_hex(value: str, what: str) -> bytes:
    cleaned = value.strip()
    if cleaned.startswith(("0x", "0X")):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as e:
        raise BitcoinDecodeError(f"{what} is not valid hex: {e}") from e


def timestamp_from_header(header_hex: str) -> int:
    """Return nTime from an 80-byte serialized block header."""
    data = _decode_hex(header_hex, "block header")
    if len(data) != HEADER_SIZE:
        raise BitcoinDecodeError(
            f"block header must be {HEADER_SIZE} bytes, got {len(data)}"
        )

    timestamp = struct.unpack_from("<I", data, HEADER_TIME_OFFSET)[0]
    logger.debug("header nTime %s", timestamp)
    return timestamp


def locktime_from_tx(raw_tx_hex: str) -> int:
    """
    Return nLockTime from a serialized transaction.

    nLockTime is always the final four bytes, with or without witness data.
    Height-based locktimes are rejected since they are not timestamps.
    """
    data = _decode_hex(raw_tx_hex, "transaction")
    if len(data) < MIN_TX_SIZE:
        raise BitcoinDecodeError(f"transaction is too short ({len(data)} bytes)")

    locktime = struct.unpack_from("<I", data, len(data) - 4)[0]
    if locktime < LOCKTIME_THRESHOLD:
        raise BitcoinDecodeError(
            f"nLockTime {locktime} is a block height, not a timestamp"
        )

    logger.debug("tx nLockTime %s", locktime)
    return locktime
