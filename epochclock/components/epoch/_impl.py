"""
EpochCalculator - maps a reference timestamp to its epoch index.

Algorithm:
1. reference < genesis fails with TimestampBeforeGenesis
2. delta = reference - genesis, checked against the signed 64-bit range
3. epoch = floor(delta / interval), checked
4. Any overflow fails with ArithmeticOverflow

Key behaviors:
- genesis + k*interval belongs to epoch k, never k-1
- Identical inputs always give identical outputs; nothing is cached
- No drift tolerance is applied to timestamps
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from epochclock.components.config import ConfigModel
from epochclock.domain.arithmetic import (
    ArithmeticOverflowError,
    checked_add,
    checked_floor_div,
    checked_mul,
    checked_sub,
    is_strict_int,
    require_int64,
)
from epochclock.domain.errors import EpochClockError, ErrorKind

logger = logging.getLogger(__name__)


def compute_epoch(
    config: ConfigModel,
    reference_timestamp: int,
) -> tuple[int | None, list[EpochClockError]]:
    """
    Compute the epoch containing reference_timestamp.

    Returns:
        (epoch, []) on success, (None, [error]) on failure.

    Raises:
        TypeError: if reference_timestamp is not an int.
    """
    if not is_strict_int(reference_timestamp):
        raise TypeError(
            f"reference_timestamp must be an int, got {type(reference_timestamp).__name__}"
        )

    if reference_timestamp < config.genesis_timestamp:
        return None, [
            EpochClockError(
                kind=ErrorKind.TIMESTAMP_BEFORE_GENESIS,
                message=(
                    f"reference timestamp {reference_timestamp} is before genesis "
                    f"{config.genesis_timestamp}"
                ),
                field="reference_timestamp",
            )
        ]

    try:
        require_int64(reference_timestamp, "reference_timestamp")
        delta = checked_sub(reference_timestamp, config.genesis_timestamp)
        epoch = checked_floor_div(delta, config.epoch_interval_seconds)
    except ArithmeticOverflowError as e:
        return None, [
            EpochClockError(
                kind=ErrorKind.ARITHMETIC_OVERFLOW,
                message=str(e),
                field="reference_timestamp",
            )
        ]

    logger.debug(
        "reference %s -> epoch %s (genesis=%s interval=%s)",
        reference_timestamp,
        epoch,
        config.genesis_timestamp,
        config.epoch_interval_seconds,
    )
    return epoch, []


def epoch_bounds(config: ConfigModel, epoch: int) -> tuple[int, int]:
    """
    Return the [start, end) window of an epoch.

    Raises:
        ValueError: if epoch is negative.
        ArithmeticOverflowError: if a bound does not fit in 64 bits.
    """
    if epoch < 0:
        raise ValueError(f"epoch must be non-negative, got {epoch}")

    offset = checked_mul(epoch, config.epoch_interval_seconds)
    start = checked_add(config.genesis_timestamp, offset)
    end = checked_add(start, config.epoch_interval_seconds)
    return start, end


class EpochCalculator:
    """Epoch calculator bound to one validated config."""

    def __init__(self, config: ConfigModel) -> None:
        self.config = config

    def compute(self, reference_timestamp: int) -> tuple[int | None, list[EpochClockError]]:
        return compute_epoch(self.config, reference_timestamp)

    def compute_many(
        self, reference_timestamps: Iterable[int]
    ) -> list[tuple[int | None, list[EpochClockError]]]:
        """Classify each timestamp independently, preserving input order."""
        return [compute_epoch(self.config, ts) for ts in reference_timestamps]

    def bounds(self, epoch: int) -> tuple[int, int]:
        return epoch_bounds(self.config, epoch)


def create_epoch_calculator(config: ConfigModel) -> EpochCalculator:
    """Factory function to create an EpochCalculator."""
    return EpochCalculator(config)
