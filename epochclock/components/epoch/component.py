"""
Epoch component - epoch classification of reference timestamps.

Invariants:
- I1: reference < genesis always fails with TimestampBeforeGenesis
- I2: Results equal (reference - genesis) // interval
- I3: Epochs are monotonic in the reference timestamp
- I4: Overflow is reported, never wrapped
"""

from __future__ import annotations

import logging

from epochclock.domain.arithmetic import ArithmeticOverflowError

from ._impl import compute_epoch, epoch_bounds
from .models import BatchOutput, ComputeBatchInput, ComputeEpochInput, EpochOutput

logger = logging.getLogger(__name__)


def run_compute(inp: ComputeEpochInput) -> EpochOutput:
    """
    Classify one reference timestamp.

    Args:
        inp: Validated config and the reference timestamp.

    Returns:
        EpochOutput with the epoch and its window, or the error.
    """
    epoch, errors = compute_epoch(inp.config, inp.reference_timestamp)
    if epoch is None:
        return EpochOutput(
            reference_timestamp=inp.reference_timestamp,
            epoch=None,
            errors=errors,
            success=False,
        )

    window_start: int | None
    window_end: int | None
    try:
        window_start, window_end = epoch_bounds(inp.config, epoch)
    except ArithmeticOverflowError:
        logger.debug("window of epoch %s is not representable", epoch)
        window_start = window_end = None

    return EpochOutput(
        reference_timestamp=inp.reference_timestamp,
        epoch=epoch,
        window_start=window_start,
        window_end=window_end,
    )


def run_batch(inp: ComputeBatchInput) -> BatchOutput:
    """
    Classify many reference timestamps against one config.

    Each element is computed independently; one failure does not stop the rest.
    """
    results = [
        run_compute(ComputeEpochInput(config=inp.config, reference_timestamp=ts))
        for ts in inp.reference_timestamps
    ]
    return BatchOutput(results=results, success=all(r.success for r in results))
