"""
Epoch component - epoch classification of reference timestamps.
"""

from ._impl import (
    EpochCalculator,
    compute_epoch,
    create_epoch_calculator,
    epoch_bounds,
)
from .component import run_batch, run_compute
from .models import BatchOutput, ComputeBatchInput, ComputeEpochInput, EpochOutput

__all__ = [
    # Entry points
    "run_batch",
    "run_compute",
    # Input models
    "ComputeBatchInput",
    "ComputeEpochInput",
    # Output models
    "BatchOutput",
    "EpochOutput",
    # _impl re-exports
    "EpochCalculator",
    "compute_epoch",
    "create_epoch_calculator",
    "epoch_bounds",
]
