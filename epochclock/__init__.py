"""
epochclock - deterministic epoch calculator over Bitcoin-consensus timestamps.
"""

from epochclock.components.config import ConfigModel, build_config
from epochclock.components.epoch import EpochCalculator, compute_epoch, epoch_bounds
from epochclock.domain.errors import (
    ConfigLoadError,
    ConfigValidationFailed,
    EpochClockError,
    ErrorKind,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigLoadError",
    "ConfigModel",
    "ConfigValidationFailed",
    "EpochCalculator",
    "EpochClockError",
    "ErrorKind",
    "build_config",
    "compute_epoch",
    "epoch_bounds",
]
