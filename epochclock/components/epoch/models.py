"""
Epoch component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from epochclock.components.config import ConfigModel
from epochclock.domain.errors import EpochClockError

# --- Input Models ---


@dataclass(frozen=True)
class ComputeEpochInput:
    """Input for classifying one reference timestamp."""

    config: ConfigModel
    reference_timestamp: int


@dataclass(frozen=True)
class ComputeBatchInput:
    """Input for classifying many reference timestamps against one config."""

    config: ConfigModel
    reference_timestamps: list[int]


# --- Output Models ---


@dataclass(frozen=True)
class EpochOutput:
    """Output for a single epoch computation.

    window_start/window_end bound the epoch as [start, end); they are None
    when the computation failed or the window end is not representable.
    """

    reference_timestamp: int
    epoch: int | None
    window_start: int | None = None
    window_end: int | None = None
    errors: list[EpochClockError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class BatchOutput:
    """Output for a batch computation, results in input order."""

    results: list[EpochOutput] = field(default_factory=list)
    success: bool = True
