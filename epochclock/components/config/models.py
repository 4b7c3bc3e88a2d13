"""
Config component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from epochclock.domain.errors import ConfigValidationFailed, EpochClockError

# --- Config Model ---


@dataclass(frozen=True)
class ConfigModel:
    """Validated protocol configuration. Never mutated after construction.

    Direct construction runs the same field checks as run_validate, so an
    instance with a zero interval cannot exist.
    """

    protocol: str
    version: str
    genesis_timestamp: int
    epoch_interval_seconds: int

    def __post_init__(self) -> None:
        from ._impl import validate_fields

        errors = validate_fields(
            ValidateConfigInput(
                protocol=self.protocol,
                version=self.version,
                genesis_timestamp=self.genesis_timestamp,
                epoch_interval_seconds=self.epoch_interval_seconds,
            )
        )
        if errors:
            raise ConfigValidationFailed(errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "protocol": self.protocol,
            "version": self.version,
            "genesis_timestamp": self.genesis_timestamp,
            "epoch_interval_seconds": self.epoch_interval_seconds,
        }


# --- Input Models ---


@dataclass(frozen=True)
class ValidateConfigInput:
    """Raw field values, already parsed from the config document.

    A field left as None is treated as missing.
    """

    protocol: Any = None
    version: Any = None
    genesis_timestamp: Any = None
    epoch_interval_seconds: Any = None


# --- Output Models ---


@dataclass(frozen=True)
class ConfigOutput:
    """Output for config validation."""

    config: ConfigModel | None
    errors: list[EpochClockError] = field(default_factory=list)
    success: bool = True
