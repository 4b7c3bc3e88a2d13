"""
Config component - protocol configuration validation.

Invariants:
- I1: A ConfigModel only exists if every field check passed
- I2: A zero interval never reaches the epoch arithmetic
- I3: Unknown document keys are ignored
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ._impl import validate_config
from .models import ConfigOutput, ValidateConfigInput

CONFIG_FIELDS = ("protocol", "version", "genesis_timestamp", "epoch_interval_seconds")


def run_validate(inp: ValidateConfigInput) -> ConfigOutput:
    """
    Validate raw config fields.

    Args:
        inp: Field values as parsed from the config document.

    Returns:
        ConfigOutput with the ConfigModel, or every validation error.
    """
    config, errors = validate_config(inp)
    return ConfigOutput(config=config, errors=errors, success=len(errors) == 0)


def run_validate_mapping(data: Mapping[str, Any]) -> ConfigOutput:
    """Validate a parsed config document, ignoring keys it does not know."""
    return run_validate(ValidateConfigInput(**{k: data.get(k) for k in CONFIG_FIELDS}))
