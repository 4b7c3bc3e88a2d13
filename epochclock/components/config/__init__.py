"""
Config component - protocol configuration validation.
"""

from ._impl import (
    PROTOCOL_NAME,
    build_config,
    validate_config,
    validate_fields,
    validate_genesis,
    validate_interval,
    validate_protocol,
    validate_version,
)
from .component import CONFIG_FIELDS, run_validate, run_validate_mapping
from .models import ConfigModel, ConfigOutput, ValidateConfigInput

__all__ = [
    # Entry points
    "run_validate",
    "run_validate_mapping",
    # Models
    "ConfigModel",
    "ConfigOutput",
    "ValidateConfigInput",
    # _impl re-exports
    "CONFIG_FIELDS",
    "PROTOCOL_NAME",
    "build_config",
    "validate_config",
    "validate_fields",
    "validate_genesis",
    "validate_interval",
    "validate_protocol",
    "validate_version",
]
