"""
Config validation.

Key behaviors:
- protocol must equal "epochclock"
- version is one or more dot-separated non-negative integers
- genesis_timestamp is an int in [0, INT64_MAX]
- epoch_interval_seconds is an int in [1, INT64_MAX]
- Every check runs; all failures are reported together
- bool is never accepted where an int is expected
"""

from __future__ import annotations

import re
from typing import Any

from epochclock.domain.arithmetic import INT64_MAX, is_strict_int
from epochclock.domain.errors import ConfigValidationFailed, EpochClockError, ErrorKind

from .models import ConfigModel, ValidateConfigInput

PROTOCOL_NAME = "epochclock"

VERSION_PATTERN = re.compile(r"[0-9]+(\.[0-9]+)*")


# --- Validation Functions ---


def validate_protocol(protocol: Any) -> list[EpochClockError]:
    if protocol is None:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_PROTOCOL,
                message="protocol is required",
                field="protocol",
            )
        ]
    if not isinstance(protocol, str) or protocol != PROTOCOL_NAME:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_PROTOCOL,
                message=f"protocol must be {PROTOCOL_NAME!r}, got {protocol!r}",
                field="protocol",
            )
        ]
    return []


def validate_version(version: Any) -> list[EpochClockError]:
    if version is None:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_VERSION,
                message="version is required",
                field="version",
            )
        ]
    if not isinstance(version, str) or VERSION_PATTERN.fullmatch(version) is None:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_VERSION,
                message=f"version must look like '0.1' or '1.2.3', got {version!r}",
                field="version",
            )
        ]
    return []


def validate_genesis(genesis_timestamp: Any) -> list[EpochClockError]:
    if genesis_timestamp is None:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_GENESIS,
                message="genesis_timestamp is required",
                field="genesis_timestamp",
            )
        ]
    if not is_strict_int(genesis_timestamp):
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_GENESIS,
                message=f"genesis_timestamp must be an integer, got {genesis_timestamp!r}",
                field="genesis_timestamp",
            )
        ]
    if genesis_timestamp < 0:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_GENESIS,
                message=f"genesis_timestamp must be non-negative, got {genesis_timestamp}",
                field="genesis_timestamp",
            )
        ]
    if genesis_timestamp > INT64_MAX:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_GENESIS,
                message=f"genesis_timestamp {genesis_timestamp} does not fit in 64 bits",
                field="genesis_timestamp",
            )
        ]
    return []


def validate_interval(epoch_interval_seconds: Any) -> list[EpochClockError]:
    if epoch_interval_seconds is None:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_INTERVAL,
                message="epoch_interval_seconds is required",
                field="epoch_interval_seconds",
            )
        ]
    if not is_strict_int(epoch_interval_seconds):
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_INTERVAL,
                message=(
                    f"epoch_interval_seconds must be an integer, got {epoch_interval_seconds!r}"
                ),
                field="epoch_interval_seconds",
            )
        ]
    if epoch_interval_seconds < 1:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_INTERVAL,
                message=f"epoch_interval_seconds must be at least 1, got {epoch_interval_seconds}",
                field="epoch_interval_seconds",
            )
        ]
    if epoch_interval_seconds > INT64_MAX:
        return [
            EpochClockError(
                kind=ErrorKind.INVALID_INTERVAL,
                message=f"epoch_interval_seconds {epoch_interval_seconds} does not fit in 64 bits",
                field="epoch_interval_seconds",
            )
        ]
    return []


def validate_fields(inp: ValidateConfigInput) -> list[EpochClockError]:
    """Run every field check and collect the failures in field order."""
    errors: list[EpochClockError] = []
    errors.extend(validate_protocol(inp.protocol))
    errors.extend(validate_version(inp.version))
    errors.extend(validate_genesis(inp.genesis_timestamp))
    errors.extend(validate_interval(inp.epoch_interval_seconds))
    return errors


def validate_config(inp: ValidateConfigInput) -> tuple[ConfigModel | None, list[EpochClockError]]:
    errors = validate_fields(inp)
    if errors:
        return None, errors

    return (
        ConfigModel(
            protocol=inp.protocol,
            version=inp.version,
            genesis_timestamp=inp.genesis_timestamp,
            epoch_interval_seconds=inp.epoch_interval_seconds,
        ),
        [],
    )


def build_config(
    protocol: Any,
    version: Any,
    genesis_timestamp: Any,
    epoch_interval_seconds: Any,
) -> ConfigModel:
    """
    Build a ConfigModel or raise.

    Raises:
        ConfigValidationFailed: with every failing field's error attached.
    """
    config, errors = validate_config(
        ValidateConfigInput(
            protocol=protocol,
            version=version,
            genesis_timestamp=genesis_timestamp,
            epoch_interval_seconds=epoch_interval_seconds,
        )
    )
    if config is None:
        raise ConfigValidationFailed(errors)
    return config
