"""
Error taxonomy for epoch computation.

Every failure the core can produce is one of the ErrorKind members below.
Callers branch on ``error.kind``; the message is for humans only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# --- Error Kinds ---


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    INVALID_PROTOCOL = "InvalidProtocol"
    INVALID_VERSION = "InvalidVersion"
    INVALID_GENESIS = "InvalidGenesis"
    INVALID_INTERVAL = "InvalidInterval"
    TIMESTAMP_BEFORE_GENESIS = "TimestampBeforeGenesis"
    ARITHMETIC_OVERFLOW = "ArithmeticOverflow"


# --- Error Value ---


@dataclass(frozen=True)
class EpochClockError:
    """A single typed failure returned to the caller."""

    kind: ErrorKind
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


# --- Exceptions ---


class ConfigValidationFailed(ValueError):
    """Raised by exception-style entry points when a config does not validate."""

    def __init__(self, errors: list[EpochClockError]) -> None:
        self.errors = errors
        details = "; ".join(str(e) for e in errors)
        super().__init__(f"Config validation failed: {details}")


class ConfigLoadError(ValueError):
    """Config document could not be read or parsed."""
