from pydantic import BaseModel, Field

from epochclock.domain.errors import EpochClockError


class ComputeEpochRequest(BaseModel):
    reference_timestamp: int


class ComputeBatchRequest(BaseModel):
    reference_timestamps: list[int] = Field(min_length=1)


class ErrorResponse(BaseModel):
    kind: str
    message: str
    field: str | None = None

    @classmethod
    def from_error(cls, error: EpochClockError) -> "ErrorResponse":
        return cls(kind=error.kind.value, message=error.message, field=error.field)


class EpochResponse(BaseModel):
    reference_timestamp: int
    epoch: int
    window_start: int | None = None
    window_end: int | None = None


class BatchItemResponse(BaseModel):
    reference_timestamp: int
    epoch: int | None = None
    error: ErrorResponse | None = None


class BatchResponse(BaseModel):
    success: bool
    results: list[BatchItemResponse]


class ConfigResponse(BaseModel):
    protocol: str
    version: str
    genesis_timestamp: int
    epoch_interval_seconds: int
    sha256: str
