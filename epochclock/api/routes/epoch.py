"""
Epoch Routes.

HTTP access to the epoch calculator.

Key behaviors:
- POST /api/epoch classifies one reference timestamp
- POST /api/epoch/batch classifies many, one result per input in order
- GET /api/config returns the validated config and its file checksum
- Computation errors return 422 with the error kind; no fallback epoch
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from epochclock.api.deps import Settings, get_config, get_settings
from epochclock.api.schemas import (
    BatchItemResponse,
    BatchResponse,
    ComputeBatchRequest,
    ComputeEpochRequest,
    ConfigResponse,
    EpochResponse,
    ErrorResponse,
)
from epochclock.components.config import ConfigModel
from epochclock.components.epoch import (
    ComputeBatchInput,
    ComputeEpochInput,
    run_batch,
    run_compute,
)
from epochclock.rules.loader import config_checksum

router = APIRouter()

ConfigDep = Annotated[ConfigModel, Depends(get_config)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


@router.post(
    "/epoch",
    response_model=EpochResponse,
    responses={422: {"model": ErrorResponse}},
)
def compute_epoch_route(
    request: ComputeEpochRequest, config: ConfigDep
) -> EpochResponse | JSONResponse:
    output = run_compute(
        ComputeEpochInput(config=config, reference_timestamp=request.reference_timestamp)
    )
    if not output.success or output.epoch is None:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse.from_error(output.errors[0]).model_dump(),
        )

    return EpochResponse(
        reference_timestamp=output.reference_timestamp,
        epoch=output.epoch,
        window_start=output.window_start,
        window_end=output.window_end,
    )


@router.post("/epoch/batch", response_model=BatchResponse)
def compute_batch_route(request: ComputeBatchRequest, config: ConfigDep) -> BatchResponse:
    batch = run_batch(
        ComputeBatchInput(config=config, reference_timestamps=request.reference_timestamps)
    )
    items = [
        BatchItemResponse(
            reference_timestamp=r.reference_timestamp,
            epoch=r.epoch,
            error=ErrorResponse.from_error(r.errors[0]) if r.errors else None,
        )
        for r in batch.results
    ]
    return BatchResponse(success=batch.success, results=items)


@router.get("/config", response_model=ConfigResponse)
def get_config_route(config: ConfigDep, settings: SettingsDep) -> ConfigResponse:
    return ConfigResponse(
        **config.to_dict(),
        sha256=config_checksum(settings.config_path),
    )
