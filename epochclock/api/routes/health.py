"""
Health Routes.

Key behaviors:
- /health/live answers while the process is up
- /health/ready re-reads the config file on every call and is ready only
  when it validates; an edited or removed file turns readiness off
- Readiness reports the config version and file checksum for auditing
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from epochclock import __version__
from epochclock.api.deps import Settings, get_settings
from epochclock.domain.errors import ConfigLoadError, ConfigValidationFailed
from epochclock.rules.loader import config_checksum, load_config

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_settings)]


@router.get("/live", response_model=None)
def liveness() -> dict[str, Any]:
    return {"alive": True, "version": __version__}


@router.get(
    "/ready",
    response_model=None,
    responses={503: {"description": "Config missing or invalid"}},
)
def readiness(settings: SettingsDep) -> JSONResponse:
    try:
        config = load_config(settings.config_path)
        digest = config_checksum(settings.config_path)
    except (FileNotFoundError, ConfigLoadError, ConfigValidationFailed) as e:
        logger.warning("Not ready: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ready": False, "error": str(e)},
        )

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "ready": True,
            "config_version": config.version,
            "genesis_timestamp": config.genesis_timestamp,
            "epoch_interval_seconds": config.epoch_interval_seconds,
            "sha256": digest,
        },
    )
