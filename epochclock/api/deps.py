import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, HTTPException, status

from epochclock.components.config import ConfigModel
from epochclock.domain.errors import ConfigLoadError, ConfigValidationFailed
from epochclock.rules.loader import load_config


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.config_path = Path(
            os.environ.get("EPOCHCLOCK_CONFIG", str(self.base_dir / "epochclock.json"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Config ---
@lru_cache
def get_config(settings: Settings = Depends(get_settings)) -> ConfigModel:
    try:
        return load_config(settings.config_path)
    except (FileNotFoundError, ConfigLoadError, ConfigValidationFailed) as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Config unavailable: {e}",
        ) from e
