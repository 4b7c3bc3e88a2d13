from typing import Any

from pydantic import BaseModel, ConfigDict


class ConfigDocument(BaseModel):
    """Shape of the config document. Field rules live in the config component."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    protocol: Any = None
    version: Any = None
    genesis_timestamp: Any = None
    epoch_interval_seconds: Any = None
