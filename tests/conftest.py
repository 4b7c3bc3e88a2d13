import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from epochclock.components.config import ConfigModel

VALID_DOCUMENT: dict[str, Any] = {
    "protocol": "epochclock",
    "version": "0.1",
    "genesis_timestamp": 1710000000,
    "epoch_interval_seconds": 3155760000,
}


@pytest.fixture
def valid_document() -> dict[str, Any]:
    return dict(VALID_DOCUMENT)


@pytest.fixture
def config() -> ConfigModel:
    """Genesis 1000000000, interval 100000000."""
    return ConfigModel(
        protocol="epochclock",
        version="0.1",
        genesis_timestamp=1000000000,
        epoch_interval_seconds=100000000,
    )


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config document to tmp_path and return its path."""

    def _write(document: Any = None, name: str = "epochclock.json", raw: str | None = None) -> Path:
        path = tmp_path / name
        if raw is not None:
            path.write_text(raw)
        else:
            path.write_text(json.dumps(VALID_DOCUMENT if document is None else document))
        return path

    return _write
