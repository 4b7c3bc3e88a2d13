"""
Tests for the assembled API application.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from epochclock.api.deps import get_settings
from epochclock.api.main import app


@pytest.fixture
def client(
    monkeypatch: pytest.MonkeyPatch, write_config: Callable[..., Path]
) -> Iterator[TestClient]:
    monkeypatch.setenv("EPOCHCLOCK_CONFIG", str(write_config()))
    get_settings.cache_clear()
    with TestClient(app) as client:
        yield client
    get_settings.cache_clear()


def test_live_after_startup(client: TestClient) -> None:
    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.json()["alive"] is True


def test_ready(client: TestClient) -> None:
    assert client.get("/health/ready").json()["ready"] is True


def test_compute_against_env_config(client: TestClient) -> None:
    response = client.post("/api/epoch", json={"reference_timestamp": 1860000000})
    assert response.status_code == 200
    assert response.json()["epoch"] == 0
    assert response.json()["window_start"] == 1710000000
