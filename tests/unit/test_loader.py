"""
Tests for config file loading.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from pathlib import Path

import pytest

from epochclock.domain.errors import ConfigLoadError, ConfigValidationFailed, ErrorKind
from epochclock.rules.loader import config_checksum, load_config, read_document


class TestLoadConfig:
    def test_load_json(self, write_config: Callable[..., Path]) -> None:
        config = load_config(write_config())
        assert config.protocol == "epochclock"
        assert config.version == "0.1"
        assert config.genesis_timestamp == 1710000000
        assert config.epoch_interval_seconds == 3155760000

    def test_load_yaml(self, write_config: Callable[..., Path]) -> None:
        path = write_config(
            name="epochclock.yaml",
            raw=(
                "protocol: epochclock\n"
                "version: '1.2.3'\n"
                "genesis_timestamp: 1000000000\n"
                "epoch_interval_seconds: 100000000\n"
            ),
        )
        config = load_config(path)
        assert config.version == "1.2.3"
        assert config.epoch_interval_seconds == 100000000

    def test_unknown_fields_ignored(
        self, write_config: Callable[..., Path], valid_document: dict
    ) -> None:
        valid_document["inscription"] = {"id": "abc", "sat": 123}
        config = load_config(write_config(valid_document))
        assert config.genesis_timestamp == 1710000000

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json(self, write_config: Callable[..., Path]) -> None:
        with pytest.raises(ConfigLoadError, match="Invalid syntax"):
            load_config(write_config(raw="{not json"))

    def test_not_utf8(self, write_config: Callable[..., Path]) -> None:
        path = write_config()
        path.write_bytes(b'{"protocol": "epochclock\xff"}')
        with pytest.raises(ConfigLoadError, match="Cannot read"):
            load_config(path)

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Cannot read"):
            load_config(tmp_path)

    def test_top_level_not_object(self, write_config: Callable[..., Path]) -> None:
        with pytest.raises(ConfigLoadError, match="object"):
            load_config(write_config(raw="[1, 2, 3]"))

    def test_invalid_interval(
        self, write_config: Callable[..., Path], valid_document: dict
    ) -> None:
        valid_document["epoch_interval_seconds"] = 0
        with pytest.raises(ConfigValidationFailed) as exc_info:
            load_config(write_config(valid_document))
        assert [e.kind for e in exc_info.value.errors] == [ErrorKind.INVALID_INTERVAL]

    def test_missing_protocol(
        self, write_config: Callable[..., Path], valid_document: dict
    ) -> None:
        del valid_document["protocol"]
        with pytest.raises(ConfigValidationFailed) as exc_info:
            load_config(write_config(valid_document))
        assert [e.kind for e in exc_info.value.errors] == [ErrorKind.INVALID_PROTOCOL]


class TestReadDocument:
    def test_returns_mapping(self, write_config: Callable[..., Path]) -> None:
        data = read_document(write_config())
        assert data["protocol"] == "epochclock"


class TestChecksum:
    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="Cannot read"):
            config_checksum(tmp_path)

    def test_sha256_of_file_bytes(self, write_config: Callable[..., Path]) -> None:
        path = write_config()
        assert config_checksum(path) == hashlib.sha256(path.read_bytes()).hexdigest()

    def test_changes_with_content(
        self, write_config: Callable[..., Path], valid_document: dict
    ) -> None:
        first = config_checksum(write_config(name="a.json"))
        valid_document["genesis_timestamp"] += 1
        second = config_checksum(write_config(valid_document, name="b.json"))
        assert first != second

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            config_checksum(tmp_path / "missing.json")
