import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from epochclock.components.config import ConfigModel, ValidateConfigInput, run_validate
from epochclock.domain.errors import ConfigLoadError, ConfigValidationFailed
from epochclock.rules.models import ConfigDocument

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def read_document(path: Path) -> dict[str, Any]:
    """
    Read and parse a config document.
    JSON files are parsed with json, .yaml/.yml files with yaml.safe_load.
    Raises FileNotFoundError if file missing.
    Raises ConfigLoadError if the file cannot be read or is not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e

    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigLoadError(f"Invalid syntax in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config file {path} must contain an object at the top level")
    return data


def parse_document(data: dict[str, Any]) -> ConfigModel:
    """
    Validate an already-parsed document.
    Raises ConfigValidationFailed carrying every field error.
    """
    doc = ConfigDocument.model_validate(data)

    output = run_validate(
        ValidateConfigInput(
            protocol=doc.protocol,
            version=doc.version,
            genesis_timestamp=doc.genesis_timestamp,
            epoch_interval_seconds=doc.epoch_interval_seconds,
        )
    )
    if output.config is None:
        raise ConfigValidationFailed(output.errors)
    return output.config


def load_config(path: Path) -> ConfigModel:
    """
    Load and validate the config file.
    Raises FileNotFoundError if file missing.
    Raises ConfigLoadError if the file cannot be parsed.
    Raises ConfigValidationFailed if a field is invalid.
    """
    config = parse_document(read_document(path))
    logger.info(
        "Config loaded from %s (version %s, genesis %s, interval %ss)",
        path,
        config.version,
        config.genesis_timestamp,
        config.epoch_interval_seconds,
    )
    return config


def config_checksum(path: Path) -> str:
    """SHA-256 hex digest of the config file bytes."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e
    return hashlib.sha256(data).hexdigest()
