"""Configuration: defaults, global file and per-directory overrides (JSON)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

CONFIG_DIRNAME = ".file-processor"
CONFIG_FILENAME = "config.json"
# Per-directory override, looked up in the directory being scanned
PROJECT_CONFIG_FILENAME = ".file-processor.json"


def _global_config_dir() -> Path:
    return Path.home() / CONFIG_DIRNAME


def global_config_path() -> Path:
    """Path to global config file (~/.file-processor/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    return {
        "scan": {
            "ignore_fail": False,
        },
        "records": {
            "format": "json",
        },
        "logging": {
            "level": "INFO",
            "file": None,
        },
    }


def project_config_path(directory: Path) -> Path:
    return directory / PROJECT_CONFIG_FILENAME


def _read_layer(path: Path) -> dict[str, Any]:
    """JSON object stored at path; an absent, unreadable or non-object file counts as empty."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _apply(target: dict[str, Any], layer: dict[str, Any]) -> None:
    """Overlay layer onto target; sections (dicts) are overlaid key by key."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _apply(current, value)
        else:
            target[key] = value


def config_layers(directory: Path | None = None) -> list[Path]:
    """Files consulted by load_config, lowest precedence first."""
    layers = [global_config_path()]
    if directory is not None and directory.is_dir():
        layers.append(project_config_path(directory.resolve()))
    return layers


def load_config(directory: Path | None = None) -> dict[str, Any]:
    """
    Defaults, then ~/.file-processor/config.json, then
    <directory>/.file-processor.json when directory is an existing directory.
    """
    config = default_config()
    for path in config_layers(directory):
        _apply(config, _read_layer(path))
    return config


def scan_ignore_fail(config: dict[str, Any]) -> bool:
    return bool((config.get("scan") or {}).get("ignore_fail", False))


def records_format(config: dict[str, Any]) -> str:
    return str((config.get("records") or {}).get("format") or "json")
