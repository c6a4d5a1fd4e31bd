"""YAML settings loader with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_BASE_URL = "https://jservice.io"


@dataclass
class GameSettings:
    """Tunable settings for the service client and the game controller."""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    max_attempts: int = 10
    value_start: int = 200
    value_step: int = 200

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameSettings:
        """Build settings from the parsed config.yaml structure."""
        service = data.get("service", {}) or {}
        game = data.get("game", {}) or {}
        return cls(
            base_url=str(service.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
            timeout_seconds=float(service.get("timeout_seconds", 10.0)),
            max_attempts=int(game.get("max_attempts", 10)),
            value_start=int(game.get("value_start", 200)),
            value_step=int(game.get("value_step", 200)),
        )


def get_settings_path() -> Path:
    """Get the path to the settings directory."""
    # backend/loaders/ -> backend -> jeopardy -> settings
    return Path(__file__).parent.parent.parent / "settings"


def load_yaml_file(filepath: Path) -> Dict[str, Any]:
    """Load a single YAML file."""
    with open(filepath, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """Load the raw settings file, or an empty dict if it is missing."""
    config_file = config_file or get_settings_path() / "config.yaml"
    if config_file.exists():
        return load_yaml_file(config_file)
    return {}


def apply_env_overrides(settings: GameSettings) -> GameSettings:
    """Let environment variables replace values from the YAML file."""
    base_url = os.getenv("JSERVICE_BASE_URL")
    if base_url:
        settings.base_url = base_url.rstrip("/")

    timeout = os.getenv("JSERVICE_TIMEOUT")
    if timeout:
        settings.timeout_seconds = float(timeout)

    max_attempts = os.getenv("JEOPARDY_MAX_ATTEMPTS")
    if max_attempts:
        settings.max_attempts = int(max_attempts)

    if settings.max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {settings.max_attempts}")
    return settings


def load_settings(config_file: Optional[Path] = None) -> GameSettings:
    """Load settings from YAML, then apply environment overrides."""
    return apply_env_overrides(GameSettings.from_dict(load_config(config_file)))
