"""Configuration loader for the parameter adapter."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .keys import DEFAULT_REGISTRY, KeyRegistry, load_extra_keys

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdapterConfig:
    log_level: str = "WARNING"
    extra_keys_path: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdapterConfig":
        extra_keys_path = data.get("extra_keys_path")
        return cls(
            log_level=str(data.get("log_level", "WARNING")).upper(),
            extra_keys_path=Path(extra_keys_path) if extra_keys_path else None,
        )


ENV_MAP = {
    "log_level": "PEARL_PARAMS_LOG_LEVEL",
    "extra_keys_path": "PEARL_PARAMS_EXTRA_KEYS_PATH",
}


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        merged[key] = os.environ[env_name]
        logger.info(f"Config override from {env_name}")

    return merged


def load_config(config_path: str | Path = "config/pearl_params.yml") -> AdapterConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    logger.info(f"Loaded config from {path}")
    return AdapterConfig.from_dict(data)


def build_registry(config: AdapterConfig) -> KeyRegistry:
    """Return the key registry for ``config``, extended with any extra keys file."""
    if config.extra_keys_path is None:
        return DEFAULT_REGISTRY
    return KeyRegistry(load_extra_keys(config.extra_keys_path))
