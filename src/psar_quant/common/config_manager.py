"""
Configuration Manager - PSAR Quant

Parameter presets come from:
1. Python module (psar_quant/configs/parabolic_sar.py) - built-in
2. YAML file - optional, merged over the built-ins

YAML presets override built-ins of the same name.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from psar_quant.configs.parabolic_sar import PRESETS as BUILTIN_PRESETS
from psar_quant.engines.types import SarParameters

logger = logging.getLogger(__name__)

ConfigDict = dict[str, Any]

REQUIRED_PRESET_KEYS = ("acceleration_step", "max_acceleration_factor")


class ConfigError(ValueError):
    """Raised when preset configuration is invalid."""


def _validate_preset(name: str, config: Any) -> ConfigDict:
    if not isinstance(config, dict):
        raise ConfigError(f"Preset '{name}' must be a mapping")
    missing = [key for key in REQUIRED_PRESET_KEYS if config.get(key) is None]
    if missing:
        raise ConfigError(f"Preset '{name}' missing required keys: {missing}")
    return dict(config)


def load_presets(path: str | Path | None = None) -> dict[str, ConfigDict]:
    """
    Load presets, merging an optional YAML file over the built-ins.

    The YAML layout is ``{"presets": {name: {acceleration_step, max_acceleration_factor,
    initial_step}}}``; ``initial_step`` may be omitted.
    """
    presets = deepcopy(BUILTIN_PRESETS)
    if path is None:
        return presets

    yaml_path = Path(path).expanduser()
    try:
        with open(yaml_path, "r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read presets file {yaml_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in presets file {yaml_path}: {exc}") from exc

    if payload is None:
        return presets
    if not isinstance(payload, dict) or not isinstance(payload.get("presets"), dict):
        raise ConfigError(f"Presets file {yaml_path} must contain a 'presets' mapping")

    for name, config in payload["presets"].items():
        presets[str(name)] = _validate_preset(str(name), config)

    logger.debug("Loaded %d presets from %s", len(payload["presets"]), yaml_path)
    return presets


def list_presets(path: str | Path | None = None) -> list[str]:
    return sorted(load_presets(path))


def get_preset(name: str, path: str | Path | None = None) -> SarParameters:
    presets = load_presets(path)
    if name not in presets:
        raise ConfigError(f"Unknown preset '{name}'. Available: {sorted(presets)}")

    config = presets[name]
    try:
        return SarParameters(
            acceleration_step=config["acceleration_step"],
            max_acceleration_factor=config["max_acceleration_factor"],
            initial_step=config.get("initial_step"),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Preset '{name}' has non-numeric parameters: {exc}") from exc
