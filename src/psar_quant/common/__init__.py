"""
PSAR Quant Common Utilities.

Quote handling and preset configuration shared by the engine, signals and CLI.
"""

from __future__ import annotations

from .config_manager import ConfigError, get_preset, list_presets, load_presets
from .quotes import (
    bars_from_frame,
    remove_periods,
    results_to_frame,
    sort_quotes,
    to_bar,
    validate_quotes,
)

__all__ = [
    "ConfigError",
    "bars_from_frame",
    "get_preset",
    "list_presets",
    "load_presets",
    "remove_periods",
    "results_to_frame",
    "sort_quotes",
    "to_bar",
    "validate_quotes",
]
