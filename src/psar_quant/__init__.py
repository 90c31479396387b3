"""
PSAR Quant - Parabolic SAR (Stop and Reverse) indicator library.

Computes Wilder's Parabolic SAR over chronologically ordered price bars with
exact decimal arithmetic, plus quote, DataFrame and preset helpers around it.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "PSAR Quant Team"

# =============================================================================
# CORE
# =============================================================================

from .engines.errors import (
    InsufficientDataError,
    ParameterRangeError,
    QuoteValidationError,
    SarEngineError,
)
from .engines.types import Bar, ParabolicSarResult, SarParameters
from .indicators.parabolic_sar import (
    get_parabolic_sar,
    remove_warmup_periods,
    validate_parabolic_sar,
)

# =============================================================================
# QUOTES, FRAMES & PRESETS
# =============================================================================

from .common.config_manager import ConfigError, get_preset, list_presets, load_presets
from .common.quotes import (
    bars_from_frame,
    remove_periods,
    results_to_frame,
    sort_quotes,
    to_bar,
    validate_quotes,
)
from .signals.parabolic_sar_signals import build_parabolic_sar_frame

# =============================================================================
# PUBLIC API
# =============================================================================

__all__ = [
    # Version
    "__version__",
    # Core
    "Bar",
    "ParabolicSarResult",
    "SarParameters",
    "get_parabolic_sar",
    "remove_warmup_periods",
    "validate_parabolic_sar",
    # Errors
    "SarEngineError",
    "ParameterRangeError",
    "InsufficientDataError",
    "QuoteValidationError",
    "ConfigError",
    # Quotes & frames
    "bars_from_frame",
    "build_parabolic_sar_frame",
    "remove_periods",
    "results_to_frame",
    "sort_quotes",
    "to_bar",
    "validate_quotes",
    # Presets
    "get_preset",
    "list_presets",
    "load_presets",
]
