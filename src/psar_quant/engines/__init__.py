from __future__ import annotations

from psar_quant.engines.errors import (
    InsufficientDataError,
    ParameterRangeError,
    QuoteValidationError,
    SarEngineError,
)
from psar_quant.engines.types import Bar, ParabolicSarResult, SarParameters, to_decimal

__all__ = [
    "Bar",
    "InsufficientDataError",
    "ParabolicSarResult",
    "ParameterRangeError",
    "QuoteValidationError",
    "SarEngineError",
    "SarParameters",
    "to_decimal",
]
