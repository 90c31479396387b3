from __future__ import annotations

from psar_quant.indicators.parabolic_sar import (
    get_parabolic_sar,
    remove_warmup_periods,
    validate_parabolic_sar,
)

__all__ = [
    "get_parabolic_sar",
    "remove_warmup_periods",
    "validate_parabolic_sar",
]
