"""
Parabolic SAR Frame Builder

Runs the Parabolic SAR engine over a single OHLC price frame:
- timestamp / high / low columns (or a timestamp index) in
- timestamp / sar / is_reversal columns out

Rows before the first confirmed reversal carry NaN / <NA>.
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from psar_quant.common.quotes import bars_from_frame, results_to_frame, sort_quotes, validate_quotes
from psar_quant.engines.types import DEFAULT_ACCELERATION_STEP, DEFAULT_MAX_ACCELERATION_FACTOR
from psar_quant.indicators.parabolic_sar import get_parabolic_sar, remove_warmup_periods

logger = logging.getLogger(__name__)


def build_parabolic_sar_frame(
    price_df: pd.DataFrame,
    acceleration_step: Any = DEFAULT_ACCELERATION_STEP,
    max_acceleration_factor: Any = DEFAULT_MAX_ACCELERATION_FACTOR,
    initial_step: Any = None,
    *,
    timestamp_column: str | None = None,
    sort: bool = True,
    remove_warmup: bool = False,
) -> pd.DataFrame:
    """
    Build a Parabolic SAR frame.

    Args:
        price_df: OHLC prices for one instrument
        acceleration_step: AF increment (default 0.02)
        max_acceleration_factor: AF ceiling (default 0.2)
        initial_step: AF at the start of each leg (default: acceleration_step)
        timestamp_column: Explicit timestamp column, otherwise auto-detected
        sort: Sort bars by timestamp before computing
        remove_warmup: Drop rows before the first established SAR

    Returns:
        DataFrame with columns timestamp, sar, is_reversal
    """
    bars = bars_from_frame(price_df, timestamp_column=timestamp_column)
    if sort:
        bars = sort_quotes(bars)
    bars = validate_quotes(bars)

    results = get_parabolic_sar(bars, acceleration_step, max_acceleration_factor, initial_step)
    if remove_warmup:
        results = remove_warmup_periods(results)

    frame = results_to_frame(results)

    established = int(frame["sar"].notna().sum())
    reversals = int(frame["is_reversal"].fillna(False).sum())
    coverage = established / len(bars) if bars else 0.0
    logger.info(
        "Parabolic SAR frame: %d bars, %d established (%.1f%%), %d reversals",
        len(bars),
        established,
        coverage * 100,
        reversals,
        extra={"bars": len(bars), "established": established, "reversals": reversals},
    )
    return frame
