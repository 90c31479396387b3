from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence, TypeVar

import numpy as np
import pandas as pd

from psar_quant.engines.errors import QuoteValidationError
from psar_quant.engines.types import Bar, ParabolicSarResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

TIMESTAMP_COLUMNS = ("timestamp", "date", "datetime", "time")
PRICE_COLUMNS = ("high", "low")


def _lookup(source: Any, names: Iterable[str]) -> Any:
    if isinstance(source, Mapping):
        lowered = {str(k).lower(): k for k in source.keys()}
        for name in names:
            if name in lowered:
                return source[lowered[name]]
        return None
    for name in names:
        if hasattr(source, name):
            return getattr(source, name)
    return None


def to_bar(quote: Any) -> Bar:
    """Convert a Bar, mapping, or attribute object with timestamp/high/low into a Bar."""
    if isinstance(quote, Bar):
        return quote

    timestamp = _lookup(quote, TIMESTAMP_COLUMNS)
    high = _lookup(quote, ("high",))
    low = _lookup(quote, ("low",))
    if timestamp is None or high is None or low is None:
        raise QuoteValidationError(
            f"Quote {quote!r} must provide a timestamp (or date), high and low"
        )
    try:
        return Bar(timestamp=timestamp, high=high, low=low)
    except (TypeError, ValueError) as exc:
        raise QuoteValidationError(f"Quote at {timestamp!r} has non-numeric prices") from exc


def sort_quotes(quotes: Iterable[Any]) -> list[Bar]:
    """Return bars sorted ascending by timestamp. The input is left untouched."""
    return sorted((to_bar(q) for q in quotes), key=lambda bar: bar.timestamp)


def validate_quotes(quotes: Iterable[Any]) -> list[Bar]:
    """Convert quotes and reject duplicate timestamps or NaN prices."""
    bars = [to_bar(q) for q in quotes]
    seen: set[Any] = set()
    for bar in bars:
        if bar.high.is_nan() or bar.low.is_nan():
            raise QuoteValidationError(f"Quote at {bar.timestamp!r} has a missing high/low price")
        if bar.timestamp in seen:
            raise QuoteValidationError(f"Duplicate quote timestamp {bar.timestamp!r}")
        seen.add(bar.timestamp)
    return bars


def remove_periods(results: Sequence[T], count: int) -> list[T]:
    """Drop the first ``count`` items."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return list(results)[count:]


def _resolve_column(frame: pd.DataFrame, candidates: Iterable[str]) -> str | None:
    lowered = {str(col).lower(): col for col in frame.columns}
    for name in candidates:
        if name in lowered:
            return lowered[name]
    return None


def _parse_timestamps(values: list[Any], label: str) -> list[Any]:
    # text dates (as read from CSV) must become datetimes to sort chronologically
    if not values or not all(isinstance(v, str) for v in values):
        return values
    try:
        return list(pd.to_datetime(pd.Series(values, dtype=object)))
    except (ValueError, TypeError) as exc:
        raise QuoteValidationError(f"price frame: cannot parse {label} as dates: {exc}") from exc


def bars_from_frame(frame: pd.DataFrame, timestamp_column: str | None = None) -> list[Bar]:
    """
    Build bars from an OHLC DataFrame.

    The timestamp comes from ``timestamp_column`` when given, otherwise from a
    ``timestamp``/``date``/``datetime``/``time`` column, otherwise from the index.
    Column names are matched case-insensitively. Text timestamps are parsed with
    ``pd.to_datetime``.
    """
    high_col = _resolve_column(frame, ("high",))
    low_col = _resolve_column(frame, ("low",))
    missing = [name for name, col in zip(PRICE_COLUMNS, (high_col, low_col)) if col is None]
    if missing:
        raise QuoteValidationError(f"price frame: missing required columns: {missing}")

    if timestamp_column is not None:
        if timestamp_column not in frame.columns:
            raise QuoteValidationError(f"price frame: missing timestamp column {timestamp_column!r}")
        timestamps = _parse_timestamps(frame[timestamp_column].tolist(), repr(timestamp_column))
    else:
        ts_col = _resolve_column(frame, TIMESTAMP_COLUMNS)
        if ts_col is not None:
            timestamps = _parse_timestamps(frame[ts_col].tolist(), repr(ts_col))
        else:
            timestamps = _parse_timestamps(frame.index.tolist(), "index")

    highs = frame[high_col].tolist()
    lows = frame[low_col].tolist()

    bars: list[Bar] = []
    for ts, high, low in zip(timestamps, highs, lows):
        if pd.isna(high) or pd.isna(low):
            raise QuoteValidationError(f"price frame: missing high/low at {ts!r}")
        bars.append(to_bar({"timestamp": ts, "high": high, "low": low}))

    logger.debug("Built %d bars from frame with columns %s", len(bars), list(frame.columns))
    return bars


def results_to_frame(results: Sequence[ParabolicSarResult]) -> pd.DataFrame:
    """Flatten results into a DataFrame (``sar`` as float with NaN, ``is_reversal`` nullable)."""
    return pd.DataFrame(
        {
            "timestamp": [r.timestamp for r in results],
            "sar": np.array(
                [float(r.sar) if r.sar is not None else np.nan for r in results],
                dtype=float,
            ),
            "is_reversal": pd.array([r.is_reversal for r in results], dtype="boolean"),
        }
    )
