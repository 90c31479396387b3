"""Shared pytest fixtures for psar_quant tests."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from psar_quant.engines.types import Bar


def _bar(ts: object, high: str, low: str) -> Bar:
    return Bar(timestamp=ts, high=high, low=low)


@pytest.fixture
def four_bars() -> list[Bar]:
    """Rise, drift, then a low that breaks the stop on the fourth bar."""
    dates = pd.date_range(start="2024-01-01", periods=4, freq="D")
    rows = [("10", "9"), ("11", "9.5"), ("10.5", "10"), ("9", "8.5")]
    return [_bar(ts, high, low) for ts, (high, low) in zip(dates, rows)]


@pytest.fixture
def eight_bars(four_bars: list[Bar]) -> list[Bar]:
    """``four_bars`` followed by a short downtrend and a reversal back up."""
    dates = pd.date_range(start="2024-01-05", periods=4, freq="D")
    rows = [("8.8", "8"), ("8.5", "7.5"), ("11", "9"), ("12", "10.5")]
    return four_bars + [_bar(ts, high, low) for ts, (high, low) in zip(dates, rows)]


@pytest.fixture
def sample_prices_df() -> pd.DataFrame:
    """Generate a 252-day random-walk OHLC frame."""
    rng = np.random.default_rng(seed=2024)
    dates = pd.date_range(start="2023-01-02", periods=252, freq="B")
    returns = rng.normal(0.0005, 0.02, len(dates))
    close = 50.0 * np.cumprod(1 + returns)
    high = close * rng.uniform(1.000, 1.02, len(dates))
    low = close * rng.uniform(0.98, 1.000, len(dates))

    return pd.DataFrame(
        {
            "date": dates,
            "open": np.round(close * rng.uniform(0.99, 1.01, len(dates)), 4),
            "high": np.round(high, 4),
            "low": np.round(low, 4),
            "close": np.round(close, 4),
        }
    )


@pytest.fixture
def sample_bars(sample_prices_df: pd.DataFrame) -> list[Bar]:
    return [
        Bar(timestamp=row.date, high=str(row.high), low=str(row.low))
        for row in sample_prices_df.itertuples(index=False)
    ]


@pytest.fixture
def restore_package_logger():
    """Undo handler, level and propagation changes made by ``configure_logging``."""
    package = logging.getLogger("psar_quant")
    handlers, level, propagate = list(package.handlers), package.level, package.propagate
    yield package
    for handler in package.handlers:
        if handler not in handlers:
            handler.close()
    package.handlers = handlers
    package.setLevel(level)
    package.propagate = propagate
