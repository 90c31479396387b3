"""Unit tests for the Parabolic SAR frame builder."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from psar_quant.engines.errors import ParameterRangeError, QuoteValidationError
from psar_quant.indicators.parabolic_sar import get_parabolic_sar
from psar_quant.signals.parabolic_sar_signals import build_parabolic_sar_frame


def test_frame_matches_engine(sample_prices_df: pd.DataFrame, sample_bars) -> None:
    frame = build_parabolic_sar_frame(sample_prices_df)
    expected = get_parabolic_sar(sample_bars)

    assert len(frame) == len(sample_prices_df)
    assert list(frame["timestamp"]) == list(sample_prices_df["date"])
    for row, result in zip(frame.itertuples(index=False), expected):
        if result.sar is None:
            assert np.isnan(row.sar)
            assert pd.isna(row.is_reversal)
        else:
            assert row.sar == pytest.approx(float(result.sar))
            assert bool(row.is_reversal) is result.is_reversal


def test_unsorted_frame_is_sorted(sample_prices_df: pd.DataFrame) -> None:
    shuffled = sample_prices_df.sample(frac=1.0, random_state=7)

    frame = build_parabolic_sar_frame(shuffled)

    assert frame["timestamp"].is_monotonic_increasing
    pd.testing.assert_frame_equal(frame, build_parabolic_sar_frame(sample_prices_df))


def test_remove_warmup(sample_prices_df: pd.DataFrame) -> None:
    full = build_parabolic_sar_frame(sample_prices_df)
    trimmed = build_parabolic_sar_frame(sample_prices_df, remove_warmup=True)

    first_valid = int(full["sar"].notna().to_numpy().argmax())
    assert len(trimmed) == len(full) - first_valid
    assert trimmed["sar"].notna().all()


def test_extended_parameters_change_output(sample_prices_df: pd.DataFrame) -> None:
    standard = build_parabolic_sar_frame(sample_prices_df)
    extended = build_parabolic_sar_frame(sample_prices_df, 0.02, 0.2, 0.01)

    assert not standard["sar"].equals(extended["sar"])


def test_duplicate_timestamps_rejected(sample_prices_df: pd.DataFrame) -> None:
    duplicated = pd.concat([sample_prices_df, sample_prices_df.tail(1)], ignore_index=True)

    with pytest.raises(QuoteValidationError):
        build_parabolic_sar_frame(duplicated)


def test_invalid_parameters_propagate(sample_prices_df: pd.DataFrame) -> None:
    with pytest.raises(ParameterRangeError):
        build_parabolic_sar_frame(sample_prices_df, acceleration_step=0)


def test_logs_coverage(sample_prices_df: pd.DataFrame, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="psar_quant.signals.parabolic_sar_signals"):
        build_parabolic_sar_frame(sample_prices_df)

    assert any("Parabolic SAR frame: 252 bars" in message for message in caplog.messages)
