"""
Parabolic SAR (Stop and Reverse)

Trend-following trailing stop:
- Uptrend: the stop trails below price and accelerates toward the highest high.
- Downtrend: the stop trails above price and accelerates toward the lowest low.
- A bar that breaches the stop flips the trend and resets the acceleration factor.

The first trend direction is a guess (rising), so every result up to and
including the first reversal is discarded once the scan is complete.

Usage:
    from psar_quant.indicators.parabolic_sar import get_parabolic_sar

    results = get_parabolic_sar(bars)                      # standard 0.02 / 0.2
    results = get_parabolic_sar(bars, 0.02, 0.2, 0.01)     # extended, own initial step
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Iterable, Sequence

from psar_quant.common.quotes import remove_periods, to_bar
from psar_quant.engines.errors import InsufficientDataError, ParameterRangeError
from psar_quant.engines.types import (
    DEFAULT_ACCELERATION_STEP,
    DEFAULT_MAX_ACCELERATION_FACTOR,
    Bar,
    ParabolicSarResult,
    SarParameters,
)

logger = logging.getLogger(__name__)

MIN_PERIODS = 2


@dataclass
class _RecurrenceState:
    acceleration_factor: Decimal
    extreme_point: Decimal
    prior_sar: Decimal
    is_rising: bool = True  # initial guess


def get_parabolic_sar(
    bars: Iterable[Any],
    acceleration_step: Any = DEFAULT_ACCELERATION_STEP,
    max_acceleration_factor: Any = DEFAULT_MAX_ACCELERATION_FACTOR,
    initial_step: Any = None,
) -> list[ParabolicSarResult]:
    """
    Calculate Parabolic SAR over chronologically ordered bars.

    Args:
        bars: Bars sorted ascending by timestamp, unique timestamps. Anything
            accepted by ``to_bar`` works; the sequence is not re-sorted.
        acceleration_step: AF increment on each new extreme point (default 0.02)
        max_acceleration_factor: AF ceiling (default 0.2)
        initial_step: AF at the start of every trend leg. Defaults to
            ``acceleration_step``.

    Returns:
        One ParabolicSarResult per bar, in input order. ``sar``/``is_reversal``
        are None through the first reversal.

    Raises:
        ParameterRangeError: a tuning parameter is out of range.
        InsufficientDataError: fewer than two bars.
    """
    params = SarParameters(acceleration_step, max_acceleration_factor, initial_step)
    quotes = [to_bar(bar) for bar in bars]

    validate_parabolic_sar(quotes, params)

    raw = _forward_scan(quotes, params)
    results = _discard_unconfirmed_lead_in(raw)

    established = sum(1 for r in results if r.is_established)
    logger.debug(
        "Parabolic SAR(%s, %s, %s): %d bars, %d established",
        params.acceleration_step,
        params.max_acceleration_factor,
        params.initial_step,
        len(results),
        established,
    )
    return results


def validate_parabolic_sar(quotes: Sequence[Bar], params: SarParameters) -> None:
    """Fail fast on out-of-range parameters or too little history."""
    step = params.acceleration_step
    max_af = params.max_acceleration_factor
    initial = params.initial_step

    if not step.is_finite() or step <= 0:
        raise ParameterRangeError(
            "acceleration_step",
            step,
            "Acceleration Step must be greater than 0 for Parabolic SAR.",
        )

    if not max_af.is_finite() or max_af <= 0:
        raise ParameterRangeError(
            "max_acceleration_factor",
            max_af,
            "Max Acceleration Factor must be greater than 0 for Parabolic SAR.",
        )

    if step > max_af:
        raise ParameterRangeError(
            "acceleration_step",
            step,
            f"Acceleration Step must be smaller than provided Max Acceleration Factor ({max_af}) "
            "for Parabolic SAR.",
        )

    if not initial.is_finite() or initial <= 0 or initial >= max_af:
        raise ParameterRangeError(
            "initial_step",
            initial,
            "Initial Step must be greater than 0 and less than Max Acceleration Factor "
            "for Parabolic SAR.",
        )

    if len(quotes) < MIN_PERIODS:
        raise InsufficientDataError(len(quotes), MIN_PERIODS)


def remove_warmup_periods(results: Sequence[ParabolicSarResult]) -> list[ParabolicSarResult]:
    """Drop the unestablished lead-in, keeping everything from the first non-null SAR."""
    first = next((i for i, r in enumerate(results) if r.sar is not None), None)
    if first is None:
        return []
    return remove_periods(results, first)


def _forward_scan(quotes: Sequence[Bar], params: SarParameters) -> list[ParabolicSarResult]:
    first = quotes[0]
    state = _RecurrenceState(
        acceleration_factor=params.initial_step,
        extreme_point=first.high,
        prior_sar=first.low,
    )

    results = [ParabolicSarResult(timestamp=first.timestamp)]
    for i in range(1, len(quotes)):
        results.append(_advance(state, quotes, i, params))
    return results


def _advance(
    state: _RecurrenceState,
    quotes: Sequence[Bar],
    i: int,
    params: SarParameters,
) -> ParabolicSarResult:
    """Compute bar ``i`` and roll ``state`` forward in place."""
    q = quotes[i]

    if state.is_rising:
        candidate = state.prior_sar + state.acceleration_factor * (
            state.extreme_point - state.prior_sar
        )

        # turn down
        if q.low < candidate:
            sar = state.extreme_point
            is_reversal = True
            state.is_rising = False
            state.acceleration_factor = params.initial_step
            state.extreme_point = q.low

        else:
            is_reversal = False
            sar = candidate

            # SAR cannot be higher than the last two lows
            if i >= 2:
                sar = min(sar, quotes[i - 1].low, quotes[i - 2].low)

            if q.high > state.extreme_point:
                state.extreme_point = q.high
                state.acceleration_factor = min(
                    state.acceleration_factor + params.acceleration_step,
                    params.max_acceleration_factor,
                )

    else:
        candidate = state.prior_sar - state.acceleration_factor * (
            state.prior_sar - state.extreme_point
        )

        # turn up
        if q.high > candidate:
            sar = state.extreme_point
            is_reversal = True
            state.is_rising = True
            state.acceleration_factor = params.initial_step
            state.extreme_point = q.high

        else:
            is_reversal = False
            sar = candidate

            # SAR cannot be lower than the last two highs
            if i >= 2:
                sar = max(sar, quotes[i - 1].high, quotes[i - 2].high)

            if q.low < state.extreme_point:
                state.extreme_point = q.low
                state.acceleration_factor = min(
                    state.acceleration_factor + params.acceleration_step,
                    params.max_acceleration_factor,
                )

    state.prior_sar = sar
    return ParabolicSarResult(timestamp=q.timestamp, sar=sar, is_reversal=is_reversal)


def _discard_unconfirmed_lead_in(
    results: Sequence[ParabolicSarResult],
) -> list[ParabolicSarResult]:
    """Null out everything up to and including the first reversal."""
    cut = next((i for i, r in enumerate(results) if r.is_reversal is True), None)
    if cut is None:
        logger.debug("Parabolic SAR: no reversal found, initial trend guess kept")
        return list(results)

    logger.debug("Parabolic SAR: first reversal at index %d, lead-in discarded", cut)
    cleared = [replace(r, sar=None, is_reversal=None) for r in results[: cut + 1]]
    return cleared + list(results[cut + 1 :])
