"""Value types shared by the Parabolic SAR engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

DEFAULT_ACCELERATION_STEP = Decimal("0.02")
DEFAULT_MAX_ACCELERATION_FACTOR = Decimal("0.2")


def to_decimal(value: Any) -> Decimal:
    """Coerce a numeric value to ``Decimal`` without binary float artefacts.

    Floats (``numpy.float64`` too) go through ``repr(float(value))``, so
    ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got bool {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(float(value)))
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal") from exc


@dataclass(frozen=True)
class Bar:
    """A single price bar. Only the timestamp and the high/low range are read."""

    timestamp: Any
    high: Decimal
    low: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "high", to_decimal(self.high))
        object.__setattr__(self, "low", to_decimal(self.low))


@dataclass(frozen=True)
class SarParameters:
    acceleration_step: Decimal = DEFAULT_ACCELERATION_STEP
    max_acceleration_factor: Decimal = DEFAULT_MAX_ACCELERATION_FACTOR
    initial_step: Optional[Decimal] = None

    def __post_init__(self) -> None:
        step = to_decimal(self.acceleration_step)
        object.__setattr__(self, "acceleration_step", step)
        object.__setattr__(self, "max_acceleration_factor", to_decimal(self.max_acceleration_factor))
        initial = step if self.initial_step is None else to_decimal(self.initial_step)
        object.__setattr__(self, "initial_step", initial)

    @classmethod
    def standard(cls) -> "SarParameters":
        return cls()

    def as_dict(self) -> dict[str, Decimal]:
        return {
            "acceleration_step": self.acceleration_step,
            "max_acceleration_factor": self.max_acceleration_factor,
            "initial_step": self.initial_step,
        }


@dataclass(frozen=True)
class ParabolicSarResult:
    """Per-bar output. ``sar`` and ``is_reversal`` are None until the trend is confirmed."""

    timestamp: Any
    sar: Optional[Decimal] = None
    is_reversal: Optional[bool] = None

    @property
    def is_established(self) -> bool:
        return self.sar is not None
