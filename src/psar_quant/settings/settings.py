"""Runtime configuration read from the environment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from psar_quant.engines.types import (
    DEFAULT_ACCELERATION_STEP,
    DEFAULT_MAX_ACCELERATION_FACTOR,
    SarParameters,
)

from .environment import parse_env_bool, parse_env_choice, parse_env_decimal, parse_env_str

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SarSettings:
    acceleration_step: Decimal
    max_acceleration_factor: Decimal
    initial_step: Decimal | None
    presets_file: str | None
    log_level: str
    log_json: bool
    log_file: str | None

    @property
    def parameters(self) -> SarParameters:
        return SarParameters(
            acceleration_step=self.acceleration_step,
            max_acceleration_factor=self.max_acceleration_factor,
            initial_step=self.initial_step,
        )

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> "SarSettings":
        return cls(
            acceleration_step=parse_env_decimal(
                "PSAR_ACCELERATION_STEP", DEFAULT_ACCELERATION_STEP, environ=environ
            ),
            max_acceleration_factor=parse_env_decimal(
                "PSAR_MAX_ACCELERATION_FACTOR", DEFAULT_MAX_ACCELERATION_FACTOR, environ=environ
            ),
            initial_step=parse_env_decimal("PSAR_INITIAL_STEP", None, environ=environ),
            presets_file=parse_env_str("PSAR_PRESETS_FILE", "", environ=environ) or None,
            log_level=parse_env_choice("PSAR_LOG_LEVEL", "INFO", LOG_LEVELS, environ=environ),
            log_json=parse_env_bool("PSAR_LOG_JSON", False, environ=environ),
            log_file=parse_env_str("PSAR_LOG_FILE", "", environ=environ) or None,
        )


def load_settings(*, environ: Mapping[str, str] | None = None) -> SarSettings:
    return SarSettings.from_env(environ=environ)
