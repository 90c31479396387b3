from __future__ import annotations

from typing import Any


class SarEngineError(RuntimeError):
    """Base class for library-level Parabolic SAR errors."""

    code = "ENGINE_ERROR"

    def __init__(self, message: str, *, user_message: str | None = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class ParameterRangeError(SarEngineError, ValueError):
    """Raised when a tuning parameter falls outside its allowed range."""

    code = "PARAMETER_OUT_OF_RANGE"

    def __init__(self, param_name: str, value: Any, message: str) -> None:
        super().__init__(f"{param_name}={value}: {message}", user_message=message)
        self.param_name = param_name
        self.value = value


class InsufficientDataError(SarEngineError):
    code = "INSUFFICIENT_DATA"

    def __init__(self, found: int, required: int, *, indicator: str = "Parabolic SAR") -> None:
        message = (
            f"Insufficient quotes provided for {indicator}.  "
            f"You provided {found} periods of quotes when at least {required} are required."
        )
        super().__init__(message)
        self.found = found
        self.required = required


class QuoteValidationError(SarEngineError):
    code = "BAD_QUOTES"
