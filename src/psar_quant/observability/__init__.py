"""Observability helpers for logging."""

from .logging import JsonLogFormatter, configure_from_settings, configure_logging

__all__ = [
    "JsonLogFormatter",
    "configure_from_settings",
    "configure_logging",
]
