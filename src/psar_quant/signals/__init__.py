"""
PSAR Quant Signal Builders.

DataFrame-level wrappers around the indicator engine.
"""

from __future__ import annotations

from .parabolic_sar_signals import build_parabolic_sar_frame

__all__ = ["build_parabolic_sar_frame"]
