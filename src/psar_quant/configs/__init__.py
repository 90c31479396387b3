"""
PSAR Quant Parameter Presets.

Built-in presets live in ``parabolic_sar.py``; load them through
``psar_quant.common.config_manager``.
"""
