"""
Parabolic SAR Parameter Presets

step / max factor / initial step:
- standard: Wilder's 0.02 / 0.2, initial step equal to the step
- slow_start: same ceiling, half-size first step of each leg
- conservative: slower trailing stop, fewer whipsaws
- aggressive: faster trailing stop, earlier reversals
"""

PRESETS = {
    "standard": {
        "description": "Wilder's defaults",
        "acceleration_step": "0.02",
        "max_acceleration_factor": "0.2",
        "initial_step": "0.02",
    },
    "slow_start": {
        "description": "Standard ceiling with a smaller initial step",
        "acceleration_step": "0.02",
        "max_acceleration_factor": "0.2",
        "initial_step": "0.01",
    },
    "conservative": {
        "description": "Slower acceleration for choppy markets",
        "acceleration_step": "0.01",
        "max_acceleration_factor": "0.1",
        "initial_step": "0.01",
    },
    "aggressive": {
        "description": "Faster acceleration for strongly trending markets",
        "acceleration_step": "0.04",
        "max_acceleration_factor": "0.4",
        "initial_step": "0.04",
    },
}
