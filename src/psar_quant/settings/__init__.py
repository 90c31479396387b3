from .environment import parse_env_bool, parse_env_choice, parse_env_decimal, parse_env_str
from .settings import LOG_LEVELS, SarSettings, load_settings

__all__ = [
    "LOG_LEVELS",
    "SarSettings",
    "load_settings",
    "parse_env_bool",
    "parse_env_choice",
    "parse_env_decimal",
    "parse_env_str",
]
