"""
Lenient parsing of ``PSAR_*`` environment variables.

A missing or blank variable yields the default silently. A value that is set
but unusable also yields the default, with a warning naming the variable, so a
typo in the environment never stops an indicator run.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Collection, Mapping
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"1", "true", "yes", "on", "y"})
FALSE_VALUES = frozenset({"0", "false", "no", "off", "n"})


def _raw(name: str, environ: Mapping[str, str] | None) -> str:
    source = os.environ if environ is None else environ
    return str(source.get(name) or "").strip()


def _rejected(name: str, raw: str, default: object) -> None:
    logger.warning("Ignoring %s=%r; using %r", name, raw, default)


def parse_env_str(name: str, default: str = "", *, environ: Mapping[str, str] | None = None) -> str:
    return _raw(name, environ) or default


def parse_env_bool(
    name: str,
    default: bool = False,
    *,
    environ: Mapping[str, str] | None = None,
) -> bool:
    raw = _raw(name, environ)
    if not raw:
        return default
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    _rejected(name, raw, default)
    return default


def parse_env_choice(
    name: str,
    default: str,
    choices: Collection[str],
    *,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Upper-cased value when it is one of ``choices`` (e.g. log level names)."""
    raw = _raw(name, environ)
    if not raw:
        return default
    if raw.upper() in choices:
        return raw.upper()
    _rejected(name, raw, default)
    return default


def parse_env_decimal(
    name: str,
    default: Decimal | None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Decimal | None:
    """Finite decimal value; NaN and Infinity count as unusable."""
    raw = _raw(name, environ)
    if not raw:
        return default
    try:
        parsed = Decimal(raw)
    except InvalidOperation:
        parsed = None
    if parsed is None or not parsed.is_finite():
        _rejected(name, raw, default)
        return default
    return parsed
