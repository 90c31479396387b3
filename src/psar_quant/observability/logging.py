"""
Logging setup for the ``psar_quant`` package.

Only the package logger is configured and it does not propagate, so the root
logger keeps its level and handlers. Console output goes to stderr so that
``psar-quant compute`` can stream CSV on stdout.

Records may carry SAR run statistics through ``extra=``; the JSON formatter
copies the ones listed in ``SAR_FIELDS`` into the payload::

    logger.info("frame done", extra={"bars": 252, "reversals": 14})
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from psar_quant.settings import SarSettings

PACKAGE_LOGGER = "psar_quant"
SAR_FIELDS = ("command", "preset", "bars", "established", "reversals")

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line, with any SAR run statistics attached to the record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in SAR_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    level: str = "INFO",
    *,
    json_format: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Attach stderr (and optionally rotating file) handlers to the package logger."""
    formatter = "json" if json_format else "text"
    handlers: dict[str, dict[str, Any]] = {
        "stderr": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
            "formatter": formatter,
        }
    }
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": str(path),
            "maxBytes": LOG_FILE_MAX_BYTES,
            "backupCount": LOG_FILE_BACKUPS,
            "formatter": formatter,
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonLogFormatter},
                "text": {"format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s"},
            },
            "handlers": handlers,
            "loggers": {
                PACKAGE_LOGGER: {
                    "level": level.upper(),
                    "handlers": list(handlers),
                    "propagate": False,
                }
            },
        }
    )
    return logging.getLogger(PACKAGE_LOGGER)


def configure_from_settings(settings: "SarSettings", level: str | None = None) -> logging.Logger:
    """Apply ``PSAR_LOG_*`` settings; ``level`` (e.g. a ``--log-level`` flag) wins."""
    return configure_logging(
        level or settings.log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )
