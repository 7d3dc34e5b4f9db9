"""Logging helpers and structured JSON formatter for the exchange rates client."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from exchange_rates.config import ExchangeRatesConfig

PACKAGE_LOGGER = "exchange_rates"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_STANDARD_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JSONLogFormatter(logging.Formatter):
    """Render each record as one compact JSON object.

    Values passed through ``extra=`` become top-level keys; anything the
    ``json`` module cannot encode natively is written as its ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            document["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            document["stack"] = record.stack_info

        document.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_FIELDS and not key.startswith("_")
        )
        return json.dumps(document, default=str, separators=(",", ":"))


def setup_logging(config: ExchangeRatesConfig) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    The root logger is left alone so host applications keep control of it.
    Calling this again replaces the handler instead of stacking another one.
    """

    level = _level_from_name(config.log_level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if config.log_json_enabled:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.log_format or DEFAULT_LOG_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for stale in list(package_logger.handlers):
        package_logger.removeHandler(stale)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


def provider_log_extra(
    *,
    provider: str,
    path: str,
    event: str,
    status: str,
    duration_ms: float | None,
    base: str | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "event": event,
        "provider": provider,
        "path": path,
        "base": base,
        "status": status,
        "duration_ms": round(duration_ms, 3) if duration_ms is not None else None,
    }
    if error:
        payload["error"] = error
    return {key: value for key, value in payload.items() if value is not None}


def _level_from_name(name: str | int | None) -> int:
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO
