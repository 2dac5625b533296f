from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Iterable, Sequence

from settings import get_settings

_DEFAULT_EXTRA_KEYS = (
    "station_id",
    "reason",
    "air_temperature",
    "dew_point_temperature",
    "wind_speed",
    "total_rain",
)

_configured = False


class ContextualFormatter(logging.Formatter):
    """Appends ``key=value`` pairs for measurement context passed via ``extra``."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _DEFAULT_EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{key}={getattr(record, key)}"
            for key in self._extra_keys
            if getattr(record, key, None) is not None
        ]
        if not context:
            return message
        return f"{message} | {' '.join(context)}"


def _handler_config(level: str | int, extra_keys: Sequence[str]) -> dict:
    formatter = {
        "()": f"{__name__}.ContextualFormatter",
        "fmt": "%(asctime)sZ | %(levelname)s | %(name)s | %(message)s",
        "datefmt": "%Y-%m-%dT%H:%M:%S",
        "extra_keys": list(extra_keys),
    }
    handler = {"class": "logging.StreamHandler", "level": level, "formatter": "contextual"}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"contextual": formatter},
        "handlers": {"default": handler},
        "root": {"handlers": ["default"], "level": level},
    }


def configure_logging(level: str | int | None = None) -> None:
    """Install the station-wide stream handler once per process.

    Called by ``services.reporter.build_default_reporter``; code embedding
    readings without the default reporter calls it directly at startup.
    """
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level
    dictConfig(_handler_config(log_level, _DEFAULT_EXTRA_KEYS))
    _configured = True
