from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_STATION_ID_ENV = "WEATHER_STATION_ID"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    station_id: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_log_level(default: str) -> str:
    return _read_str_env(_LOG_LEVEL_ENV, default).upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        station_id=_read_str_env(_STATION_ID_ENV, "stevenson"),
        log_level=_read_log_level("INFO"),
    )
