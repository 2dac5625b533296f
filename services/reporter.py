"""Builds report payloads from weather readings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, List, Optional

from models.records import Reading
from models.reports import ReadingReport
from logging_config import configure_logging
from settings import get_settings

logger = logging.getLogger(__name__)


class ReadingReporter:
    """Pure reporting component that can be unit tested in isolation."""

    def __init__(self, station_id: str) -> None:
        self.station_id = station_id

    def build(self, reading: Reading) -> ReadingReport:
        report = ReadingReport(
            station_id=self.station_id,
            temperature=reading.temperature(),
            dew_point=reading.dew_point(),
            wind_speed=reading.wind_speed_value(),
            total_rain=reading.total_rain_value(),
            relative_humidity=reading.relative_humidity(),
            heat_index=reading.heat_index(),
            wind_chill=reading.wind_chill(),
            summary=str(reading),
        )
        logger.debug("Built reading report", extra={"station_id": self.station_id})
        return report

    def build_many(self, readings: Iterable[Reading]) -> List[ReadingReport]:
        return [self.build(reading) for reading in readings]


@lru_cache
def build_default_reporter(station_id: Optional[str] = None) -> ReadingReporter:
    """Factory that wires the reporter and logging with configured defaults."""
    configure_logging()
    return ReadingReporter(station_id=station_id or get_settings().station_id)
