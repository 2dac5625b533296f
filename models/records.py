"""Domain models for weather station readings."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from services import meteorology

logger = logging.getLogger(__name__)


class InvalidMeasurement(ValueError):
    """Raised when a reading is constructed from impossible measurements."""


@runtime_checkable
class WeatherReading(Protocol):
    """Anything exposing the rounded public view of a reading."""

    def temperature(self) -> int: ...

    def dew_point(self) -> int: ...

    def wind_speed_value(self) -> int: ...

    def total_rain_value(self) -> int: ...


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers beyond float range cannot take part in the formulas.
        return False


@dataclass(frozen=True, slots=True, eq=False)
class Reading:
    """A single immutable observation taken at a Stevenson screen station.

    Temperatures are in Celsius, wind speed in miles per hour and rain in
    millimeters accumulated over the last 24 hours. Raw values are stored
    unchanged; the accessors expose them rounded to the nearest integer.
    """

    air_temperature: float
    dew_point_temperature: float
    wind_speed: float
    total_rain: int

    def __post_init__(self) -> None:
        if not all(
            _is_finite(value)
            for value in (
                self.air_temperature,
                self.dew_point_temperature,
                self.wind_speed,
                self.total_rain,
            )
        ):
            self._reject("Measurements must be finite numbers")
        if self.wind_speed < 0 or self.total_rain < 0:
            self._reject("Negative wind speed or rain received are not supported")
        if self.air_temperature < self.dew_point_temperature:
            self._reject("Air temperature should not be lower than dew point temperature")

    def _reject(self, reason: str) -> None:
        logger.debug(
            "Rejected weather measurement",
            extra={
                "reason": reason,
                "air_temperature": self.air_temperature,
                "dew_point_temperature": self.dew_point_temperature,
                "wind_speed": self.wind_speed,
                "total_rain": self.total_rain,
            },
        )
        raise InvalidMeasurement(reason)

    def temperature(self) -> int:
        return meteorology.round_half_away(self.air_temperature)

    def dew_point(self) -> int:
        return meteorology.round_half_away(self.dew_point_temperature)

    def wind_speed_value(self) -> int:
        return meteorology.round_half_away(self.wind_speed)

    def total_rain_value(self) -> int:
        return meteorology.round_half_away(self.total_rain)

    def relative_humidity(self) -> int:
        """Relative humidity in percent, computed from the raw temperatures."""
        return meteorology.round_half_away(
            meteorology.relative_humidity_ratio(self.air_temperature, self.dew_point_temperature)
        )

    def heat_index(self) -> int:
        """Heat index in Celsius, using the unrounded relative humidity."""
        humidity = meteorology.relative_humidity_ratio(
            self.air_temperature, self.dew_point_temperature
        )
        return meteorology.round_half_away(
            meteorology.heat_index(self.air_temperature, humidity)
        )

    def wind_chill(self) -> int:
        return meteorology.round_half_away(
            meteorology.wind_chill(self.air_temperature, self.wind_speed)
        )

    def __str__(self) -> str:
        return (
            f"Reading: T = {self.temperature()}, D = {self.dew_point()}, "
            f"v = {self.wind_speed_value()}, rain = {self.total_rain_value()}"
        )

    def __eq__(self, other: object) -> object:
        if self is other:
            return True
        if not isinstance(other, WeatherReading):
            return NotImplemented
        return (
            self.temperature() == other.temperature()
            and self.dew_point() == other.dew_point()
            and self.wind_speed_value() == other.wind_speed_value()
            and self.total_rain_value() == other.total_rain_value()
        )

    def __hash__(self) -> int:
        # Sum of the rounded view; collisions are expected and kept for compatibility.
        return hash(
            self.temperature()
            + self.dew_point()
            + self.wind_speed_value()
            + self.total_rain_value()
        )
