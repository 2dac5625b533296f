"""Closed-form meteorological formulas used by weather readings."""

from __future__ import annotations

import math

_HEAT_INDEX_COEFFICIENTS = (
    -8.78469475556,
    1.61139411,
    2.33854883889,
    -0.14611605,
    -0.012308094,
    -0.0164248277778,
    0.002211732,
    0.00072546,
    -0.000003582,
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Non-finite values come from degenerate formula inputs and round to 0.
    """
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        return 0
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def vapor_pressure(temperature: float) -> float:
    return _divide(6.11 * 10 * (7.5 * temperature), 237.3 + temperature)


def relative_humidity_ratio(air_temperature: float, dew_point_temperature: float) -> float:
    """Unrounded relative humidity in percent. Not clamped to [0, 100]."""
    actual = vapor_pressure(dew_point_temperature)
    saturated = vapor_pressure(air_temperature)
    return _divide(actual * 100, saturated)


def heat_index(air_temperature: float, humidity: float) -> float:
    c1, c2, c3, c4, c5, c6, c7, c8, c9 = _HEAT_INDEX_COEFFICIENTS
    t = air_temperature
    r = humidity
    t2 = t * t
    r2 = r * r
    return (
        c1
        + c2 * t
        + c3 * r
        + c4 * t * r
        + c5 * t2
        + c6 * r2
        + c7 * t2 * r
        + c8 * t * r2
        + c9 * t2 * r2
    )


def wind_chill(air_temperature: float, wind_speed: float) -> float:
    """Wind chill in Celsius for a temperature in Celsius and wind in mph."""
    temp_f = (9.0 / 5.0) * air_temperature + 32
    wind_factor = wind_speed ** 0.16
    chill_f = 35.74 + 0.6215 * temp_f - 35.75 * wind_factor + 0.4275 * temp_f * wind_factor
    return (chill_f - 32) * 5.0 / 9.0
