"""Pydantic schemas for the reading report layer."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReadingReport(BaseModel):
    """Rounded view of a reading together with its derived metrics."""

    station_id: str = Field(..., description="Label of the station that produced the reading.")
    temperature: int
    dew_point: int
    wind_speed: int = Field(..., ge=0)
    total_rain: int = Field(..., ge=0)
    relative_humidity: int = Field(
        ..., description="Percent; not clamped, may exceed 100 near the dew point boundary."
    )
    heat_index: int
    wind_chill: int
    summary: str
