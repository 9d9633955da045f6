"""Dark Sky forecast data models."""

import math
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from weathersms.models.common import from_epoch


class DailySummary(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True, "allow_inf_nan": False}

    summary: str
    temperature_min: float = Field(alias="temperatureMin")
    temperature_max: float = Field(alias="temperatureMax")
    apparent_temperature_min: float = Field(alias="apparentTemperatureMin")
    apparent_temperature_max: float = Field(alias="apparentTemperatureMax")
    precip_probability: float = Field(alias="precipProbability", ge=0.0, le=1.0)
    precip_type: str | None = Field(default=None, alias="precipType")
    sunrise_time: datetime = Field(alias="sunriseTime")
    sunset_time: datetime = Field(alias="sunsetTime")

    @field_validator("sunrise_time", "sunset_time", mode="before")
    @classmethod
    def _parse_epoch(cls, value):
        if isinstance(value, datetime):
            return value
        if not isinstance(value, (int, float, str)):
            raise ValueError("expected Unix epoch seconds")
        return from_epoch(value)

    @property
    def precip_percent(self) -> int:
        """Chance of precipitation as a whole percentage (floored)."""
        return math.floor(self.precip_probability * 100.0)


class HourlyEntry(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True, "allow_inf_nan": False}

    time: datetime
    temperature: float
    icon: str | None = None

    @field_validator("time", mode="before")
    @classmethod
    def _parse_epoch(cls, value):
        if isinstance(value, datetime):
            return value
        if not isinstance(value, (int, float, str)):
            raise ValueError("expected Unix epoch seconds")
        return from_epoch(value)


class Forecast(BaseModel):
    model_config = {"frozen": True}

    daily: DailySummary
    hourly: list[HourlyEntry]
