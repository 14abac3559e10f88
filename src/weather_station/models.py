#!/usr/bin/env python3
"""
Module: models
Created: 2026-10-19T17:40:00+01:00
Project: weather_station
Template: pydantic models
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WeatherQuery(BaseModel):
    """One city/country lookup typed in by the user"""
    model_config = ConfigDict(frozen=True)

    city: str
    country_code: str

    @field_validator('city', 'country_code')
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()

    @property
    def q(self) -> str:
        """Value for the OpenWeatherMap `q` parameter"""
        return f"{self.city},{self.country_code}"


class WeatherReport(BaseModel):
    """Flat, display-ready result of one successful lookup"""
    model_config = ConfigDict(frozen=True)

    location_name: str
    condition_description: str
    temperature_celsius: float
    humidity_percent: float
    pressure_hpa: float
    wind_speed_mps: float


# Response models mirror the JSON returned by /data/2.5/weather.
# Unknown keys (coord, sys, clouds, ...) are ignored; known keys must
# already have the JSON type (no "21.5" -> 21.5 or true -> 1.0 coercion).
RESPONSE_CONFIG = ConfigDict(strict=True)


class WeatherCondition(BaseModel):
    model_config = RESPONSE_CONFIG

    description: str


class MainReadings(BaseModel):
    model_config = RESPONSE_CONFIG

    temp: float  # deg C with units=metric
    humidity: float
    pressure: float  # hPa


class WindReadings(BaseModel):
    model_config = RESPONSE_CONFIG

    speed: float  # m/s with units=metric


class CurrentWeatherResponse(BaseModel):
    """
    Decoded current-weather payload.
    Validation fails as a whole if any required field is missing,
    so a partial report can never be built.
    """
    model_config = RESPONSE_CONFIG

    weather: List[WeatherCondition] = Field(..., min_length=1)
    main: MainReadings
    wind: WindReadings
    name: str

    def to_report(self) -> WeatherReport:
        return WeatherReport(
            location_name=self.name,
            condition_description=self.weather[0].description,
            temperature_celsius=self.main.temp,
            humidity_percent=self.main.humidity,
            pressure_hpa=self.main.pressure,
            wind_speed_mps=self.wind.speed,
        )
