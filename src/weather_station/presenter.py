#!/usr/bin/env python3
"""
Module: presenter
Created: 2026-10-19T18:05:41+01:00
Project: weather_station
Template: script
"""
from rich.text import Text

from weather_station.models import WeatherReport

COLD_ICON = "❄️"
MILD_ICON = "⛅"
WARM_ICON = "🌤️"
HOT_ICON = "🔥"

DEFAULT_COLOR = "none"

# Exact, case-sensitive condition phrases -> rich style
CONDITION_COLORS = {
    "clear sky": "bright_yellow",
    "few clouds": "bright_blue",
    "scattered clouds": "bright_blue",
    "broken clouds": "bright_blue",
    "overcast clouds": "dim",
    "mist": "dim",
    "haze": "dim",
    "smoke": "dim",
    "sand": "dim",
    "dust": "dim",
    "fog": "dim",
    "squalls": "dim",
    "shower rain": "bright_cyan",
    "rain": "bright_cyan",
    "thunderstorm": "bright_cyan",
    "snow": "bright_cyan",
}

REPORT_TEMPLATE = (
    "Weather in {name}: {description} {icon}\n"
    "    > Temperature: {temperature:.1f} °C,\n"
    "    > Humidity: {humidity:.1f}%,\n"
    "    > Pressure: {pressure:.1f} hPa,\n"
    "    > Wind Speed: {wind_speed:.1f} m/s"
)


def temperature_icon(celsius: float) -> str:
    """Icon for a temperature in °C"""
    # Below zero and 0-10 are separate bands that share the cold icon
    if celsius < 0.0:
        return COLD_ICON
    elif celsius < 10.0:
        return COLD_ICON
    elif celsius < 20.0:
        return MILD_ICON
    elif celsius < 30.0:
        return WARM_ICON
    else:
        return HOT_ICON


def condition_color(description: str) -> str:
    """Style for a condition phrase; unknown phrases get the default style"""
    return CONDITION_COLORS.get(description, DEFAULT_COLOR)


def format_report(report: WeatherReport) -> str:
    return REPORT_TEMPLATE.format(
        name=report.location_name,
        description=report.condition_description,
        icon=temperature_icon(report.temperature_celsius),
        temperature=report.temperature_celsius,
        humidity=report.humidity_percent,
        pressure=report.pressure_hpa,
        wind_speed=report.wind_speed_mps,
    )


def render_report(report: WeatherReport) -> Text:
    """
    Formatted report coloured by its condition.
    Built as a Text object so API strings are never parsed as markup.
    """
    return Text(format_report(report), style=condition_color(report.condition_description))
