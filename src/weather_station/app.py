#!/usr/bin/env python3
"""
Module: app
Created: 2026-10-19T18:20:03+01:00
Project: weather_station
Template: script
"""
import logging
import sys
from typing import Callable, Optional

from rich.console import Console

from weather_station.clients.environconfig import EnvironmentConfig, MissingCredentialError
from weather_station.clients.weather_client import WeatherFetchError, fetch_weather
from weather_station.models import WeatherReport
from weather_station.presenter import render_report

logger = logging.getLogger(__name__)

BANNER = "Welcome to Weather Station!"
CITY_PROMPT = "Please enter the name of the city:"
COUNTRY_PROMPT = "Please enter the country code (e.g., US for United States):"
CONTINUE_PROMPT = "Do you want to search for weather in another city? (yes/no):"
FAREWELL = "Thank you for using Weather Station!"

FetchFn = Callable[[str, str, str], WeatherReport]


def configure_logging(level: str = 'WARNING') -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _ask(console: Console, prompt: str, read_line: Callable[[], str]) -> Optional[str]:
    """Print a prompt and read one trimmed line; None at end of input"""
    console.print(prompt, style="bright_green", markup=False, highlight=False)
    try:
        return read_line().strip()
    except EOFError:
        return None


def run(api_key: str, *, console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        read_line: Callable[[], str] = input,
        fetch: FetchFn = fetch_weather) -> int:
    """
    Interactive loop: city, country, report, "another one?".
    Only an exact "yes" (any case, surrounding spaces ignored) keeps going.
    Returns the number of lookups made.
    """
    console = console or Console()
    error_console = error_console or Console(stderr=True)

    console.print(BANNER, style="bright_yellow", markup=False, highlight=False)

    queries = 0
    while True:
        city = _ask(console, CITY_PROMPT, read_line)
        if city is None:
            break
        country_code = _ask(console, COUNTRY_PROMPT, read_line)
        if country_code is None:
            break

        queries += 1
        try:
            report = fetch(city, country_code, api_key)
        except WeatherFetchError as e:
            logger.info("Lookup for %s,%s failed: %s", city, country_code, e)
            error_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        else:
            console.print(render_report(report))

        answer = _ask(console, CONTINUE_PROMPT, read_line)
        if answer is None or answer.lower() != 'yes':
            break

    console.print(FAREWELL, markup=False, highlight=False)
    return queries


def main() -> None:
    try:
        config = EnvironmentConfig()
    except MissingCredentialError as e:
        Console(stderr=True).print(str(e), style="bold red", markup=False, highlight=False)
        sys.exit(1)

    configure_logging(config.log_level)
    logger.debug("Loaded %r", config)

    try:
        run(config.openweather_key)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
