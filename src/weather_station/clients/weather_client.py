#!/usr/bin/env python3
"""
Module: weather_client
Created: 2026-10-19T17:52:30+01:00
Project: weather_station
Template: auth (api key in query parameters)
"""
import logging
from typing import Dict, Optional

import requests
from pydantic import ValidationError

from weather_station.models import CurrentWeatherResponse, WeatherQuery, WeatherReport

logger = logging.getLogger(__name__)

BASE_URL = "http://api.openweathermap.org/data/2.5/weather"


class WeatherFetchError(Exception):
    """
    Any failure while fetching or decoding a weather report.
    Network, auth and not-found failures all end up here;
    `status` is set only when the server answered with a non-2xx code.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def _redact(text: str, api_key: str) -> str:
    """Never let the key leak into messages (requests puts the full URL in its errors)"""
    if not api_key:
        return text
    return text.replace(api_key, '***')


class OpenWeatherClient:
    """
    OpenWeatherMap current-weather client.
    The API key travels as the `appid` query parameter.
    """

    def __init__(self, api_key: str, session: Optional[requests.Session] = None,
                 base_url: str = BASE_URL):
        self.api_key = api_key
        self.base_url = base_url
        self.session = session or requests.Session()

    def __repr__(self) -> str:
        return f"OpenWeatherClient(base_url={self.base_url!r})"

    def build_params(self, query: WeatherQuery) -> Dict[str, str]:
        """Query parameters for one lookup; city and country go in verbatim"""
        return {
            'q': query.q,
            'units': 'metric',  # Celsius, m/s
            'appid': self.api_key,
        }

    def build_url(self, query: WeatherQuery) -> str:
        """Full request URL, key redacted - for display and debugging only"""
        prepared = requests.Request('GET', self.base_url, params=self.build_params(query)).prepare()
        return _redact(prepared.url, self.api_key)

    def get_weather_info(self, query: WeatherQuery) -> WeatherReport:
        """One blocking GET; returns a report or raises WeatherFetchError"""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("GET %s", self.build_url(query))

        try:
            response = self.session.get(self.base_url, params=self.build_params(query))
        except requests.RequestException as e:
            raise WeatherFetchError(_redact(str(e), self.api_key)) from e

        logger.debug("Weather service answered %s for %s", response.status_code, query.q)

        if not 200 <= response.status_code < 300:
            raise WeatherFetchError(
                f"HTTP {response.status_code}: {self._error_message(response)}",
                status=response.status_code,
            )

        return self._decode(response)

    def _safe_json(self, response: requests.Response):
        """Try to parse JSON; return None on failure instead of raising."""
        try:
            return response.json()
        except ValueError:
            return None

    def _error_message(self, response: requests.Response) -> str:
        # OpenWeatherMap error bodies look like {"cod": "404", "message": "city not found"}
        body = self._safe_json(response)
        if isinstance(body, dict) and body.get('message'):
            return _redact(str(body['message']), self.api_key)
        return response.reason or 'Unexpected status code'

    def _decode(self, response: requests.Response) -> WeatherReport:
        try:
            data = response.json()
        except ValueError as e:
            raise WeatherFetchError("Weather service returned a non-JSON response") from e

        try:
            parsed = CurrentWeatherResponse.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            location = '.'.join(str(part) for part in first['loc']) or 'response'
            raise WeatherFetchError(
                f"Unexpected response from weather service: {location}: {first['msg']}"
            ) from e

        return parsed.to_report()


def fetch_weather(city: str, country_code: str, api_key: str,
                  session: Optional[requests.Session] = None) -> WeatherReport:
    """
    Fetch the current weather for a city.
    The key is passed in explicitly; nothing is read from globals.
    """
    query = WeatherQuery(city=city, country_code=country_code)
    if session is not None:
        return OpenWeatherClient(api_key, session=session).get_weather_info(query)

    with requests.Session() as own_session:
        return OpenWeatherClient(api_key, session=own_session).get_weather_info(query)
