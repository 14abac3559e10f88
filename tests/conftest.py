"""Pytest configuration and fixtures for weather_station tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

TEST_API_KEY = "test-key-0123456789"


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests Session."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def paris_payload() -> dict[str, Any]:
    """Current-weather body as OpenWeatherMap returns it (trimmed)."""
    return {
        "coord": {"lon": 2.3488, "lat": 48.8534},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "base": "stations",
        "main": {
            "temp": 21.34,
            "feels_like": 20.9,
            "pressure": 1013.2,
            "humidity": 55.0,
        },
        "wind": {"speed": 3.6, "deg": 240},
        "sys": {"country": "FR"},
        "name": "Paris",
        "cod": 200,
    }


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    reason: str = "OK",
    json_error: bool = False,
) -> MagicMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        reason: HTTP reason phrase
        json_error: Make json() raise as for a non-JSON body

    Returns:
        Configured MagicMock response
    """
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.reason = reason

    if json_error:
        response.json.side_effect = requests.exceptions.JSONDecodeError(
            "Expecting value", "<html>", 0
        )
    else:
        response.json.return_value = json_data

    return response


@pytest.fixture
def make_response():
    return create_mock_response
