#!/usr/bin/env python3
"""
Module: environconfig
Created: 2026-10-19T17:45:12+01:00
Project: weather_station
Template: script
"""
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv  # pip install python-dotenv

API_KEY_VAR = 'OPEN_WEATHER_API_KEY'
LOG_LEVEL_VAR = 'WEATHER_STATION_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'WARNING'


class MissingCredentialError(ValueError):
    """Raised when a required environment variable is not set"""

    def __init__(self, key: str):
        super().__init__(f"Required environment variable {key} is not set")
        self.key = key


class EnvironmentConfig:
    """Configuration from environment variables"""

    def __init__(self, load_env_file: bool = True):
        # Values already in the process environment win over .env
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        self.openweather_key = self._get_required_env(API_KEY_VAR)
        self.log_level = (self._get_optional_env(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()

    def __repr__(self) -> str:
        return f"EnvironmentConfig(openweather_key='***', log_level={self.log_level!r})"

    def _get_required_env(self, key: str) -> str:
        """Get required environment variable"""
        value = os.getenv(key)
        if not value:
            raise MissingCredentialError(key)
        return value

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get optional environment variable"""
        return os.getenv(key)
