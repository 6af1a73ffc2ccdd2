"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

import weather_cli._logging as log_mod
from weather_cli.models.settings import Settings

BASE_URL = "https://api.openweathermap.org/data/2.5"


SAMPLE_CURRENT_WEATHER = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"},
    ],
    "base": "stations",
    "main": {
        "temp": 12.5,
        "feels_like": 11.8,
        "temp_min": 10.9,
        "temp_max": 14.0,
        "pressure": 1012,
        "humidity": 81,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 240},
    "clouds": {"all": 75},
    "dt": 1697709600,
    "sys": {
        "type": 2,
        "id": 2075535,
        "country": "GB",
        "sunrise": 1697697000,
        "sunset": 1697735400,
    },
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}

SAMPLE_NOT_FOUND = {"cod": "404", "message": "city not found"}

SAMPLE_BAD_KEY = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def settings() -> Settings:
    return Settings(location="London", api_key="secret-key")


def _close_file_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    """Send the API call log to tmp_path instead of the home directory."""
    named_logger = logging.getLogger(log_mod.LOGGER_NAME)
    _close_file_handlers(named_logger)

    log_file = tmp_path / "logs" / "weather-cli.log"
    monkeypatch.setattr(log_mod, "_log_file", log_file)

    yield log_file

    _close_file_handlers(named_logger)
