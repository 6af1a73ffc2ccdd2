"""Custom exceptions for the weather client."""

from __future__ import annotations


class WeatherError(Exception):
    """Base exception for all weather client errors."""


class WeatherAPIError(WeatherError):
    """Raised when the provider reports a failure (bad location, bad key)."""

    def __init__(self, status_code: int | str, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class WeatherFetchError(WeatherError):
    """Raised when the request or its response body could not be processed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class WeatherConnectionError(WeatherFetchError):
    """Raised when the client cannot connect to the API."""


class WeatherTimeoutError(WeatherFetchError):
    """Raised when a request to the API times out."""


class WeatherValidationError(WeatherFetchError):
    """Raised when API response data fails model validation."""
