"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import json
from typing import Any

import httpx

from weather_cli.exceptions import (
    WeatherAPIError,
    WeatherConnectionError,
    WeatherFetchError,
    WeatherTimeoutError,
)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
SUCCESS_CODE = "200"


def _provider_message(payload: dict[str, Any], response: httpx.Response, code: Any) -> str:
    """The provider's own message, or something readable when it sent none."""
    message = payload.get("message")
    if isinstance(message, str) and message.strip():
        return message
    if response.is_error and response.reason_phrase:
        return response.reason_phrase
    return f"Weather provider returned code {code}"


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Decode the body and check the provider's ``cod`` field."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise WeatherFetchError(f"Invalid JSON in response: {exc}") from exc

    if not isinstance(payload, dict):
        raise WeatherFetchError("Unexpected response body: expected a JSON object")

    # OpenWeatherMap sends cod as 200 on success and as a string ("404") on errors
    code = payload.get("cod", response.status_code)
    if str(code) != SUCCESS_CODE:
        raise WeatherAPIError(
            status_code=code,
            message=_provider_message(payload, response, code),
        )
    return payload


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        options: dict[str, Any] = {}
        if timeout is not None:
            options["timeout"] = timeout
        self._client = httpx.Client(
            base_url=base_url,
            headers={"Accept": "application/json"},
            **options,
        )

    def get(self, endpoint: str, params: dict[str, str]) -> dict[str, Any]:
        """Perform a GET request and return the decoded JSON object."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise WeatherFetchError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()
