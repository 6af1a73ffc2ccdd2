"""User settings model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Persisted user configuration: the location to query and the API key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location: str = ""
    api_key: str = Field(default="", alias="apiKey", repr=False)

    @property
    def is_complete(self) -> bool:
        """True when both fields are filled in and a fetch may be attempted."""
        return bool(self.location.strip() and self.api_key.strip())
