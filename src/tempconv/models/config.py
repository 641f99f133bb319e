from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tempconv.models.temperature import TemperatureUnit


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    default_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    output_format: str | None = None

    @field_validator("default_unit", mode="before")
    @classmethod
    def _parse_unit(cls, v: object) -> object:
        if isinstance(v, str):
            return TemperatureUnit.parse(v)
        return v
