from __future__ import annotations

from tempconv.models.config import AppSettings
from tempconv.models.temperature import (
    ConversionError,
    ConversionResult,
    ErrorCode,
    Measurement,
    TemperatureUnit,
)

__all__ = [
    # config
    "AppSettings",
    # temperature
    "ConversionError",
    "ConversionResult",
    "ErrorCode",
    "Measurement",
    "TemperatureUnit",
]
