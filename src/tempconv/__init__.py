"""Temperature conversion between Celsius, Fahrenheit and Kelvin."""

from __future__ import annotations

from tempconv.converter import convert, convert_or_raise
from tempconv.errors import ConversionFailedError, TempconvError
from tempconv.models.temperature import (
    ConversionError,
    ConversionResult,
    ErrorCode,
    Measurement,
    TemperatureUnit,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionFailedError",
    "ConversionResult",
    "ErrorCode",
    "Measurement",
    "TempconvError",
    "TemperatureUnit",
    "__version__",
    "convert",
    "convert_or_raise",
]
