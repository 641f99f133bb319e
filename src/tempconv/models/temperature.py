"""Pydantic v2 models for temperature measurements and conversion results."""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator

from tempconv._internal.units import ABSOLUTE_ZERO_C, ABSOLUTE_ZERO_F, ABSOLUTE_ZERO_K

_FROZEN = ConfigDict(frozen=True)


class TemperatureUnit(StrEnum):
    """Supported temperature scales."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @classmethod
    def parse(cls, text: str) -> TemperatureUnit:
        """Parse a unit name case-insensitively; accepts ``c``, ``f`` and ``k``."""
        key = text.strip().lower()
        unit = _ALIASES.get(key)
        if unit is None:
            try:
                unit = cls(key)
            except ValueError:
                choices = ", ".join(u.value for u in cls)
                raise ValueError(
                    f"Unknown temperature unit '{text}' (expected one of: {choices})"
                ) from None
        return unit

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def label(self) -> str:
        """Human label, e.g. ``"Celsius (°C)"``."""
        return f"{self.value.capitalize()} ({self.symbol})"

    @property
    def absolute_zero(self) -> float:
        """Lowest physically valid value on this scale."""
        return _ABSOLUTE_ZERO[self]


_SYMBOLS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.KELVIN: "K",
}

_ALIASES: dict[str, TemperatureUnit] = {
    "c": TemperatureUnit.CELSIUS,
    "f": TemperatureUnit.FAHRENHEIT,
    "k": TemperatureUnit.KELVIN,
}

_ABSOLUTE_ZERO: dict[TemperatureUnit, float] = {
    TemperatureUnit.CELSIUS: ABSOLUTE_ZERO_C,
    TemperatureUnit.FAHRENHEIT: ABSOLUTE_ZERO_F,
    TemperatureUnit.KELVIN: ABSOLUTE_ZERO_K,
}


class ErrorCode(StrEnum):
    """Tags for conversion failures."""

    INVALID_NUMBER = "InvalidNumber"
    BELOW_ABSOLUTE_ZERO = "BelowAbsoluteZero"


class Measurement(BaseModel):
    """A finite temperature value tagged with its unit of origin."""

    model_config = _FROZEN

    value: float
    unit: TemperatureUnit

    @field_validator("value")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("value must be a finite number")
        return v


class ConversionResult(BaseModel):
    """One temperature expressed on every supported scale (2 d.p.)."""

    model_config = _FROZEN

    celsius: float
    fahrenheit: float
    kelvin: float

    def value_in(self, unit: TemperatureUnit) -> float:
        """Return the field matching *unit*."""
        return float(getattr(self, TemperatureUnit(unit).value))


class ConversionError(BaseModel):
    """Tagged error value returned when a conversion is rejected.

    ``value`` holds the caller's raw input rendered as text, so an
    unparseable string is reported verbatim.
    """

    model_config = _FROZEN

    code: ErrorCode
    message: str
    unit: TemperatureUnit
    value: str
