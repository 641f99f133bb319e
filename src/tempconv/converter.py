"""Temperature conversion with physical-validity checks.

:func:`convert` is the core operation.  It never raises for bad input and
never logs: failures come back as :class:`ConversionError` values so the
caller decides how to present them.
"""

from __future__ import annotations

import math

from tempconv._internal.units import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    kelvin_to_celsius,
    round2,
)
from tempconv.errors import ConversionFailedError
from tempconv.models.temperature import (
    ConversionError,
    ConversionResult,
    ErrorCode,
    Measurement,
    TemperatureUnit,
)

MSG_EMPTY = "Please enter a temperature value"
MSG_INVALID = "Please enter a valid number"
MSG_KELVIN_NEGATIVE = "Kelvin cannot be negative"
MSG_TOO_LARGE = "Temperature is too large to convert"

_BELOW_ZERO_MESSAGES: dict[TemperatureUnit, str] = {
    TemperatureUnit.KELVIN: MSG_KELVIN_NEGATIVE,
    TemperatureUnit.CELSIUS: "Temperature cannot be below absolute zero (-273.15°C)",
    TemperatureUnit.FAHRENHEIT: "Temperature cannot be below absolute zero (-459.67°F)",
}


def parse_unit(text: str | TemperatureUnit) -> TemperatureUnit:
    """Resolve *text* to a :class:`TemperatureUnit`.

    Raises ``ValueError`` for unknown names; an unknown unit is a usage error,
    not a conversion failure.
    """
    if isinstance(text, TemperatureUnit):
        return text
    return TemperatureUnit.parse(text)


def parse_value(value: str | float, unit: TemperatureUnit) -> float | ConversionError:
    """Return *value* as a finite float, or an ``InvalidNumber`` error."""
    raw = str(value)
    if isinstance(value, bool):
        return _invalid(MSG_INVALID, unit, raw)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return _invalid(MSG_EMPTY, unit, raw)
        try:
            number = float(text)
        except ValueError:
            return _invalid(MSG_INVALID, unit, raw)
    elif isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            return _invalid(MSG_INVALID, unit, raw)
    else:
        return _invalid(MSG_INVALID, unit, raw)

    if not math.isfinite(number):
        return _invalid(MSG_INVALID, unit, raw)
    return number


def validate(measurement: Measurement, raw: str | None = None) -> ConversionError | None:
    """Check *measurement* against its scale's absolute zero.

    *raw* is the caller's original input, reported in the error when given.
    """
    unit = measurement.unit
    if measurement.value < unit.absolute_zero:
        return ConversionError(
            code=ErrorCode.BELOW_ABSOLUTE_ZERO,
            message=_BELOW_ZERO_MESSAGES[unit],
            unit=unit,
            value=raw if raw is not None else repr(measurement.value),
        )
    return None


def to_celsius(measurement: Measurement) -> float:
    """Normalise *measurement* to Celsius without rounding."""
    match measurement.unit:
        case TemperatureUnit.CELSIUS:
            return measurement.value
        case TemperatureUnit.FAHRENHEIT:
            return fahrenheit_to_celsius(measurement.value)
        case TemperatureUnit.KELVIN:
            return kelvin_to_celsius(measurement.value)


def convert_measurement(measurement: Measurement) -> ConversionResult:
    """Express an already validated *measurement* on every scale.

    Raises ``OverflowError`` when a scale cannot represent the value as a
    finite float (e.g. ``1.7e308`` Celsius in Fahrenheit).
    """
    celsius = to_celsius(measurement)
    fahrenheit = celsius_to_fahrenheit(celsius)
    kelvin = celsius_to_kelvin(celsius)
    if not all(math.isfinite(v) for v in (celsius, fahrenheit, kelvin)):
        raise OverflowError(f"{measurement.value!r} {measurement.unit.value} overflows a float")
    return ConversionResult(
        celsius=round2(celsius),
        fahrenheit=round2(fahrenheit),
        kelvin=round2(kelvin),
    )


def convert(
    value: str | float, unit: TemperatureUnit | str
) -> ConversionResult | ConversionError:
    """Convert *value* given in *unit* to Celsius, Fahrenheit and Kelvin.

    Checks run in order and the first failure is returned:

    1. *value* must parse to a finite number (``InvalidNumber``).
    2. It must not lie below absolute zero for *unit* (``BelowAbsoluteZero``).
    3. Every scale must hold it as a finite float (``InvalidNumber``).

    Every output is rounded to two decimals, half away from zero.
    """
    resolved = parse_unit(unit)
    number = parse_value(value, resolved)
    if isinstance(number, ConversionError):
        return number

    measurement = Measurement(value=number, unit=resolved)
    error = validate(measurement, str(value))
    if error is not None:
        return error
    try:
        return convert_measurement(measurement)
    except OverflowError:
        return _invalid(MSG_TOO_LARGE, resolved, str(value))


def convert_or_raise(value: str | float, unit: TemperatureUnit | str) -> ConversionResult:
    """Like :func:`convert` but raises :class:`ConversionFailedError` on failure."""
    result = convert(value, unit)
    if isinstance(result, ConversionError):
        raise ConversionFailedError(result)
    return result


def _invalid(message: str, unit: TemperatureUnit, raw: str) -> ConversionError:
    return ConversionError(code=ErrorCode.INVALID_NUMBER, message=message, unit=unit, value=raw)
