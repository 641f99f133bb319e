"""Unit conversion helpers shared across the codebase."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

ABSOLUTE_ZERO_C: float = -273.15
ABSOLUTE_ZERO_F: float = -459.67
ABSOLUTE_ZERO_K: float = 0.0

KELVIN_OFFSET: float = 273.15

_HUNDREDTHS = Decimal("0.01")

# Enough digits to quantize any finite float (up to ~1.8e308) to hundredths.
_PRECISION = 400


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius (unrounded)."""
    return (f - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit (unrounded)."""
    return c * 9.0 / 5.0 + 32.0


def kelvin_to_celsius(k: float) -> float:
    """Convert Kelvin to Celsius (unrounded)."""
    return k - KELVIN_OFFSET


def celsius_to_kelvin(c: float) -> float:
    """Convert Celsius to Kelvin (unrounded)."""
    return c + KELVIN_OFFSET


def round2(value: float) -> float:
    """Round *value* to two decimal places, half away from zero.

    Rounding works on the shortest decimal ``repr`` of the float rather than
    its binary expansion, so ``1.005`` becomes ``1.01`` and ``-1.005`` becomes
    ``-1.01``.  Negative zero collapses to ``0.0``; non-finite values are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        rounded = float(Decimal(repr(value)).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))
    return rounded or 0.0
