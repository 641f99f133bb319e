"""Exception hierarchy for exception-style callers of the converter."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tempconv.models.temperature import ConversionError


class TempconvError(Exception):
    """Base class for all tempconv errors."""


class ConversionFailedError(TempconvError):
    """Raised by :func:`~tempconv.converter.convert_or_raise` on a rejected input."""

    def __init__(self, error: ConversionError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> str:
        return self.error.code.value
