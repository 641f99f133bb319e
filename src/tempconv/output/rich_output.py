from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from tempconv.models.temperature import TemperatureUnit

if TYPE_CHECKING:
    from rich.console import Console

    from tempconv.models.temperature import ConversionError, ConversionResult


class RichOutput:
    """Rich-based terminal output helpers for *tempconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion results
    # ------------------------------------------------------------------

    def conversion_result(
        self,
        result: ConversionResult,
        *,
        source_value: str,
        source_unit: TemperatureUnit,
    ) -> None:
        """Print a table with one row per scale, highlighting *source_unit*."""
        caption = f"{escape(source_value)} {source_unit.symbol} converted to all scales"
        table = Table(title="Conversion Results", caption=caption)
        table.add_column("Scale", style="bold")
        table.add_column("Value", justify="right")

        for unit in TemperatureUnit:
            value = f"{result.value_in(unit)}{_suffix(unit)}"
            if unit is source_unit:
                table.add_row(f"[cyan]{unit.label}[/cyan]", f"[bold cyan]{value}[/bold cyan]")
            else:
                table.add_row(unit.label, value)

        self._con.print(table)

    def conversion_error(self, error: ConversionError) -> None:
        """Print a rejected conversion with the offending input."""
        self.error(error.message)
        detail = f"{error.code.value}: {escape(repr(error.value))} ({error.unit.label})"
        self._con.print(f"[dim]{detail}[/dim]")

    # ------------------------------------------------------------------
    # Unit listing
    # ------------------------------------------------------------------

    def unit_list(self) -> None:
        """Print supported scales with their symbols and lower bounds."""
        table = Table(title="Temperature Units")
        table.add_column("Unit", style="cyan")
        table.add_column("Symbol")
        table.add_column("Absolute zero", justify="right")

        for unit in TemperatureUnit:
            table.add_row(unit.value, unit.symbol, f"{unit.absolute_zero}{_suffix(unit)}")

        self._con.print(table)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)


def _suffix(unit: TemperatureUnit) -> str:
    # Kelvin is written with a space ("273.15 K"), degree scales without.
    return f" {unit.symbol}" if unit is TemperatureUnit.KELVIN else unit.symbol
