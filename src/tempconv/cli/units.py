"""CLI command listing the supported temperature units."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tempconv.cli._options import global_options
from tempconv.models.temperature import TemperatureUnit

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext


@click.command("units")
@global_options
def units_cmd(app_ctx: AppContext) -> None:
    """List supported units with their symbols and absolute zero."""
    formatter = app_ctx.formatter
    if formatter.format == "json":
        formatter.output(
            [
                {
                    "unit": unit.value,
                    "symbol": unit.symbol,
                    "label": unit.label,
                    "absolute_zero": unit.absolute_zero,
                }
                for unit in TemperatureUnit
            ],
            command="units",
        )
    else:
        formatter.rich.unit_list()
