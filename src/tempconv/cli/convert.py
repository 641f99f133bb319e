"""CLI command for converting a single temperature."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from tempconv.cli._options import global_options
from tempconv.converter import convert_or_raise, parse_unit

if TYPE_CHECKING:
    from tempconv.cli.main import AppContext
    from tempconv.models.temperature import TemperatureUnit

logger = logging.getLogger(__name__)


class UnitType(click.ParamType):
    """Click parameter accepting unit names and the ``c``/``f``/``k`` aliases."""

    name = "unit"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> TemperatureUnit:
        try:
            return parse_unit(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


# Unknown options are passed through so that negative values such as ``-40``
# reach VALUE instead of being parsed as flags.
@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.option(
    "--unit",
    "-u",
    "unit",
    type=UnitType(),
    default=None,
    help="Unit of VALUE: celsius, fahrenheit, kelvin (or c, f, k)",
)
@global_options
def convert_cmd(app_ctx: AppContext, value: str, unit: TemperatureUnit | None) -> None:
    """Convert VALUE to Celsius, Fahrenheit and Kelvin."""
    source_unit = unit or app_ctx.settings.default_unit
    logger.debug("Converting %r from %s", value, source_unit.value)

    result = convert_or_raise(value, source_unit)
    logger.debug("Converted %r %s -> %s", value, source_unit.value, result)

    formatter = app_ctx.formatter
    if formatter.format == "json":
        formatter.output(result, command="convert")
    else:
        formatter.rich.conversion_result(
            result, source_value=value.strip(), source_unit=source_unit
        )
