"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging

import click

from tempconv._internal.log import configure_logging
from tempconv.errors import ConversionFailedError
from tempconv.models.config import AppSettings
from tempconv.models.temperature import ErrorCode
from tempconv.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    settings: AppSettings = dataclasses.field(default_factory=AppSettings)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else (self.output_format or self.settings.output_format)
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.version_option(package_name="tempconv")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert temperatures between Celsius, Fahrenheit and Kelvin."""
    configure_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from tempconv.cli.convert import convert_cmd
    from tempconv.cli.units import units_cmd

    cli.add_command(convert_cmd)
    cli.add_command(units_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    try:
        rc = cli(args=argv, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort as exc:
        # Click wraps Ctrl-C in Abort
        raise SystemExit(130 if isinstance(exc.__cause__, KeyboardInterrupt) else 1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        # Command errors are reported by global_options; only escapes land here.
        logger.debug("Unhandled error", exc_info=True)
        OutputFormatter().output_error(
            code=type(exc).__name__,
            message=str(exc),
            command="unknown",
        )
        raise SystemExit(1) from exc

    # Non-standalone Click returns ctx.exit() codes instead of raising them
    if isinstance(rc, int) and rc:
        raise SystemExit(rc)


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def get_command_name() -> str:
    """Reconstruct a dotted command name from the Click context chain."""
    ctx = click.get_current_context(silent=True)
    parts: list[str] = []
    while ctx is not None:
        if ctx.info_name and ctx.info_name != "cli":
            parts.append(ctx.info_name)
        ctx = ctx.parent
    return ".".join(reversed(parts)) or "unknown"


def handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Called from :func:`~tempconv.cli._options.global_options` while the Click
    context is active.  Returns ``True`` if the error was handled and the
    command should exit with status 1.
    """
    if isinstance(exc, ConversionFailedError):
        _handle_conversion_failed(exc, formatter, cmd_name)
        return True
    return False


def _handle_conversion_failed(
    exc: ConversionFailedError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    """Show a rejected conversion, with the valid range for the unit."""
    error = exc.error
    if formatter.format == "json":
        formatter.output_error(
            code=error.code.value,
            message=error.message,
            command=cmd_name,
            unit=error.unit.value,
            value=error.value,
        )
        return

    formatter.rich.conversion_error(error)
    if error.code is not ErrorCode.BELOW_ABSOLUTE_ZERO:
        return
    formatter.rich.info("")
    formatter.rich.info(
        f"[dim]Valid {error.unit.label} values start at "
        f"{error.unit.absolute_zero}{error.unit.symbol}.[/dim]"
    )
