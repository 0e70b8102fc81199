"""Greeting and arithmetic CLI commands.

Contents:
    * :func:`cli_greet` - Print ``Hello, {name}!``.
    * :func:`cli_add` - Print the sum of two numbers.
    * :func:`cli_demo` - Print the greeting and the demo sum.
"""

from __future__ import annotations

import logging

import orjson
import rich_click as click

from greetcalc.adapters.config.settings import AppSettings
from greetcalc.adapters.logging.scope import command_scope
from greetcalc.application.usecases import greet, run_demo
from greetcalc.domain.behaviors import Calculator, Number
from greetcalc.domain.enums import OutputFormat
from greetcalc.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode
from ..params import NUMBER

logger = logging.getLogger(__name__)


def _load_settings(cli_ctx: CLIContext) -> AppSettings:
    """Return the parsed settings, exiting with CONFIG_ERROR when invalid."""
    try:
        return cli_ctx.app_settings()
    except ConfigurationError as exc:
        logger.error("Invalid application configuration", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.pass_context
def cli_greet(ctx: click.Context, name: str | None) -> None:
    """Print a greeting for NAME.

    NAME defaults to ``greeting.name`` from the configuration ("World").
    """
    cli_ctx = get_cli_context(ctx)
    if name is None:
        name = _load_settings(cli_ctx).greeting.name

    with command_scope("greet"):
        logger.info("Greeting", extra={"greet_name": name})
        greet(name, emit=click.echo)


def _format_sum(a: Number, b: Number, total: Number, output_format: OutputFormat) -> str:
    """Render the addition result.

    Example:
        >>> _format_sum(5, 10, 15, OutputFormat.HUMAN)
        '15'
        >>> _format_sum(5, 10, 15, OutputFormat.JSON)
        '{"a":5,"b":10,"sum":15}'
    """
    if output_format is OutputFormat.JSON:
        return orjson.dumps({"a": a, "b": b, "sum": total}).decode("utf-8")
    return str(total)


@click.command("add", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (plain sum or JSON object)",
)
def cli_add(a: Number, b: Number, output_format: str) -> None:
    r"""Add two numbers and print the sum.

    Integral operands stay integers. Pass negative numbers after ``--``:

    \b
        greetcalc add -- -3 4
    """
    fmt = OutputFormat(output_format.lower())
    with command_scope("add", format=fmt.value):
        total = Calculator().add(a, b)
        logger.info("Added operands", extra={"a": str(a), "b": str(b), "sum": str(total)})
        click.echo(_format_sum(a, b, total, fmt))


@click.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", type=str, default=None, help="Name to greet (default: greeting.name)")
@click.option("--a", "a", type=NUMBER, default=None, help="First operand (default: demo.a)")
@click.option("--b", "b", type=NUMBER, default=None, help="Second operand (default: demo.b)")
@click.pass_context
def cli_demo(ctx: click.Context, name: str | None, a: Number | None, b: Number | None) -> None:
    """Print a greeting line followed by the sum of two numbers."""
    settings = _load_settings(get_cli_context(ctx))
    effective_name = settings.greeting.name if name is None else name
    effective_a = settings.demo.a if a is None else a
    effective_b = settings.demo.b if b is None else b

    with command_scope("demo"):
        logger.info("Running demo", extra={"greet_name": effective_name, "a": str(effective_a), "b": str(effective_b)})
        run_demo(effective_name, effective_a, effective_b, emit=click.echo)


__all__ = ["cli_add", "cli_demo", "cli_greet"]
