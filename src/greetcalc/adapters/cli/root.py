"""The ``greetcalc`` command group.

The group callback runs before every subcommand. It builds the services,
loads configuration for ``--profile``, applies ``--set`` overrides, starts
logging and leaves a :class:`~greetcalc.adapters.cli.context.CLIContext` in
``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greetcalc import __init__conf__
from greetcalc.adapters.config.overrides import apply_overrides

from .commands import ALL_COMMANDS
from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greetcalc.composition import AppServices

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


def _configure(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load ``profile`` and layer the ``--set`` values on top.

    A bad profile name is reported against ``--profile``; a malformed
    override is a plain usage error.
    """
    try:
        loaded = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    try:
        return apply_overrides(loaded, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command, message=_VERSION_MESSAGE)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Read configuration from a named profile, e.g. 'staging'")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeatable, e.g. --set greeting.name=Alice",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration, logging and shared state for the subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from greetcalc.composition import build_testing
        >>> CliRunner().invoke(cli, ["greet", "World"], obj=build_testing).output
        'Hello, World!\\n'
    """
    make_services = ctx.obj
    if not callable(make_services):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = make_services()
    config = _configure(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx, traceback=traceback, config=config, services=services, profile=profile, set_overrides=set_overrides
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in ALL_COMMANDS:
    cli.add_command(_command)


__all__ = ["cli"]
