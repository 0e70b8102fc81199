"""``config``, ``config-deploy`` and ``config-generate-examples``.

All three work on the ``[greeting]``, ``[demo]`` and ``[lib_log_rich]``
layers managed by lib_layered_config. Failures print ``Error: ...`` to
stderr and exit with the matching :class:`ExitCode`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import rich_click as click
from lib_layered_config import Config, generate_examples

from greetcalc import __init__conf__
from greetcalc.adapters.config.overrides import apply_overrides
from greetcalc.adapters.logging.scope import command_scope
from greetcalc.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_profile_option = click.option(
    "--profile", default=None, help="Use this profile instead of the one given to the root command"
)


def _abort(code: ExitCode, message: str, *, hint: str | None = None) -> NoReturn:
    logger.error(message)
    click.echo(f"\nError: {message}", err=True)
    if hint:
        click.echo(f"Hint: {hint}", err=True)
    raise SystemExit(code)


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Config and profile for ``config``.

    Another profile means a fresh load with the root ``--set`` overrides
    applied again.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="human (TOML-like, with provenance) or json",
)
@click.option("--section", default=None, help="Only this top-level section, e.g. 'greeting' or 'demo'")
@_profile_option
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the merged configuration and where each value came from.

    Layers, lowest first: defaults, app, host, user, .env, environment.
    """
    cli_ctx = get_cli_context(ctx)
    config, shown_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with command_scope("config", format=fmt.value, profile=shown_profile):
        logger.info("Showing configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            _abort(ExitCode.INVALID_ARGUMENT, str(exc))


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Layer to write: app, host or user (repeatable)",
)
@click.option("--force", is_flag=True, help="Replace files that already exist")
@_profile_option
@click.option(
    "--permissions/--no-permissions",
    "set_permissions",
    default=True,
    help="Apply 755/644 (app, host) or 700/600 (user) modes on POSIX",
)
@click.pass_context
def cli_config_deploy(
    ctx: click.Context, targets: tuple[str, ...], force: bool, profile: str | None, set_permissions: bool
) -> None:
    r"""Copy the bundled defaultconfig.toml into configuration directories.

    \b
    app   system-wide, needs privileges
    host  this machine only, needs privileges
    user  the current user's config directory
    """
    cli_ctx = get_cli_context(ctx)
    profile = profile or cli_ctx.profile
    chosen = tuple(DeployTarget(t.lower()) for t in targets)

    with command_scope("config-deploy", targets=[t.value for t in chosen], force=force, profile=profile):
        try:
            written = cli_ctx.services.deploy_configuration(
                targets=chosen, force=force, profile=profile, set_permissions=set_permissions
            )
        except PermissionError as exc:
            _abort(
                ExitCode.PERMISSION_DENIED,
                f"Permission denied. {exc}",
                hint="app and host targets usually need sudo.",
            )
        except ValueError as exc:
            _abort(ExitCode.INVALID_ARGUMENT, str(exc))
        logger.info("Deployed configuration", extra={"count": len(written)})
        _echo_deployed(written, profile)


def _echo_deployed(written: list[Path], profile: str | None) -> None:
    if not written:
        click.echo("\nNo files were created; every target already exists. Pass --force to replace them.")
        return
    suffix = f" (profile: {profile})" if profile else ""
    click.echo(f"\nConfiguration deployed successfully{suffix}:")
    for path in written:
        click.echo(f"  ✓ {path}")


@click.command("config-generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--destination", type=click.Path(file_okay=False), required=True, help="Directory for the examples")
@click.option("--force", is_flag=True, help="Replace files that already exist")
def cli_config_generate_examples(destination: str, force: bool) -> None:
    """Write one commented example file per configuration layer."""
    with command_scope("config-generate-examples", destination=destination, force=force):
        try:
            written = generate_examples(
                destination=destination,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                force=force,
            )
        except OSError as exc:
            _abort(ExitCode.GENERAL_ERROR, str(exc))

        if not written:
            click.echo("\nNo files generated; they all exist already. Pass --force to replace them.")
            return
        click.echo(f"\nGenerated {len(written)} example file(s):")
        for path in written:
            click.echo(f"  {path}")


__all__ = ["cli_config", "cli_config_deploy", "cli_config_generate_examples"]
