"""State shared between the root command and its subcommands.

The root command replaces ``ctx.obj`` (a services factory on entry) with a
:class:`CLIContext`. Traceback flags live in ``lib_cli_exit_tools.config``
and are snapshotted by :func:`~greetcalc.adapters.cli.main.main` so a run
never leaks its ``--traceback`` choice into the next one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from greetcalc.adapters.config.settings import AppSettings, load_app_settings

if TYPE_CHECKING:
    from greetcalc.composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags as found in ``lib_cli_exit_tools.config``."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """Configuration, services and root options visible to every subcommand.

    ``set_overrides`` keeps the raw ``--set`` strings so a subcommand that
    reloads configuration for another profile can apply them again.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    _settings: AppSettings | None = field(default=None, repr=False)

    def app_settings(self) -> AppSettings:
        """Parse ``[greeting]`` and ``[demo]`` on first use and cache the result.

        Raises:
            ConfigurationError: If either section holds invalid values.
        """
        if self._settings is None:
            self._settings = load_app_settings(self.config)
        return self._settings


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` with a fresh :class:`CLIContext`."""
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root command.

    Raises:
        RuntimeError: If the root command did not run first.
    """
    cli_ctx = ctx.obj
    if isinstance(cli_ctx, CLIContext):
        return cli_ctx
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for the current run.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags."""
    cfg = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(cfg, "traceback", False)),
        force_color=bool(getattr(cfg, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write back flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
