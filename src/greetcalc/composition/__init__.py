"""Composition root: one place that decides which adapter backs each port.

``build_production`` is what the console script and ``python -m greetcalc``
use. ``build_testing`` swaps the filesystem and logging adapters for
in-memory ones; pass ``config`` to seed the configuration it serves.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory import ConfigStub
    from ..application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """The port implementations handed to the CLI through ``ctx.obj``.

    Swap single ports with :func:`dataclasses.replace`.
    """

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Back every port with lib_layered_config and lib_log_rich."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing(*, config: Mapping[str, Any] | None = None, stub: ConfigStub | None = None) -> AppServices:
    """Back every port with in-memory adapters.

    Args:
        config: Sections served by ``get_config``. Ignored when ``stub`` is
            given.
        stub: Existing :class:`ConfigStub` to inspect after the run.

    Example:
        >>> services = build_testing(config={"greeting": {"name": "Ada"}})
        >>> services.get_config()["greeting"]["name"]
        'Ada'
    """
    from ..adapters.memory import (
        ConfigStub,
        display_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    source = stub if stub is not None else ConfigStub(dict(config or {}))
    return AppServices(
        get_config=source.get_config,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=source.deploy_configuration,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
]
