"""In-memory adapters used by ``build_testing``.

Contents:
    * :class:`.config.ConfigStub` - dict-backed config source and deploy recorder
    * :func:`.logging.init_logging_in_memory` - leaves lib_log_rich untouched
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    ConfigStub,
    DeployRequest,
    display_config_in_memory,
    get_default_config_path_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greetcalc.application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _stub = ConfigStub()
    _assert_get_config: GetConfig = _stub.get_config
    _assert_deploy_configuration: DeployConfiguration = _stub.deploy_configuration
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "ConfigStub",
    "DeployRequest",
    "display_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
