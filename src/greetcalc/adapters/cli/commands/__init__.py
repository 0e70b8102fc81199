"""Subcommands of the ``greetcalc`` group.

:mod:`..root` registers everything in ``ALL_COMMANDS``.
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .greeting import cli_add, cli_demo, cli_greet
from .info import cli_fail, cli_info
from .logging import cli_logdemo

ALL_COMMANDS = (
    cli_greet,
    cli_add,
    cli_demo,
    cli_info,
    cli_fail,
    cli_config,
    cli_config_deploy,
    cli_config_generate_examples,
    cli_logdemo,
)

__all__ = [
    "ALL_COMMANDS",
    "cli_add",
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_demo",
    "cli_fail",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
]
