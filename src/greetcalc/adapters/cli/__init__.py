"""Command-line interface for greetcalc.

``cli`` is the rich-click group; ``main`` runs it with exit-code handling.
Command objects and the traceback helpers are re-exported for tests and
embedding.
"""

from __future__ import annotations

from .commands import (
    cli_add,
    cli_config,
    cli_config_deploy,
    cli_config_generate_examples,
    cli_demo,
    cli_fail,
    cli_greet,
    cli_info,
    cli_logdemo,
)
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_add",
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_demo",
    "cli_fail",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
