"""Logging adapter - lib_log_rich setup.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.scope.command_scope` - Per-command context binding
"""

from __future__ import annotations

from .scope import command_scope
from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "command_scope", "init_logging"]
