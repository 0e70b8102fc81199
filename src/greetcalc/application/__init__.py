"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.usecases` - Greeting and demo flows writing through an emitter
"""

from __future__ import annotations

from .ports import (
    DeployConfiguration,
    DisplayConfig,
    Emit,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
)
from .usecases import DEMO_OPERANDS, greet, run_demo

__all__ = [
    "DEMO_OPERANDS",
    "DeployConfiguration",
    "DisplayConfig",
    "Emit",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "greet",
    "run_demo",
]
