"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting formatter and calculator
    * :mod:`.enums` - Domain enumerations (OutputFormat, DeployTarget)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_NAME,
    GREETING_TEMPLATE,
    Calculator,
    Number,
    build_greeting,
)
from .enums import DeployTarget, OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "DEFAULT_NAME",
    "GREETING_TEMPLATE",
    "Calculator",
    "Number",
    "build_greeting",
    # Enums
    "DeployTarget",
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
