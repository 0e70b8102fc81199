"""Public package surface exposing the greeting, the calculator, and configuration.

- Domain exports: ``build_greeting``, ``Calculator``
- Application exports: ``greet``, ``run_demo``
- Composition exports: ``get_config``
- Metadata: ``print_info``

Example:
    >>> from greetcalc import Calculator, greet
    >>> greet("World")
    Hello, World!
    >>> Calculator().add(5, 10)
    15
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.usecases import greet, run_demo

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    GREETING_TEMPLATE,
    Calculator,
    build_greeting,
)

__all__ = [
    "GREETING_TEMPLATE",
    "Calculator",
    "build_greeting",
    "get_config",
    "greet",
    "print_info",
    "run_demo",
]
