"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

Number = int | float | Decimal | Fraction
"""Numeric operand types accepted by :meth:`Calculator.add`."""

GREETING_TEMPLATE = "Hello, {name}!"
DEFAULT_NAME = "World"


def build_greeting(name: str) -> str:
    """Return the greeting line for ``name``.

    Any text is accepted unchanged, including the empty string.

    Args:
        name: Name to greet.

    Returns:
        The text ``Hello, {name}!``.

    Example:
        >>> build_greeting("World")
        'Hello, World!'
        >>> build_greeting("")
        'Hello, !'
    """
    return GREETING_TEMPLATE.format(name=name)


class Calculator:
    """Stateless arithmetic helper.

    Example:
        >>> Calculator().add(5, 10)
        15
        >>> Calculator().add(0.5, 0.25)
        0.75
    """

    __slots__ = ()

    def add(self, a: Number, b: Number) -> Number:
        """Return ``a + b`` with the operands' native numeric semantics.

        Mixing ``Decimal`` with ``float`` is not supported and raises
        :class:`TypeError`, exactly as ``+`` does.
        """
        return a + b  # type: ignore[operator]


__all__ = [
    "DEFAULT_NAME",
    "GREETING_TEMPLATE",
    "Calculator",
    "Number",
    "build_greeting",
]
