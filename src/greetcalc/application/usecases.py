"""Use cases that combine domain behaviors with an output channel.

Domain functions stay pure; the functions here perform the single side
effect the package has (writing lines) through an injected emitter so the
CLI can pass ``click.echo`` and tests can pass a list collector.

Contents:
    * :func:`greet` - Emit the greeting line for a name.
    * :func:`run_demo` - Emit the greeting, then the sum of two numbers.
"""

from __future__ import annotations

import logging

from ..domain.behaviors import DEFAULT_NAME, Calculator, Number, build_greeting
from .ports import Emit

logger = logging.getLogger(__name__)

DEMO_OPERANDS: tuple[int, int] = (5, 10)


def greet(name: str, *, emit: Emit = print) -> None:
    """Emit ``Hello, {name}!`` as one line.

    Args:
        name: Name to greet. Any text is accepted, including ``""``.
        emit: Line writer. Defaults to :func:`print`.

    Example:
        >>> greet("World")
        Hello, World!
    """
    emit(build_greeting(name))


def run_demo(
    name: str = DEFAULT_NAME,
    a: Number = DEMO_OPERANDS[0],
    b: Number = DEMO_OPERANDS[1],
    *,
    emit: Emit = print,
) -> Number:
    """Greet ``name``, add ``a`` and ``b`` with a fresh calculator, emit the sum.

    Returns:
        The computed sum.

    Example:
        >>> run_demo()
        Hello, World!
        15
        15
    """
    greet(name, emit=emit)
    result = Calculator().add(a, b)
    logger.debug("Computed demo sum", extra={"a": str(a), "b": str(b), "result": str(result)})
    emit(str(result))
    return result


__all__ = [
    "DEMO_OPERANDS",
    "greet",
    "run_demo",
]
