"""Custom Click parameter types."""

from __future__ import annotations

import math

import rich_click as click


class NumberParamType(click.ParamType):
    """Parse an operand as ``int`` when integral text, otherwise ``float``.

    Keeping integers as ``int`` makes ``add 5 10`` print ``15`` instead of
    ``15.0``. NaN and infinities are rejected; JSON has no encoding for them.

    Example:
        >>> NUMBER.convert("5", None, None)
        5
        >>> NUMBER.convert("2.5", None, None)
        2.5
        >>> NUMBER.convert("1e3", None, None)
        1000.0
    """

    name = "number"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> int | float:
        if isinstance(value, bool):
            self.fail(f"{value!r} is not a number", param, ctx)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return self._finite(value, param, ctx)
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)
        return self._finite(number, param, ctx)

    def _finite(self, number: float, param: click.Parameter | None, ctx: click.Context | None) -> float:
        if math.isnan(number):
            self.fail(f"{number!r} is not a number", param, ctx)
        if not math.isfinite(number):
            self.fail(f"{number!r} is not a finite number", param, ctx)
        return number


NUMBER = NumberParamType()

__all__ = ["NUMBER", "NumberParamType"]
