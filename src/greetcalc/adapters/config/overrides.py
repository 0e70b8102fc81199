"""``--set SECTION.KEY=VALUE`` overrides.

Each value is read as a JSON literal when it parses as one (``42``,
``0.5``, ``true``, ``null``, ``[1, 2]``) and kept as text otherwise, so
``--set greeting.name=Alice`` needs no quoting. All overrides of one run
are collected into a nested dict and handed to ``Config.with_overrides``
in one go.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""What :func:`coerce_value` can return."""

Tree = dict[str, dict[str, object]]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A parsed ``--set`` assignment.

    ``section`` is the top-level table; ``key_path`` has at least one
    element and leads from that table to the value.
    """

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    def merge_into(self, tree: Tree) -> None:
        """Store the value in ``tree``, creating the tables on the way.

        Raises:
            TypeError: If the path runs through a value that is not a table.

        Example:
            >>> tree: Tree = {}
            >>> ConfigOverride("lib_log_rich", ("payload_limits", "max_chars"), 8192).merge_into(tree)
            >>> tree
            {'lib_log_rich': {'payload_limits': {'max_chars': 8192}}}
        """
        table: dict[str, object] = tree.setdefault(self.section, {})
        for key in self.key_path[:-1]:
            child = table.setdefault(key, {})
            if not isinstance(child, dict):
                raise TypeError(
                    f"Expected dict at key {key!r} of [{self.section}], got {type(child).__name__}"
                )
            table = cast("dict[str, object]", child)
        table[self.key_path[-1]] = self.value


def _invalid(raw: str, reason: str) -> ValueError:
    return ValueError(f"Invalid override {raw!r}: {reason}")


def parse_override(raw: str) -> ConfigOverride:
    """Parse one ``SECTION.KEY[.SUBKEY...]=VALUE`` string.

    Everything after the first ``=`` is the value, so values may contain
    ``=`` themselves.

    Raises:
        ValueError: Missing ``=``, no dot in the key, or an empty key part.

    Examples:
        >>> parse_override("greeting.name=Alice")
        ConfigOverride(section='greeting', key_path=('name',), value='Alice')
        >>> parse_override("demo.a=7").value
        7
    """
    path, has_value, text = raw.partition("=")
    if not has_value:
        raise _invalid(raw, "must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise _invalid(raw, "key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise _invalid(raw, "section name is empty")
    keys = tuple(rest.split("."))
    if "" in keys:
        raise _invalid(raw, "key path contains empty component")
    return ConfigOverride(section, keys, coerce_value(text))


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, or return it unchanged when it is not JSON.

    Examples:
        >>> coerce_value("10"), coerce_value("2.5"), coerce_value("true")
        (10, 2.5, True)
        >>> coerce_value("World"), coerce_value("")
        ('World', '')
        >>> coerce_value("null") is None
        True
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge every override into a copy of ``config``.

    ``config`` itself is returned when there is nothing to apply.

    Raises:
        ValueError: If any override is malformed; nothing is applied then.
        TypeError: If an override descends into a non-table value.

    Example:
        >>> apply_overrides(Config({"demo": {"a": 5, "b": 10}}, {}), ("demo.a=7",)).as_dict()
        {'demo': {'a': 7, 'b': 10}}
    """
    if not raw_overrides:
        return config
    tree: Tree = {}
    for override in map(parse_override, raw_overrides):
        override.merge_into(tree)
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
