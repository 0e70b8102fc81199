"""Closed sets of choices offered on the command line."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``config`` and ``add`` render their result.

    The ``str`` base lets the members feed ``click.Choice`` and compare
    equal to the raw option text.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.HUMAN == "human"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Where ``config-deploy`` may write ``defaultconfig.toml``.

    ``APP`` and ``HOST`` are system-wide and usually need root; ``USER`` is
    the invoking user's own config directory.
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = ["DeployTarget", "OutputFormat"]
