"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Invalid or inconsistent configuration values.

    Raised when the ``[greeting]`` or ``[demo]`` sections cannot be parsed
    into settings. Caught at the CLI boundary and mapped to
    ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> err = ConfigurationError("demo.a must be a number")
        >>> str(err)
        'demo.a must be a number'
    """


__all__ = ["ConfigurationError"]
