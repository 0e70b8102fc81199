"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml`` so the CLI can report
them without querying installed distribution metadata at runtime.

Contents:
    * Package identity: :data:`name`, :data:`title`, :data:`version`.
    * :data:`shell_command` - console script name.
    * ``LAYEREDCONF_*`` - identifiers used by lib_layered_config for paths.
    * :func:`print_info` - render the metadata block for ``greetcalc info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greetcalc"
title: Final[str] = "Greeting and calculator command-line toolkit"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/greetcalc/greetcalc"
author: Final[str] = "greetcalc maintainers"
author_email: Final[str] = "maintainers@greetcalc.dev"
shell_command: Final[str] = "greetcalc"

#: Vendor directory used on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "greetcalc"
#: Application directory used on macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Greetcalc"
#: XDG slug used on Linux configuration paths.
LAYEREDCONF_SLUG: Final[str] = "greetcalc"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetcalc:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
