"""Callable Protocols the CLI depends on.

Any callable with the right signature satisfies a port: module-level
functions, the ``get_config`` loader instance, or the bound methods of
the in-memory ``ConfigStub``. ``Emit`` is the only port the use cases
themselves take.

``Config`` is imported for type checking only.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import DeployTarget, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class Emit(Protocol):
    """Write one line of text to the user-visible output stream."""

    def __call__(self, message: str, /) -> object: ...


class GetConfig(Protocol):
    """Return the merged configuration for a profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Locate the bundled ``defaultconfig.toml``."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Copy the defaults into the given layers and return the files written."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
        set_permissions: bool = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Render a configuration, or one section of it, to stdout."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start logging as configured by the ``[lib_log_rich]`` section."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "Emit",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
]
