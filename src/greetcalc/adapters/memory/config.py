"""In-memory configuration adapters for testing.

:class:`ConfigStub` serves a fixed configuration, records which profiles
and deployments the CLI asked for, and answers deployments with canned
paths or a canned error. Nothing touches the filesystem.
"""

from __future__ import annotations

import tempfile
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat


@dataclass(frozen=True, slots=True)
class DeployRequest:
    """Arguments of one ``deploy_configuration`` call."""

    targets: tuple[DeployTarget, ...]
    force: bool
    profile: str | None
    set_permissions: bool


@dataclass(slots=True)
class ConfigStub:
    """Configuration source backed by a plain dict.

    Example:
        >>> stub = ConfigStub({"greeting": {"name": "Ada"}})
        >>> stub.get_config(profile="test")["greeting"]["name"]
        'Ada'
        >>> stub.requested_profiles
        ['test']
    """

    data: Mapping[str, Any] = field(default_factory=dict)
    deploy_result: list[Path] = field(default_factory=list)
    deploy_error: Exception | None = None
    requested_profiles: list[str | None] = field(default_factory=list)
    deploy_requests: list[DeployRequest] = field(default_factory=list)

    def get_config(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        self.requested_profiles.append(profile)
        return Config(dict(self.data), {})

    def deploy_configuration(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = False,
        profile: str | None = None,
        set_permissions: bool = True,
    ) -> list[Path]:
        """Record the request, then raise ``deploy_error`` or return ``deploy_result``."""
        self.deploy_requests.append(
            DeployRequest(targets=tuple(targets), force=force, profile=profile, set_permissions=set_permissions)
        )
        if self.deploy_error is not None:
            raise self.deploy_error
        return list(self.deploy_result)


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "greetcalc" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the display request."""


__all__ = [
    "ConfigStub",
    "DeployRequest",
    "display_config_in_memory",
    "get_default_config_path_in_memory",
]
