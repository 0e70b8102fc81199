"""Copy the bundled defaults into app/host/user configuration directories."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from greetcalc import __init__conf__
from greetcalc.adapters.config.loader import get_default_config_path, validate_profile
from greetcalc.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_DEPLOYED_ACTIONS = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
) -> list[Path]:
    r"""Deploy ``defaultconfig.toml`` to the requested layers.

    Args:
        targets: Layers to write to.
        force: Overwrite files that already exist.
        profile: Deploy into ``profile/<name>/`` subdirectories.
        set_permissions: Apply lib_layered_config's default modes
            (755/644 for app and host, 700/600 for user).

    Returns:
        Paths that were created or overwritten. Empty when every target
        already existed and ``force`` is False.

    Raises:
        PermissionError: Writing app/host layers without privileges.
        ValueError: Invalid profile name.

    Note:
        Linux destinations without a profile:

        - app: ``/etc/xdg/greetcalc/config.toml``
        - host: ``/etc/xdg/greetcalc/hosts/{hostname}.toml``
        - user: ``~/.config/greetcalc/config.toml``
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[t.value for t in targets],
        force=force,
        set_permissions=set_permissions,
    )

    paths: list[Path] = []
    for result in results:
        if result.action in _DEPLOYED_ACTIONS:
            paths.append(result.destination)
        paths.extend(
            dot_d_result.destination
            for dot_d_result in result.dot_d_results
            if dot_d_result.action in _DEPLOYED_ACTIONS
        )
    logger.debug("Deployed configuration files", extra={"count": len(paths)})
    return paths


__all__ = ["deploy_configuration"]
