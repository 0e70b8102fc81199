"""Profile name validation through lib_layered_config.validate_profile_name."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from greetcalc.adapters import cli as cli_mod
from greetcalc.adapters.config.deploy import deploy_configuration
from greetcalc.adapters.config.loader import get_config, validate_profile
from greetcalc.domain.enums import DeployTarget


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "..", "foo/bar", "", "-invalid", "_invalid", "CON", "a" * 65])
def test_invalid_profile_names_are_rejected(profile: str) -> None:
    """Traversal, separators, reserved names, bad starts and overlong names fail."""
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["staging", "staging-v2", "prod_eu", "a" * 64])
def test_valid_profile_names_are_accepted(profile: str) -> None:
    """Alphanumerics with inner hyphens or underscores pass, up to 64 characters."""
    validate_profile(profile)


@pytest.mark.os_agnostic
def test_validate_profile_honours_custom_max_length() -> None:
    """max_length narrows the accepted length."""
    validate_profile("abcdefghij", max_length=10)

    with pytest.raises(ValueError):
        validate_profile("abcdefghijk", max_length=10)


@pytest.mark.os_agnostic
def test_get_config_rejects_traversal_profile(clear_config_cache: None) -> None:
    """The loader validates before touching the filesystem."""
    with pytest.raises(ValueError):
        get_config(profile="../etc")


@pytest.mark.os_agnostic
def test_get_config_with_unknown_valid_profile_still_loads_defaults(clear_config_cache: None) -> None:
    """A profile without files keeps the bundled defaults."""
    config = get_config(profile="staging-v2")

    assert config.get("greeting", default={})["name"] == "World"


@pytest.mark.os_agnostic
def test_deploy_rejects_traversal_profile() -> None:
    """deploy_configuration refuses profiles that escape the config tree."""
    with pytest.raises(ValueError):
        deploy_configuration(targets=[DeployTarget.USER], profile="../../x")


@pytest.mark.os_agnostic
def test_cli_profile_with_traversal_is_a_bad_parameter(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    clear_config_cache: None,
) -> None:
    """An invalid root --profile is reported as a usage error on --profile."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "../etc", "greet"], obj=production_factory)

    assert result.exit_code == 2
    assert "--profile" in result.stderr
