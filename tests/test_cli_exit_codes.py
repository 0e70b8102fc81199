"""How failures map onto :class:`ExitCode`."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from greetcalc.adapters import cli as cli_mod
from greetcalc.adapters.cli.exit_codes import ExitCode
from greetcalc.adapters.memory import ConfigStub


@pytest.mark.os_agnostic
def test_exit_code_values_follow_posix_conventions() -> None:
    """Numeric values match sysexits.h and errno."""
    assert {code.name: int(code) for code in ExitCode} == {
        "SUCCESS": 0,
        "GENERAL_ERROR": 1,
        "FILE_NOT_FOUND": 2,
        "PERMISSION_DENIED": 13,
        "INVALID_ARGUMENT": 22,
        "CONFIG_ERROR": 78,
        "SIGNAL_INT": 130,
        "BROKEN_PIPE": 141,
        "SIGNAL_TERM": 143,
    }


@pytest.mark.os_agnostic
def test_unknown_section_of_bundled_config_is_invalid_argument(
    cli_runner: CliRunner, production_factory: Callable[[], Any], clear_config_cache: None
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "no_such_section"], obj=production_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error", "code", "fragments"),
    [
        (PermissionError("Permission denied"), ExitCode.PERMISSION_DENIED, ("Permission denied", "sudo")),
        (ValueError("Invalid profile name"), ExitCode.INVALID_ARGUMENT, ("Invalid profile name",)),
    ],
)
def test_deploy_failures_map_to_their_exit_code(
    cli_runner: CliRunner,
    stubbed_cli: Callable[..., Any],
    error: Exception,
    code: ExitCode,
    fragments: tuple[str, ...],
) -> None:
    factory = stubbed_cli(ConfigStub(deploy_error=error))

    result = cli_runner.invoke(cli_mod.cli, ["config-deploy", "--target", "app"], obj=factory)

    assert result.exit_code == code
    for fragment in fragments:
        assert fragment in result.stderr


@pytest.mark.os_agnostic
def test_unexpected_deploy_error_propagates_as_general_error(
    cli_runner: CliRunner, stubbed_cli: Callable[..., Any]
) -> None:
    factory = stubbed_cli(ConfigStub(deploy_error=OSError("Disk full")))

    result = cli_runner.invoke(cli_mod.cli, ["config-deploy", "--target", "user"], obj=factory)

    assert result.exit_code == ExitCode.GENERAL_ERROR
    assert isinstance(result.exception, OSError)


@pytest.mark.os_agnostic
def test_scalar_greeting_section_is_a_config_error(cli_runner: CliRunner, stubbed_cli: Callable[..., Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["greet"], obj=stubbed_cli({"greeting": "Alice"}))

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "greeting" in result.stderr


@pytest.mark.os_agnostic
def test_explicit_name_never_reads_the_broken_section(cli_runner: CliRunner, stubbed_cli: Callable[..., Any]) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["greet", "Bob"], obj=stubbed_cli({"greeting": "Alice"}))

    assert result.exit_code == 0
    assert result.stdout == "Hello, Bob!\n"
