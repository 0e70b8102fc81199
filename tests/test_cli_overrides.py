"""Root ``--set SECTION.KEY=VALUE`` overrides seen through real commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from greetcalc.adapters import cli as cli_mod

DEMO = {"demo": {"a": 5, "b": 10}}


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        (["demo.a=40", "demo.b=2"], "Hello, World!\n42\n"),
        (["demo.a=0.5"], "Hello, World!\n10.5\n"),
        (["greeting.name=Alice"], "Hello, Alice!\n15\n"),
        ([], "Hello, World!\n15\n"),
    ],
)
def test_overrides_feed_the_demo(
    cli_runner: CliRunner, stubbed_cli: Callable[..., Any], overrides: list[str], expected: str
) -> None:
    """Values are coerced as JSON literals, so 40 stays an int and 0.5 a float."""
    args = [arg for item in overrides for arg in ("--set", item)]

    result = cli_runner.invoke(cli_mod.cli, [*args, "demo"], obj=stubbed_cli(DEMO))

    assert result.exit_code == 0, result.output
    assert result.stdout == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("override", ["demo.a=true", "demo.b=inf"])
def test_overrides_that_are_not_finite_numbers_are_config_errors(
    cli_runner: CliRunner, stubbed_cli: Callable[..., Any], override: str
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--set", override, "demo"], obj=stubbed_cli(DEMO))

    assert result.exit_code == 78


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "section", "expected"),
    [
        (["--set", "lib_log_rich.console_level=WARNING"], {"console_level": "INFO"}, "WARNING"),
        (
            ["--set", "lib_log_rich.payload_limits.message_max_chars=8192"],
            {"payload_limits": {"message_max_chars": 4096}},
            "8192",
        ),
    ],
)
def test_overrides_show_up_in_config_output(
    cli_runner: CliRunner, stubbed_cli: Callable[..., Any], args: list[str], section: dict[str, Any], expected: str
) -> None:
    factory = stubbed_cli({"lib_log_rich": section})

    result = cli_runner.invoke(cli_mod.cli, [*args, "config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert expected in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("override", "message"),
    [
        ("invalid_no_equals", "must contain '='"),
        ("nodot=value", "must contain at least one dot"),
        (".name=value", "section name is empty"),
        ("greeting.=x", "empty component"),
    ],
)
def test_malformed_override_is_a_usage_error(
    cli_runner: CliRunner, testing_factory: Callable[[], Any], override: str, message: str
) -> None:
    result = cli_runner.invoke(cli_mod.cli, ["--set", override, "greet"], obj=testing_factory)

    assert result.exit_code == 2
    assert message in result.stderr
