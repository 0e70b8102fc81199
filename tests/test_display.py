"""Config display wrapper tests.

The wrapper flushes pending log records and delegates rendering to
lib_layered_config, which owns the formatting details.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import lib_log_rich.runtime
import pytest
from lib_layered_config import Config

from greetcalc.adapters.config.display import display_config
from greetcalc.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", [OutputFormat.HUMAN, OutputFormat.JSON])
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """An unknown section raises ValueError in every format."""
    config = config_factory({"greeting": {"name": "World"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_tables(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output looks like TOML."""
    display_config(Config({"greeting": {"name": "Ada"}}, {}), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[greeting]" in output
    assert 'name = "Ada"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_tables(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output carries keys and values."""
    display_config(Config({"demo": {"a": 5, "b": 10}}, {}), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"demo"' in output
    assert '"a": 5' in output


@pytest.mark.os_agnostic
def test_display_section_with_zero_operand_is_shown(capsys: pytest.CaptureFixture[str]) -> None:
    """Falsey values do not make a section look missing."""
    display_config(Config({"demo": {"a": 0, "b": 0}}, {}), output_format=OutputFormat.HUMAN, section="demo")

    assert "a = 0" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_flushes_log_runtime_when_initialised(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Pending log records are flushed before rendering."""
    flushed: list[bool] = []
    monkeypatch.setattr(lib_log_rich.runtime, "is_initialised", lambda: True)
    monkeypatch.setattr(lib_log_rich.runtime, "flush", lambda: flushed.append(True))

    display_config(Config({"greeting": {"name": "Ada"}}, {}))

    assert flushed == [True]
    assert "[greeting]" in capsys.readouterr().out
