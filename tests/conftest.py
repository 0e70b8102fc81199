"""Fixtures shared by the greetcalc test modules.

Services factories come in three flavours:

* ``testing_factory`` - everything in memory, nothing rendered or logged.
* ``stubbed_cli`` - configuration from a :class:`ConfigStub`, but the real
  display and logging adapters.
* ``production_factory`` - the bundled defaultconfig.toml and every real
  adapter.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
import tempfile
from collections.abc import Callable, Iterator, Mapping
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from greetcalc.adapters.memory import ConfigStub

if TYPE_CHECKING:
    from greetcalc.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_EXIT_TOOLS_FIELDS = tuple(f.name for f in fields(type(lib_cli_exit_tools.config)))


def pytest_configure(config: pytest.Config) -> None:
    """Point ``COVERAGE_FILE`` at the temp dir; SQLite locking fails on network mounts."""
    if "COVERAGE_FILE" in os.environ:
        return
    coverage_file = Path(tempfile.gettempdir()) / ".coverage.greetcalc"
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(f"{coverage_file}{suffix}").unlink()
    os.environ["COVERAGE_FILE"] = str(coverage_file)


def _load_dotenv() -> None:
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()


@pytest.fixture(autouse=True)
def isolated_logging_runtime() -> Iterator[None]:
    """Shut down any lib_log_rich runtime a test started and restore the root logger.

    ``attach_std_logging`` lowers the root logger level and adds a handler;
    each test starts from the logger state it found.
    """
    root = logging.getLogger()
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    try:
        yield
    finally:
        if lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()
        root.handlers[:] = handlers
        root.setLevel(level)
        root.propagate = propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh runner; compare ``result.stdout`` exactly, logs go to stderr."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from greetcalc.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> ServicesFactory:
    from greetcalc.composition import build_testing

    return build_testing


@pytest.fixture
def stubbed_cli() -> Callable[[ConfigStub | Mapping[str, Any]], ServicesFactory]:
    """Return a builder of services factories backed by a :class:`ConfigStub`.

    Pass plain sections or a stub you want to inspect afterwards.

    Example:
        def test_greet_default(cli_runner, stubbed_cli) -> None:
            result = cli_runner.invoke(cli, ["greet"], obj=stubbed_cli({"greeting": {"name": "Alice"}}))
            assert result.stdout == "Hello, Alice!\\n"
    """
    from greetcalc.adapters.config.display import display_config
    from greetcalc.adapters.logging.setup import init_logging
    from greetcalc.composition import build_testing

    def _build(source: ConfigStub | Mapping[str, Any]) -> ServicesFactory:
        stub = source if isinstance(source, ConfigStub) else ConfigStub(dict(source))
        services = replace(build_testing(stub=stub), display_config=display_config, init_logging=init_logging)
        return lambda: services

    return _build


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda value: ANSI_ESCAPE_PATTERN.sub("", value)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from cleared traceback flags and put the previous ones back afterwards."""
    saved = {name: getattr(lib_cli_exit_tools.config, name) for name in _EXIT_TOOLS_FIELDS}
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    try:
        yield
    finally:
        for name, value in saved.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Empty the ``get_config`` cache so the bundled defaults are read again."""
    from greetcalc.adapters.config import loader

    loader.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real Config objects from plain dicts."""
    return lambda data: Config(data, {})
