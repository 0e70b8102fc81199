"""Per-command logging context.

Commands bind ``job_id`` and ``extra`` fields for the duration of their
work. Without an initialised runtime (in-memory services, direct command
invocation in tests) the scope is a no-op.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from typing import Any

import lib_log_rich.runtime


@contextlib.contextmanager
def command_scope(command: str, **extra: Any) -> Iterator[None]:
    """Bind ``job_id="cli-<command>"`` and ``extra`` for the enclosed block.

    Example:
        >>> with command_scope("greet", name="World"):
        ...     pass
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, **extra}):
        yield


__all__ = ["command_scope"]
