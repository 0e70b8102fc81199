"""Run the command group and turn whatever happens into an exit code.

``lib_cli_exit_tools.run_cli`` cannot hand ``obj`` to the group, so its
error handling is rebuilt here around ``cli.main(standalone_mode=False)``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetcalc import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from greetcalc.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` the way lib_cli_exit_tools does and return its exit code.

    ``--traceback`` selects the full traceback; otherwise a truncated summary.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001  # SystemExit and KeyboardInterrupt map to exit codes too
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``greetcalc`` with ``argv`` and return the exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the previous ``--traceback`` flags back afterwards.
        services_factory: Builds the :class:`AppServices`. The entry points pass
            ``build_production``, tests usually ``build_testing``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from greetcalc.composition import build_testing
        >>> main(["add", "5", "10"], services_factory=build_testing)
        15
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Other threads may still be logging.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
