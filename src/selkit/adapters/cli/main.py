"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - Primary entry point for CLI execution.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from selkit import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from selkit.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate its outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot forward ``obj``, so its behaviour is
    reproduced here with the services factory passed as the Click object.
    """
    import sys

    import click

    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # Everything else, SystemExit and KeyboardInterrupt included, is
        # formatted by lib_cli_exit_tools so exit codes stay consistent.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Optional sequence of CLI arguments. None uses sys.argv.
        restore_traceback: Whether to restore prior traceback configuration after execution.
        services_factory: Factory returning AppServices. Callers outside the
            adapters layer pass ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from selkit.composition import build_production
        >>> main(["build", "element=a"], services_factory=build_production)  # doctest: +SKIP
        a
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Shutting down from a worker thread would stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
