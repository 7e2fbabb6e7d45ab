"""Command-line adapter for selkit.

The ``selkit`` group lives in :mod:`.root`; subcommands are defined in
:mod:`.commands` and re-exported here. :func:`main` runs the group with
traceback handling and logging shutdown.
"""

from __future__ import annotations

from .commands import cli_build, cli_config, cli_info, cli_render
from .constants import CLICK_CONTEXT_SETTINGS
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_build",
    "cli_config",
    "cli_info",
    "cli_render",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
