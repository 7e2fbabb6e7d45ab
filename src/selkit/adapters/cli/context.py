"""Click context helpers for CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from selkit.adapters.config.settings import SelkitSettings
    from selkit.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """State the root command hands to every subcommand."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()

    def settings(self) -> SelkitSettings:
        """Validate the ``[selkit]`` section of the loaded configuration.

        Raises:
            ConfigurationError: The section holds invalid values.
        """
        return self.services.load_settings(self.config.as_dict())


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with the resolved CLIContext.

    Args:
        ctx: Click context associated with the current invocation.
        traceback: Whether verbose tracebacks were requested.
        config: Loaded configuration with ``--set`` overrides applied.
        services: All application services from the composition layer.
        profile: Optional configuration profile name.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration for a different profile.
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root command.

    Raises:
        RuntimeError: If the root command did not run first.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror ``--traceback`` into ``lib_cli_exit_tools.config``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for :func:`restore_traceback_state`."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
