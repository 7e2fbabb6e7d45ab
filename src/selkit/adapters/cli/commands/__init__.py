"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Selector commands from :mod:`.selector_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .selector_cmd import cli_build, cli_render

__all__ = [
    "cli_build",
    "cli_config",
    "cli_info",
    "cli_render",
]
