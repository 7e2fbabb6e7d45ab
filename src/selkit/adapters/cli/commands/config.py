"""Configuration display command.

Contents:
    * :func:`cli_config` - Display merged configuration.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from selkit.adapters.config.overrides import apply_overrides
from selkit.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Return the config to show and the profile it belongs to.

    A subcommand-level profile reloads configuration and reapplies the root
    ``--set`` overrides; otherwise the root command's config is reused.
    """
    if profile:
        config = cli_ctx.services.get_config(profile=profile)
        return apply_overrides(config, cli_ctx.set_overrides), profile
    return cli_ctx.config, cli_ctx.profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Show only a specific configuration section (e.g., 'selkit')",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Override profile from root command (e.g., 'production', 'test')",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the current merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    cli_ctx = get_cli_context(ctx)
    effective_config, effective_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(
                effective_config, output_format=fmt, section=section, profile=effective_profile
            )
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
