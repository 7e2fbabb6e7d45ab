"""CLI config stories: display, JSON format, sections, profiles, --set overrides."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner, Result
from lib_layered_config import Config

from selkit.adapters import cli as cli_mod

# ======================== Display ========================


@pytest.mark.os_agnostic
def test_when_config_is_invoked_it_displays_bundled_defaults(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """The bundled defaults provide the [selkit] section."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--section", "selkit"], obj=production_factory)

    assert result.exit_code == 0
    assert "output_format" in result.stdout
    assert "strict_combinators" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_it_outputs_json(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """Verify config --format json outputs JSON."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=production_factory)

    assert result.exit_code == 0
    assert "{" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_injected_data_it_displays_sections(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    factory = inject_config(
        config_factory(
            {
                "selkit": {"output_format": "json", "strict_combinators": True},
                "lib_log_rich": {"console_level": "INFO"},
            }
        )
    )

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert "[selkit]" in result.stdout
    assert "[lib_log_rich]" in result.stdout
    assert "strict_combinators = true" in result.stdout


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_json_format_and_section_it_shows_section(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    factory = inject_config(config_factory({"selkit": {"output_format": "json"}, "other": {"k": 1}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json", "--section", "selkit"], obj=factory)

    assert result.exit_code == 0
    assert '"output_format": "json"' in result.stdout
    assert '"other"' not in result.stdout


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", ["human", "json"])
def test_when_config_section_is_missing_it_fails(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
    output_format: str,
) -> None:
    factory = inject_config(config_factory({"selkit": {}}))

    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--format", output_format, "--section", "nonexistent"], obj=factory
    )

    assert result.exit_code == 22
    assert "not found" in result.stderr


# ======================== Profiles ========================


@pytest.mark.os_agnostic
def test_when_root_profile_is_given_it_reaches_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"selkit": {}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["--profile", "staging", "build", "id=x"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == ["staging"]


@pytest.mark.os_agnostic
def test_when_config_is_invoked_with_profile_it_passes_profile_to_get_config(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """Verify config command passes --profile to get_config."""
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"selkit": {"k": "v"}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--profile", "staging"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == [None, "staging"]


@pytest.mark.os_agnostic
def test_when_config_is_invoked_without_profile_it_passes_none(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"selkit": {"k": "v"}}), captured_profiles)

    result: Result = cli_runner.invoke(cli_mod.cli, ["config"], obj=factory)

    assert result.exit_code == 0
    assert captured_profiles == [None]


# ======================== --set overrides ========================


@pytest.mark.os_agnostic
def test_when_set_override_is_passed_config_reflects_change(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    factory = inject_config(config_factory({"selkit": {"output_format": "human"}}))

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "selkit.output_format=json", "--set", "selkit.strict_combinators=true", "config", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    payload = orjson.loads(result.stdout)
    assert payload["selkit"]["output_format"] == "json"
    assert payload["selkit"]["strict_combinators"] is True


@pytest.mark.os_agnostic
def test_when_config_subcommand_profile_reloads_it_preserves_root_set_overrides(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config_with_profile_capture: Callable[[Config, list[str | None]], Callable[[], Any]],
) -> None:
    """Root --set overrides are reapplied when config --profile reloads configuration."""
    captured_profiles: list[str | None] = []
    factory = inject_config_with_profile_capture(config_factory({"section": {"key": "original"}}), captured_profiles)

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "section.key=overridden", "config", "--profile", "test", "--format", "json"],
        obj=factory,
    )

    assert result.exit_code == 0
    assert captured_profiles == [None, "test"]
    assert "overridden" in result.stdout
    assert '"original"' not in result.stdout


@pytest.mark.os_agnostic
def test_when_no_set_overrides_config_is_unchanged(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
    inject_config: Callable[[Config], Callable[[], Any]],
) -> None:
    factory = inject_config(config_factory({"selkit": {"output_format": "human"}}))

    result: Result = cli_runner.invoke(cli_mod.cli, ["config", "--format", "json"], obj=factory)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout)["selkit"]["output_format"] == "human"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("override", ["invalid_no_equals", "nodot=value", ""])
def test_when_set_override_is_malformed_it_shows_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
    override: str,
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["--set", override, "config"], obj=production_factory)

    assert result.exit_code == 2
    assert "Invalid override" in result.output
