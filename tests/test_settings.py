"""SelkitSettings model and loader: defaults, normalisation and rejection."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from selkit.adapters.config.settings import SelkitSettings, load_settings_from_dict
from selkit.domain.enums import OutputFormat
from selkit.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_defaults_render_human_output_without_strict_combinators() -> None:
    settings = SelkitSettings()

    assert settings.output_format is OutputFormat.HUMAN
    assert settings.strict_combinators is False


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["json", "JSON", " Json "])
def test_output_format_is_normalised(raw: str) -> None:
    assert SelkitSettings(output_format=raw).output_format is OutputFormat.JSON  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    settings = SelkitSettings()

    with pytest.raises(ValidationError):
        settings.strict_combinators = True  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_loader_reads_selkit_section() -> None:
    settings = load_settings_from_dict({"selkit": {"output_format": "json", "strict_combinators": True}})

    assert settings.output_format is OutputFormat.JSON
    assert settings.strict_combinators is True


@pytest.mark.os_agnostic
def test_loader_uses_defaults_when_section_missing() -> None:
    assert load_settings_from_dict({"lib_log_rich": {}}) == SelkitSettings()


@pytest.mark.os_agnostic
def test_loader_accepts_string_booleans_from_env() -> None:
    assert load_settings_from_dict({"selkit": {"strict_combinators": "true"}}).strict_combinators is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "section",
    [
        {"output_format": "xml"},
        {"strict_combinators": "sometimes"},
    ],
)
def test_loader_rejects_invalid_values(section: dict[str, Any]) -> None:
    with pytest.raises(ConfigurationError, match=r"Invalid \[selkit\] configuration"):
        load_settings_from_dict({"selkit": section})


@pytest.mark.os_agnostic
def test_loader_rejects_non_table_section() -> None:
    with pytest.raises(ConfigurationError, match=r"\[selkit\] must be a table, got str"):
        load_settings_from_dict({"selkit": "json"})
