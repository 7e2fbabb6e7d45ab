"""Typed view of the ``[selkit]`` configuration section.

Provides the SelkitSettings Pydantic model and the loader that builds it from
the dictionary produced by lib_layered_config.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from selkit.domain.enums import OutputFormat
from selkit.domain.errors import ConfigurationError


class SelkitSettings(BaseModel):
    """Validated, immutable application settings.

    Example:
        >>> settings = SelkitSettings(output_format="json", strict_combinators=True)
        >>> settings.output_format
        <OutputFormat.JSON: 'json'>
        >>> SelkitSettings().strict_combinators
        False
    """

    model_config = ConfigDict(frozen=True)

    output_format: OutputFormat = OutputFormat.HUMAN
    strict_combinators: bool = False

    @field_validator("output_format", mode="before")
    @classmethod
    def _normalize_format(cls, v: Any) -> Any:
        """Accept ``JSON`` or `` human `` from env variables and .env files.

        Examples:
            >>> SelkitSettings._normalize_format(" JSON ")
            'json'
        """
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_settings_from_dict(config_dict: Mapping[str, Any]) -> SelkitSettings:
    """Build SelkitSettings from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Settings are read from its ``selkit`` section; missing keys use
            model defaults.

    Returns:
        Validated settings.

    Raises:
        ConfigurationError: The section is not a table or holds invalid values.

    Example:
        >>> load_settings_from_dict({"selkit": {"output_format": "json"}}).output_format
        <OutputFormat.JSON: 'json'>
        >>> load_settings_from_dict({}).output_format
        <OutputFormat.HUMAN: 'human'>
    """
    section: Any = config_dict.get("selkit", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[selkit] must be a table, got {type(section).__name__}")

    try:
        return SelkitSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [selkit] configuration: {exc}") from exc


__all__ = [
    "SelkitSettings",
    "load_settings_from_dict",
]
