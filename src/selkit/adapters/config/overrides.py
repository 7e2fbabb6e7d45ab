"""``--set SECTION.KEY=VALUE`` overrides layered on top of a loaded Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Types a raw override value can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed override: ``selkit.output_format=json`` -> ("selkit", ("output_format",), "json")."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("8")
        8
        >>> coerce_value("json")
        'json'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` at the first ``=`` and the first dot.

    Raises:
        ValueError: ``raw`` lacks ``=``, lacks a dot before it, or has an
            empty section or key component.

    Examples:
        >>> parse_override("selkit.strict_combinators=true")
        ConfigOverride(section='selkit', key_path=('strict_combinators',), value=True)
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def _merge_into(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = target.setdefault(override.section, {})
    for key in override.key_path[:-1]:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every override deep-merged in.

    Returns the same instance when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"selkit": {"output_format": "human"}}, {})
        >>> apply_overrides(cfg, ("selkit.output_format=json",))["selkit"]["output_format"]
        'json'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
