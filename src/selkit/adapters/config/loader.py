"""Layered configuration loading with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from selkit import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader callable that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or could escape the config tree.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` bundled next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_cached(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load configuration merged from defaults, app, host, user, dotenv and env layers.

    Results are cached per ``(profile, start_dir)`` for the lifetime of the
    process, which suits a short-lived CLI invocation.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory that seeds ``.env`` discovery. Defaults to the
            current working directory.

    Returns:
        Immutable configuration object with provenance tracking.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("selkit.output_format")
        'human'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_cached(profile=profile, start_dir=start_dir)


# lru_cache's cache_clear is not visible once the function is cast to the protocol.
_get_config.cache_clear = _read_cached.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
