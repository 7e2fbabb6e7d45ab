"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function, so plain module-level functions satisfy them
through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``SelkitSettings``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat
from ..domain.selector import Renderable

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import SelkitSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadSettings(Protocol):
    """Build typed application settings from a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> SelkitSettings: ...


class LoadExpression(Protocol):
    """Read an expression document and build the selector expression it describes."""

    def __call__(self, path: Path, *, strict_combinators: bool = ...) -> Renderable: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadExpression",
    "LoadSettings",
]
