"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import load_settings_from_dict
from ..adapters.documents.loader import load_expression
from ..adapters.logging.setup import init_logging

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.documents import DocumentStore
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadExpression,
        LoadSettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_settings: LoadSettings = load_settings_from_dict
    _assert_load_expression: LoadExpression = load_expression
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_settings: LoadSettings
    load_expression: LoadExpression
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_settings=load_settings_from_dict,
        load_expression=load_expression,
        init_logging=init_logging,
    )


def build_testing(*, documents: DocumentStore | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        documents: Optional DocumentStore serving expression documents.
            When None, an empty store is created. Pass your own store to
            preload documents and assert on the paths that were requested.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        DocumentStore,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_settings_in_memory,
    )

    store = documents if documents is not None else DocumentStore()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_settings=load_settings_in_memory,
        load_expression=store.load_expression,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    "load_settings_from_dict",
    # Documents
    "load_expression",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
