"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem and no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.documents` - In-memory expression documents (DocumentStore class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    load_settings_in_memory,
)
from .documents import DocumentStore
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from selkit.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadExpression,
        LoadSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_settings: LoadSettings = load_settings_in_memory
    _assert_load_expression: LoadExpression = DocumentStore().load_expression
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "DocumentStore",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_settings_in_memory",
]
