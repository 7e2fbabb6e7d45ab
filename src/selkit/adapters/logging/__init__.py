"""lib_log_rich wiring for the CLI; see :mod:`.setup`."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
