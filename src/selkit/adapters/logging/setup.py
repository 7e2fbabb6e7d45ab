"""lib_log_rich runtime initialisation shared by every entry point.

Contents:
    * :class:`LoggingConfigModel` - validation of the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialisation.

System Role:
    Both ``python -m selkit`` and the ``selkit`` console script reach this
    module through the CLI root command, so logging is configured the same way
    regardless of how the tool was started. Domain modules only ever call
    ``logging.getLogger(__name__)``; the stdlib bridge routes their records here.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from selkit import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section; unknown keys pass through to RuntimeConfig.

    Example:
        >>> LoggingConfigModel(environment="staging").environment
        'staging'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich once per process and attach stdlib logging.

    Loads ``.env`` files first so ``LOG_*`` variables can override the
    configured levels. Later calls return immediately.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
