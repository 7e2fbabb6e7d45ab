"""Shared pytest fixtures for domain, adapter, CLI and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from selkit.adapters.memory.documents import DocumentStore
    from selkit.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for rendered selectors so log records written to
    stderr never leak into assertions.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from selkit.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, not after, because a test may monkeypatch the loader.
    """
    from selkit.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests."""

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced.

    Example:
        def test_json_default(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"selkit": {"output_format": "json"}}))
            result = cli_runner.invoke(cli, ["build", "id=main"], obj=factory)
            assert result.stdout.strip() == '{"selector":"#main"}'
    """
    from selkit.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_settings=prod.load_settings,
            load_expression=prod.load_expression,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every profile it receives."""
    from selkit.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_settings=prod.load_settings,
            load_expression=prod.load_expression,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@dataclass
class DocumentCliContext:
    """Container for render CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        store: DocumentStore serving documents and recording lookups.
    """

    factory: Callable[[], Any]
    store: DocumentStore


@pytest.fixture
def document_cli_context(
    clear_config_cache: None,
) -> Callable[..., DocumentCliContext]:
    """Create render CLI test context with in-memory documents.

    Takes a ``{path: text}`` mapping and an optional ``[selkit]`` section and
    returns the wired factory plus the store for assertions. Logging and
    settings use production adapters.

    Example:
        def test_render(cli_runner, document_cli_context) -> None:
            ctx = document_cli_context({"a.json": '{"parts": [{"kind": "id", "value": "x"}]}'})
            result = cli_runner.invoke(cli, ["render", "a.json"], obj=ctx.factory)
            assert result.stdout.strip() == "#x"
    """
    from selkit.adapters.memory.documents import DocumentStore as DocumentStoreImpl
    from selkit.composition import AppServices, build_production

    def _create(documents: dict[str, str], selkit_section: dict[str, Any] | None = None) -> DocumentCliContext:
        store = DocumentStoreImpl(dict(documents))
        config = Config({"selkit": selkit_section or {}}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            load_settings=prod.load_settings,
            load_expression=store.load_expression,
            init_logging=prod.init_logging,
        )
        return DocumentCliContext(factory=lambda: test_services, store=store)

    return _create
