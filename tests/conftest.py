"""Shared test fixtures for the evalconsole test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from evalconsole.audit.stores import InMemoryEvaluationAuditStore
from evalconsole.console import Binding, InMemorySessionRegistry, SessionFactory


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from evalconsole.config import get_settings
    from evalconsole.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def registry() -> InMemorySessionRegistry:
    """Create a fresh registry for each test."""
    return InMemorySessionRegistry()


@pytest.fixture
def audit_store() -> InMemoryEvaluationAuditStore:
    return InMemoryEvaluationAuditStore()


@pytest.fixture
def factory(registry: InMemorySessionRegistry) -> SessionFactory:
    """SessionFactory without auditing."""
    return SessionFactory(registry)


@pytest.fixture
def binding_a() -> Binding:
    return Binding(
        globals={"__name__": "app.views"},
        locals={"x": 1, "user": "alice"},
        filename="app/views.py",
        lineno=10,
        function="show",
    )


@pytest.fixture
def binding_b() -> Binding:
    return Binding(
        globals={"__name__": "app.models"},
        locals={"x": 2, "order_total": 99},
        filename="app/models.py",
        lineno=42,
        function="total",
    )
