"""Settings loading and the tracing decorator."""

import logging

import pytest

from content.core.config import Settings, get_settings
from content.shared.telemetry import get_logger, setup_logging, traced


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.app_name == "content"
    assert settings.database_url == ""
    assert settings.default_webspace is None
    assert settings.tracing_enabled is True


def test_empty_env_values_are_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_WEBSPACE", "")
    monkeypatch.setenv("TEMPLATES_PATH", " ")
    settings = Settings()
    assert settings.default_webspace is None
    assert settings.templates_path is None


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_setup_logging_level_follows_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    get_settings.cache_clear()
    package_logger = logging.getLogger("content")
    monkeypatch.setattr(package_logger, "handlers", [])
    previous_level = package_logger.level

    try:
        assert setup_logging() is package_logger
        setup_logging()
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert get_logger("content.application").getEffectiveLevel() == logging.DEBUG
    finally:
        package_logger.setLevel(previous_level)


class TestTraced:
    def test_sync_function(self) -> None:
        @traced("test.sync")
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, b=2) == 3
        assert add.__name__ == "add"

    async def test_async_function(self) -> None:
        @traced()
        async def fetch(id: str) -> str:
            return id

        assert await fetch(id="page-1") == "page-1"

    def test_exceptions_propagate(self) -> None:
        @traced("test.error")
        def fail() -> None:
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            fail()

    def test_disabled_tracing_calls_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACING_ENABLED", "false")
        get_settings.cache_clear()

        @traced("test.disabled")
        def double(x: int) -> int:
            return x * 2

        assert double(4) == 8
