"""Tests for environments, container settings and configuration components."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jolien.config import (
    CONFIG_ENVIRONMENT_ERROR,
    ComponentSettings,
    ConfigError,
    ContainerSettings,
    Environment,
    get_settings,
)
from jolien.di import Container, Scope, is_component


class DatabaseConfig(ComponentSettings):
    url: str = "postgresql://localhost:5432"
    pool_size: int = 10


class TestEnvironment:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("dev", Environment.DEVELOPMENT),
            ("Development", Environment.DEVELOPMENT),
            (" test ", Environment.TESTING),
            ("testing", Environment.TESTING),
            ("PROD", Environment.PRODUCTION),
            (None, Environment.DEVELOPMENT),
        ],
    )
    def test_from_string(self, value: str | None, expected: Environment) -> None:
        assert Environment.from_string(value) is expected

    def test_from_string_invalid(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            Environment.from_string("staging")
        assert exc_info.value.code is CONFIG_ENVIRONMENT_ERROR
        assert exc_info.value.context == {"provided_value": "staging"}

    def test_get_current_prefers_jolien_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("JOLIEN_ENV", "test")
        assert Environment.get_current() is Environment.TESTING

    def test_get_current_fallbacks(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JOLIEN_ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("ENV", "prod")
        assert Environment.get_current() is Environment.PRODUCTION

    def test_get_current_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("JOLIEN_ENV", "ENVIRONMENT", "ENV"):
            monkeypatch.delenv(name, raising=False)
        assert Environment.get_current() is Environment.DEVELOPMENT


@pytest.mark.usefixtures("clear_settings_cache")
class TestContainerSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("JOLIEN_STRICT_PROCEED", "JOLIEN_DEFAULT_SCOPE", "JOLIEN_CHECK_CYCLES"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()

        assert settings.strict_proceed is False
        assert settings.default_scope == "singleton"
        assert settings.check_cycles is True

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JOLIEN_STRICT_PROCEED", "1")
        monkeypatch.setenv("JOLIEN_DEFAULT_SCOPE", "prototype")
        monkeypatch.setenv("JOLIEN_CHECK_CYCLES", "false")
        settings = get_settings()

        assert settings.strict_proceed is True
        assert Scope(settings.default_scope) is Scope.PROTOTYPE
        assert settings.check_cycles is False

    def test_rejects_unknown_scope(self) -> None:
        with pytest.raises(ValidationError):
            ContainerSettings(default_scope="request")  # type: ignore[arg-type]


class TestComponentSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("APP_URL", raising=False)
        monkeypatch.delenv("APP_POOL_SIZE", raising=False)
        config = DatabaseConfig()
        assert config.url == "postgresql://localhost:5432"
        assert config.pool_size == 10

    def test_reads_app_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_URL", "postgresql://db:5432/app")
        monkeypatch.setenv("APP_POOL_SIZE", "3")
        config = DatabaseConfig()
        assert config.url == "postgresql://db:5432/app"
        assert config.pool_size == 3

    def test_is_registrable_component(self, container: Container) -> None:
        config = DatabaseConfig(url="sqlite://")

        assert is_component(config)
        assert container.register(config) is config
        assert container.lookup(DatabaseConfig) is config

    def test_prototype_copies(self, container: Container) -> None:
        config = DatabaseConfig(url="sqlite://", pool_size=1)
        container.register(config, Scope.PROTOTYPE)

        first = container.lookup(DatabaseConfig)
        first.pool_size = 99
        second = container.lookup(DatabaseConfig)

        assert first is not second
        assert second.pool_size == 1
        assert second.url == "sqlite://"
