"""Unit tests for infrastructure.configuration."""

import pytest

from infrastructure.configuration import Settings
from infrastructure.configuration.features.navigation import (
    DEFAULT_SUPER_ADMIN_ROLES,
    NavigationSettings,
)
from infrastructure.configuration.integrations import ApiSettings
from infrastructure.services.providers import get_settings


@pytest.mark.unit
class TestNavigationSettings:
    """Test suite for SUPER_ADMIN_ROLES parsing."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SUPER_ADMIN_ROLES", raising=False)
        assert NavigationSettings().SUPER_ADMIN_ROLES == DEFAULT_SUPER_ADMIN_ROLES

    def test_json_list(self, monkeypatch):
        monkeypatch.setenv("SUPER_ADMIN_ROLES", '["owner", "admin"]')
        assert NavigationSettings().SUPER_ADMIN_ROLES == ["owner", "admin"]

    def test_comma_separated(self, monkeypatch):
        monkeypatch.setenv("SUPER_ADMIN_ROLES", "owner, admin ,")
        assert NavigationSettings().SUPER_ADMIN_ROLES == ["owner", "admin"]

    def test_empty_value_uses_defaults(self, monkeypatch):
        monkeypatch.setenv("SUPER_ADMIN_ROLES", "")
        assert NavigationSettings().SUPER_ADMIN_ROLES == DEFAULT_SUPER_ADMIN_ROLES

    def test_json_non_list_uses_defaults(self, monkeypatch):
        monkeypatch.setenv("SUPER_ADMIN_ROLES", '{"admin": true}')
        assert NavigationSettings().SUPER_ADMIN_ROLES == DEFAULT_SUPER_ADMIN_ROLES


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_sections_are_built(self, monkeypatch):
        monkeypatch.delenv("API_BASE_URL", raising=False)
        settings = Settings()
        assert settings.api.API_BASE_URL == "http://127.0.0.1:8000/api"
        assert settings.i18n.FALLBACK_LANGUAGE == "en"
        assert settings.navigation.SUPER_ADMIN_ROLES

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://portal.example.com/api")
        monkeypatch.setenv("DEFAULT_LANGUAGE", "ar")
        settings = Settings()
        assert settings.api.API_BASE_URL == "https://portal.example.com/api"
        assert settings.i18n.DEFAULT_LANGUAGE == "ar"

    def test_explicit_section_override(self):
        api = ApiSettings(API_BASE_URL="https://staging.example.com/api")
        assert Settings(api=api).api is api

    def test_is_production(self):
        assert Settings(PREFIX="").is_production is True
        assert Settings(PREFIX="dev-").is_production is False

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()
