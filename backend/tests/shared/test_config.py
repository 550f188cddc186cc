"""Tests for shared/config.py."""

from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "DonorLink API"
        assert settings.app_version == "0.1.0"
        assert settings.debug is False
        assert settings.port == 8080
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"
        assert settings.cors_origins == ["*"]
        assert settings.supabase_url == ""

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000", "LOG_LEVEL": "DEBUG"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.log_level == "DEBUG"

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "SUPABASE_JWT_SECRET": "test-jwt-secret",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.supabase_jwt_secret == "test-jwt-secret"

    def test_loads_cors_origins_as_json(self):
        """List settings should parse from JSON in the environment."""
        with patch.dict(os.environ, {"CORS_ORIGINS": '["https://app.example.com"]'}):
            settings = Settings(_env_file=None)
            assert settings.cors_origins == ["https://app.example.com"]


class TestGetSettings:
    def test_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)

    def test_is_cached(self):
        """get_settings should return the same instance on repeated calls."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
