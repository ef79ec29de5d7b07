"""Tests for config secret validation."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from safety_api.core.config import Settings

BASE_ENV = {
    "SUPABASE_URL": "https://test.supabase.co",
    "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
}


class TestSecretValidation:
    """Test that required secrets are validated at startup."""

    def test_missing_single_secret_raises_error(self):
        env = {**BASE_ENV, "SUPABASE_URL": ""}
        with patch.dict("os.environ", env, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "SUPABASE_URL" in str(exc_info.value)

    def test_missing_multiple_secrets_lists_all(self):
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            error_str = str(exc_info.value)
            assert "SUPABASE_URL" in error_str
            assert "SUPABASE_SERVICE_ROLE_KEY" in error_str

    def test_whitespace_secret_counts_as_missing(self):
        env = {**BASE_ENV, "SUPABASE_SERVICE_ROLE_KEY": "   "}
        with patch.dict("os.environ", env, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_all_secrets_present_succeeds(self):
        with patch.dict("os.environ", BASE_ENV, clear=True):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"


class TestDefaults:
    def test_moderation_defaults(self):
        with patch.dict("os.environ", BASE_ENV, clear=True):
            settings = Settings(_env_file=None)
            assert settings.environment == "development"
            assert settings.audit_table == "admin_audit"
            assert settings.violation_history_days == 30
            assert settings.rate_limit_enabled is True

    def test_audit_table_override(self):
        env = {**BASE_ENV, "AUDIT_TABLE": "moderation_audit"}
        with patch.dict("os.environ", env, clear=True):
            assert Settings(_env_file=None).audit_table == "moderation_audit"


class TestCorsValidation:
    """Test CORS origin validation in production."""

    def test_cors_allows_localhost_in_development(self):
        env = {**BASE_ENV, "CORS_ORIGINS": '["http://localhost:5173"]'}
        with patch.dict("os.environ", env, clear=True):
            settings = Settings(_env_file=None)
            assert "http://localhost:5173" in settings.cors_origins

    def test_cors_rejects_localhost_in_production(self):
        env = {
            **BASE_ENV,
            "ENVIRONMENT": "production",
            "CORS_ORIGINS": '["http://localhost:5173"]',
        }
        with patch.dict("os.environ", env, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)
            assert "localhost" in str(exc_info.value).lower()

    def test_cors_rejects_wildcard_in_production(self):
        env = {**BASE_ENV, "ENVIRONMENT": "production", "CORS_ORIGINS": '["*"]'}
        with patch.dict("os.environ", env, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)
            assert "wildcard" in str(exc_info.value).lower()

    def test_cors_allows_https_in_production(self):
        env = {
            **BASE_ENV,
            "ENVIRONMENT": "production",
            "CORS_ORIGINS": '["https://app.example.com"]',
        }
        with patch.dict("os.environ", env, clear=True):
            settings = Settings(_env_file=None)
            assert "https://app.example.com" in settings.cors_origins
