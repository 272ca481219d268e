"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "LOCAL_STORE_PATH",
    "SIGNUP_INVITE_CODE",
    "CREATOR_EMAILS",
    "DEFAULT_REST_SECONDS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.is_development is True

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_anon_key is None
        assert settings.remote_enabled is False

    def test_local_store_default(self, clean_env):
        assert Settings(_env_file=None).local_store_path == "~/.dreamshape/store.json"

    def test_session_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.default_rest_seconds == 90
        assert settings.remote_push_workers == 2
        assert settings.signup_invite_code is None
        assert settings.creator_emails_list == []


@pytest.mark.unit
class TestSettingsFromEnvironment:
    def test_reads_environment_variables(self, clean_env, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
        monkeypatch.setenv("DEFAULT_REST_SECONDS", "120")
        monkeypatch.setenv("CREATOR_EMAILS", "Coach@Example.com, second@example.com,")

        settings = Settings(_env_file=None)

        assert settings.remote_enabled is True
        assert settings.default_rest_seconds == 120
        assert settings.creator_emails_list == ["coach@example.com", "second@example.com"]

    def test_service_role_key_preferred_for_data(self, clean_env):
        settings = Settings(
            supabase_url="https://project.supabase.co",
            supabase_service_role_key="service",
            supabase_anon_key="anon",
            _env_file=None,
        )
        assert settings.supabase_key == "service"
        assert settings.supabase_auth_key == "anon"


@pytest.mark.unit
class TestSettingsValidation:
    def test_environment_is_normalized(self, clean_env):
        settings = Settings(environment="PRODUCTION", _env_file=None)
        assert settings.environment == "production"
        assert settings.is_production is True

    def test_invalid_environment_rejected(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(environment="moon", _env_file=None)

    def test_rest_seconds_must_be_positive(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(default_rest_seconds=0, _env_file=None)

    def test_rest_seconds_must_be_a_session_choice(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(default_rest_seconds=100, _env_file=None)
        assert Settings(default_rest_seconds=240, _env_file=None).default_rest_seconds == 240


@pytest.mark.unit
class TestGetSettings:
    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
