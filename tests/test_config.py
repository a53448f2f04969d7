"""Tests for environment-driven settings."""
import pytest

from workout_plan_api.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "ENVIRONMENT",
        "GENERATION_PROVIDER",
        "GENERATION_MAX_ATTEMPTS",
        "GENERATION_BACKOFF_SECONDS",
        "SUPABASE_SERVICE_ROLE_KEY",
        "SUPABASE_ANON_KEY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.ENVIRONMENT == "development"
    assert settings.GENERATION_PROVIDER == "openai"
    assert settings.GENERATION_MAX_ATTEMPTS == 3
    assert settings.GENERATION_BACKOFF_SECONDS == 2.0
    assert settings.SUPABASE_KEY is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("GENERATION_PROVIDER", "Anthropic")
    monkeypatch.setenv("GENERATION_MAX_ATTEMPTS", "5")
    monkeypatch.setenv("GENERATION_BACKOFF_SECONDS", "0.5")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

    settings = Settings()

    assert settings.GENERATION_PROVIDER == "anthropic"
    assert settings.GENERATION_MAX_ATTEMPTS == 5
    assert settings.GENERATION_BACKOFF_SECONDS == 0.5
    assert settings.SUPABASE_KEY == "anon"


def test_service_role_key_preferred(monkeypatch):
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "service")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")

    assert Settings().SUPABASE_KEY == "service"


@pytest.mark.parametrize("name,value,attr,expected", [
    ("ENVIRONMENT", "qa", "ENVIRONMENT", "development"),
    ("GENERATION_PROVIDER", "gemini", "GENERATION_PROVIDER", "openai"),
    ("GENERATION_MAX_ATTEMPTS", "lots", "GENERATION_MAX_ATTEMPTS", 3),
    ("GENERATION_MAX_ATTEMPTS", "0", "GENERATION_MAX_ATTEMPTS", 1),
])
def test_invalid_values_fall_back(monkeypatch, name, value, attr, expected):
    monkeypatch.setenv(name, value)

    assert getattr(Settings(), attr) == expected
