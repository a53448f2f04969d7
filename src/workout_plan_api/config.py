"""Configuration settings for the workout plan API."""
import os
from typing import Literal


EnvironmentType = Literal["development", "staging", "production"]
ProviderType = Literal["openai", "anthropic"]


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Text generation
    GENERATION_PROVIDER: ProviderType = "openai"
    OPENAI_MODEL: str = "gpt-4o-mini"
    ANTHROPIC_MODEL: str = "claude-3-5-sonnet-20241022"
    GENERATION_MAX_ATTEMPTS: int = 3
    GENERATION_BACKOFF_SECONDS: float = 2.0

    # API Keys
    OPENAI_API_KEY: str | None = None
    ANTHROPIC_API_KEY: str | None = None

    # Storage
    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Text generation
        provider = os.getenv("GENERATION_PROVIDER", "openai").lower()
        if provider in ("openai", "anthropic"):
            self.GENERATION_PROVIDER = provider  # type: ignore
        else:
            self.GENERATION_PROVIDER = "openai"
        self.OPENAI_MODEL = os.getenv("OPENAI_MODEL", self.OPENAI_MODEL)
        self.ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", self.ANTHROPIC_MODEL)
        self.GENERATION_MAX_ATTEMPTS = max(1, _int_env("GENERATION_MAX_ATTEMPTS", 3))
        self.GENERATION_BACKOFF_SECONDS = max(0.0, _float_env("GENERATION_BACKOFF_SECONDS", 2.0))

        # API Keys
        self.OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
        self.ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")

        # Storage
        self.SUPABASE_URL = os.getenv("SUPABASE_URL")
        self.SUPABASE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_ANON_KEY")


settings = Settings()
