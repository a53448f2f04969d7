"""AI client factory for the text generation providers."""
import logging
from dataclasses import dataclass
from typing import Any

from workout_plan_api.config import settings


logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 60.0


@dataclass
class AIRequestContext:
    """Context for AI requests, forwarded to the provider for abuse tracking."""

    user_id: str | None = None
    feature_name: str | None = None


class AIClientFactory:
    """Factory for creating AI provider clients."""

    @staticmethod
    def create_openai_client(timeout: float = DEFAULT_TIMEOUT) -> Any:
        """
        Create an OpenAI client.

        Args:
            timeout: Client timeout in seconds

        Returns:
            OpenAI client instance

        Raises:
            ValueError: If the API key is not configured
        """
        import openai

        api_key = settings.OPENAI_API_KEY
        if not api_key:
            raise ValueError("OpenAI API key not configured. Set OPENAI_API_KEY environment variable.")

        logger.debug("Creating OpenAI client")
        return openai.OpenAI(api_key=api_key, timeout=timeout)

    @staticmethod
    def create_anthropic_client(timeout: float = DEFAULT_TIMEOUT) -> Any:
        """
        Create an Anthropic client.

        Args:
            timeout: Client timeout in seconds

        Returns:
            Anthropic client instance

        Raises:
            ValueError: If the API key is not configured
        """
        from anthropic import Anthropic

        api_key = settings.ANTHROPIC_API_KEY
        if not api_key:
            raise ValueError("Anthropic API key not configured. Set ANTHROPIC_API_KEY environment variable.")

        logger.debug("Creating Anthropic client")
        return Anthropic(api_key=api_key, timeout=timeout)
