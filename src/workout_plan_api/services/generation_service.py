"""Text generation client: provider transports plus the retry policy."""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Protocol

from workout_plan_api.ai import (
    AIClientFactory,
    AIRequestContext,
    check_response,
    retry_async_call,
    retry_sync_call,
)
from workout_plan_api.config import settings
from workout_plan_api.errors import GenerationError


logger = logging.getLogger(__name__)


class TextTransport(Protocol):
    """Single call to a text generation provider. Returns None when empty."""

    def __call__(self, prompt: str) -> Optional[str]:
        ...


class OpenAITextTransport:
    """Generate text with the OpenAI chat completions API."""

    def __init__(
        self,
        model: Optional[str] = None,
        context: Optional[AIRequestContext] = None,
        client: Any = None,
    ):
        self.model = model or settings.OPENAI_MODEL
        self.context = context or AIRequestContext(feature_name="workout_plan")
        self._client = client

    def __call__(self, prompt: str) -> Optional[str]:
        if self._client is None:
            self._client = AIClientFactory.create_openai_client()

        kwargs: dict[str, Any] = {}
        if self.context.user_id:
            kwargs["user"] = self.context.user_id

        response = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content


class AnthropicTextTransport:
    """Generate text with the Anthropic messages API."""

    MAX_TOKENS = 4096

    def __init__(
        self,
        model: Optional[str] = None,
        context: Optional[AIRequestContext] = None,
        client: Any = None,
    ):
        self.model = model or settings.ANTHROPIC_MODEL
        self.context = context or AIRequestContext(feature_name="workout_plan")
        self._client = client

    def __call__(self, prompt: str) -> Optional[str]:
        if self._client is None:
            self._client = AIClientFactory.create_anthropic_client()

        kwargs: dict[str, Any] = {}
        if self.context.user_id:
            kwargs["metadata"] = {"user_id": self.context.user_id}

        message = self._client.messages.create(
            model=self.model,
            max_tokens=self.MAX_TOKENS,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        if not message.content:
            return None
        return getattr(message.content[0], "text", None)


class GenerationClient:
    """
    Text generation with bounded, fixed-delay retry.

    Empty responses, responses starting with "Error:" and exceptions raised
    by the transport all count as failed attempts. Once ``max_attempts``
    attempts have failed, a GenerationError carrying the last message is
    raised.
    """

    def __init__(
        self,
        transport: TextTransport,
        max_attempts: Optional[int] = None,
        backoff_seconds: Optional[float] = None,
        sleep: Optional[Callable[[float], None]] = None,
        async_sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        self.transport = transport
        self.max_attempts = max_attempts or settings.GENERATION_MAX_ATTEMPTS
        self.backoff_seconds = (
            settings.GENERATION_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds
        )
        self._sleep = sleep
        self._async_sleep = async_sleep

    def _attempt(self, prompt: str) -> str:
        return check_response(self.transport(prompt))

    async def _attempt_async(self, prompt: str) -> str:
        # Provider SDK calls block; keep them off the event loop
        text = await asyncio.to_thread(self.transport, prompt)
        return check_response(text)

    def generate(self, prompt: str) -> str:
        """
        Generate text for ``prompt``.

        Raises:
            GenerationError: If every attempt failed
        """
        try:
            return retry_sync_call(
                self._attempt,
                prompt,
                max_attempts=self.max_attempts,
                backoff_seconds=self.backoff_seconds,
                sleep=self._sleep,
            )
        except Exception as e:
            raise GenerationError(str(e), attempts=self.max_attempts) from e

    async def generate_async(self, prompt: str) -> str:
        """Async variant of :meth:`generate`; same policy and errors."""
        try:
            return await retry_async_call(
                self._attempt_async,
                prompt,
                max_attempts=self.max_attempts,
                backoff_seconds=self.backoff_seconds,
                sleep=self._async_sleep,
            )
        except Exception as e:
            raise GenerationError(str(e), attempts=self.max_attempts) from e


def create_generation_client(
    provider: Optional[str] = None,
    user_id: Optional[str] = None,
) -> GenerationClient:
    """
    Build a GenerationClient for the configured provider.

    Args:
        provider: "openai" or "anthropic" (defaults to GENERATION_PROVIDER)
        user_id: Optional user ID forwarded to the provider

    Raises:
        ValueError: If the provider is unknown
    """
    provider = (provider or settings.GENERATION_PROVIDER).lower()
    context = AIRequestContext(user_id=user_id, feature_name="workout_plan")

    if provider == "openai":
        transport: TextTransport = OpenAITextTransport(context=context)
    elif provider == "anthropic":
        transport = AnthropicTextTransport(context=context)
    else:
        raise ValueError(f"Unknown generation provider: {provider}. Use 'openai' or 'anthropic'.")

    logger.debug(f"Using {provider} text generation")
    return GenerationClient(transport)
