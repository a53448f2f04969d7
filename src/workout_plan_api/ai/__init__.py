"""AI client management for the workout plan API."""
from .client_factory import AIClientFactory, AIRequestContext
from .retry import (
    ERROR_MARKER,
    TransientResponseError,
    check_response,
    create_async_retrying,
    create_retrying,
    is_transient_response,
    retry_async_call,
    retry_sync_call,
)

__all__ = [
    "AIClientFactory",
    "AIRequestContext",
    "ERROR_MARKER",
    "TransientResponseError",
    "check_response",
    "create_async_retrying",
    "create_retrying",
    "is_transient_response",
    "retry_async_call",
    "retry_sync_call",
]
