"""Generation client, stores and program orchestration."""
from .generation_service import (
    AnthropicTextTransport,
    GenerationClient,
    OpenAITextTransport,
    create_generation_client,
)
from .profile_store import InMemoryProfileStore, ProfileStore, SupabaseProfileStore
from .program_service import ProgramService
from .program_store import InMemoryProgramStore, ProgramStore, SupabaseProgramStore

__all__ = [
    "AnthropicTextTransport",
    "GenerationClient",
    "InMemoryProfileStore",
    "InMemoryProgramStore",
    "OpenAITextTransport",
    "ProfileStore",
    "ProgramService",
    "ProgramStore",
    "SupabaseProfileStore",
    "SupabaseProgramStore",
    "create_generation_client",
]
