"""FastAPI dependencies wiring stores and the generation client."""
from functools import lru_cache

from fastapi import Depends

from workout_plan_api.services.generation_service import GenerationClient, create_generation_client
from workout_plan_api.services.profile_store import (
    InMemoryProfileStore,
    ProfileStore,
    SupabaseProfileStore,
)
from workout_plan_api.services.program_service import ProgramService
from workout_plan_api.services.program_store import (
    InMemoryProgramStore,
    ProgramStore,
    SupabaseProgramStore,
)
from workout_plan_api.services.supabase_client import get_supabase_client


@lru_cache(maxsize=1)
def get_profile_store() -> ProfileStore:
    client = get_supabase_client()
    return SupabaseProfileStore(client) if client else InMemoryProfileStore()


@lru_cache(maxsize=1)
def get_program_store() -> ProgramStore:
    client = get_supabase_client()
    return SupabaseProgramStore(client) if client else InMemoryProgramStore()


def get_generation_client() -> GenerationClient:
    return create_generation_client()


def get_program_service(
    generation_client: GenerationClient = Depends(get_generation_client),
    profile_store: ProfileStore = Depends(get_profile_store),
    program_store: ProgramStore = Depends(get_program_store),
) -> ProgramService:
    return ProgramService(generation_client, profile_store, program_store)
