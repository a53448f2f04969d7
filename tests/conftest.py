"""
Test fixtures for workout-plan-api.

Provides in-memory stores, a scripted generation transport and a FastAPI
TestClient with dependencies overridden, so tests run offline.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import workout_plan_api...`
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from workout_plan_api.api.dependencies import (
    get_generation_client,
    get_profile_store,
    get_program_store,
)
from workout_plan_api.main import app
from workout_plan_api.services.generation_service import GenerationClient
from workout_plan_api.services.profile_store import InMemoryProfileStore
from workout_plan_api.services.program_store import InMemoryProgramStore


# ---------------------------------------------------------------------------
# Sample generated text
# ---------------------------------------------------------------------------


SAMPLE_PLAN_TEXT = """Here is your personalized 2-day plan!

Day 1: Upper Body
WARM-UP:
5 minutes of light cardio
Arm circles

Bench Press - 3 sets x 8-12 reps
Keep your shoulder blades retracted.
Bent Over Row: 3 sets x 10 reps

COOL-DOWN:
Chest stretch, 30 seconds

Day 2: Lower Body
Barbell Squat - 4 sets x 6 reps
Romanian Deadlift - 3 sets x 10 reps
NOTES (optional):
Rest 90 seconds between sets.
"""


@pytest.fixture
def sample_plan_text() -> str:
    return SAMPLE_PLAN_TEXT


# ---------------------------------------------------------------------------
# Stores and generation
# ---------------------------------------------------------------------------


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def program_store() -> InMemoryProgramStore:
    return InMemoryProgramStore()


@pytest.fixture
def make_generation_client():
    """Build a GenerationClient whose transport replays ``responses``."""

    def _make(responses, max_attempts=3, backoff_seconds=2.0):
        transport = MagicMock(side_effect=list(responses))
        return GenerationClient(
            transport,
            max_attempts=max_attempts,
            backoff_seconds=backoff_seconds,
            sleep=MagicMock(),
            async_sleep=AsyncMock(),
        )

    return _make


# ---------------------------------------------------------------------------
# Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def api_client(profile_store, program_store):
    """TestClient with in-memory stores."""
    app.dependency_overrides[get_profile_store] = lambda: profile_store
    app.dependency_overrides[get_program_store] = lambda: program_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def override_generation(make_generation_client):
    """Route /programs/generate through a scripted transport."""

    def _override(responses):
        client = make_generation_client(responses)
        app.dependency_overrides[get_generation_client] = lambda: client
        return client

    return _override
