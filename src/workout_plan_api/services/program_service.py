"""Generate, parse and persist a user's workout program."""
import logging
from typing import Optional

from workout_plan_api.errors import PersistenceError
from workout_plan_api.models import ProgramGenerationResult, WorkoutProgram
from workout_plan_api.parsers import parse_plan
from workout_plan_api.services.generation_service import GenerationClient
from workout_plan_api.services.profile_store import ProfileStore
from workout_plan_api.services.program_store import ProgramStore

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM_TITLE = "Personalized Workout Program"
DEFAULT_PROGRAM_DESCRIPTION = "Your personalized workout program based on your fitness profile."


class ProgramService:
    """
    Runs generation, parsing and persistence for one program request.

    A GenerationError propagates to the caller. A PersistenceError after a
    successful generation does not: the parsed plan is still returned,
    flagged as unsaved.
    """

    def __init__(
        self,
        generation_client: GenerationClient,
        profile_store: ProfileStore,
        program_store: ProgramStore,
    ):
        self.generation_client = generation_client
        self.profile_store = profile_store
        self.program_store = program_store

    async def generate_program(
        self,
        user_id: str,
        prompt: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ProgramGenerationResult:
        profile = self.profile_store.get_profile(user_id)

        raw_text = await self.generation_client.generate_async(prompt)
        days = parse_plan(raw_text)

        program = WorkoutProgram(
            user_id=user_id,
            fitness_profile_id=profile.id if profile else None,
            title=title or DEFAULT_PROGRAM_TITLE,
            description=description or DEFAULT_PROGRAM_DESCRIPTION,
        )

        program_id = None
        try:
            program_id = self.program_store.save_program(program)
            for day in days:
                self.program_store.save_day_split(program_id, day)
        except PersistenceError as e:
            logger.error(f"Generated plan for {user_id} could not be saved: {e}")
            # program_id is set when only a split save failed
            return ProgramGenerationResult(
                raw_text=raw_text,
                days=days,
                program_id=program_id,
                saved=False,
                error=str(e),
            )

        logger.info(f"Saved program {program_id} for {user_id} with {len(days)} day(s)")
        return ProgramGenerationResult(raw_text=raw_text, days=days, program_id=program_id, saved=True)
