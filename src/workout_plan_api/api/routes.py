"""
Workout plan endpoints

- POST /plans/parse: parse already generated plan text
- POST /programs/generate: generate, parse and save a program
- GET /programs/{user_id}: stored program with its day splits
- GET /splits/{split_id}: one stored day split
- GET/PUT /profiles/{user_id}: fitness quiz answers
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from workout_plan_api.api.dependencies import (
    get_profile_store,
    get_program_service,
    get_program_store,
)
from workout_plan_api.errors import GenerationError, PersistenceError
from workout_plan_api.models import (
    FitnessProfile,
    ProgramGenerationResult,
    QuizData,
    WorkoutProgram,
    WorkoutSplit,
)
from workout_plan_api.parsers import ParsedDay, parse_plan
from workout_plan_api.services.profile_store import ProfileStore
from workout_plan_api.services.program_service import ProgramService
from workout_plan_api.services.program_store import ProgramStore

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class ParsePlanRequest(BaseModel):
    text: str = Field(..., description="Generated plan text")


class ParsePlanResponse(BaseModel):
    days: List[ParsedDay]


class GenerateProgramRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    prompt: str = Field(..., min_length=1, max_length=20000)
    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)


class ProgramResponse(BaseModel):
    program: WorkoutProgram
    splits: List[WorkoutSplit]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/plans/parse", response_model=ParsePlanResponse)
def parse_plan_text(request: ParsePlanRequest):
    return ParsePlanResponse(days=parse_plan(request.text))


@router.post("/programs/generate", response_model=ProgramGenerationResult)
async def generate_program(
    request: GenerateProgramRequest,
    service: ProgramService = Depends(get_program_service),
):
    try:
        return await service.generate_program(
            user_id=request.user_id,
            prompt=request.prompt,
            title=request.title,
            description=request.description,
        )
    except GenerationError as e:
        logger.error(f"Plan generation failed after {e.attempts} attempt(s): {e.message}")
        raise HTTPException(status_code=502, detail=f"Plan generation failed: {e.message}")
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/programs/{user_id}", response_model=ProgramResponse)
def get_program(user_id: str, store: ProgramStore = Depends(get_program_store)):
    try:
        program = store.get_program_for_user(user_id)
        if program is None:
            raise HTTPException(status_code=404, detail="No workout program found")
        return ProgramResponse(program=program, splits=store.get_splits(program.id))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/splits/{split_id}", response_model=WorkoutSplit)
def get_split(split_id: str, store: ProgramStore = Depends(get_program_store)):
    try:
        split = store.get_split(split_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if split is None:
        raise HTTPException(status_code=404, detail="No workout split found")
    return split


@router.get("/profiles/{user_id}", response_model=FitnessProfile)
def get_profile(user_id: str, store: ProfileStore = Depends(get_profile_store)):
    try:
        profile = store.get_profile(user_id)
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
    if profile is None:
        raise HTTPException(status_code=404, detail="No fitness profile found")
    return profile


@router.put("/profiles/{user_id}", response_model=FitnessProfile)
def save_profile(user_id: str, quiz_data: QuizData, store: ProfileStore = Depends(get_profile_store)):
    try:
        return store.save_profile(FitnessProfile(user_id=user_id, quiz_data=quiz_data))
    except PersistenceError as e:
        raise HTTPException(status_code=503, detail=str(e))
