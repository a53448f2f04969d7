"""Pydantic models for fitness profiles and stored workout programs."""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from workout_plan_api.parsers.models import ParsedDay, ParsedExercise


class WorkoutSchedule(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    days_per_week: str = ""
    session_length: str = ""


class BodyStats(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    height: str = ""
    weight: str = ""
    age: str = ""
    gender: str = ""


class QuizData(BaseModel):
    """Answers to the fitness assessment quiz"""
    # Stored as camelCase JSON ("fitnessLevel", "workoutSchedule", ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    fitness_level: str = ""
    fitness_goals: str = ""
    workout_schedule: WorkoutSchedule = Field(default_factory=WorkoutSchedule)
    equipment: str = ""
    limitations: str = ""
    workout_preference: str = ""
    body_stats: BodyStats = Field(default_factory=BodyStats)


class FitnessProfile(BaseModel):
    id: Optional[str] = None
    user_id: str
    quiz_data: QuizData = Field(default_factory=QuizData)
    created_at: Optional[str] = None


class WorkoutProgram(BaseModel):
    id: Optional[str] = None
    user_id: str
    fitness_profile_id: Optional[str] = None
    title: str
    description: str = ""
    created_at: Optional[str] = None


class WorkoutSplit(BaseModel):
    """One persisted day of a workout program"""
    id: Optional[str] = None
    program_id: str
    name: str
    day_number: int
    exercises: List[ParsedExercise] = Field(default_factory=list)
    warm_up: Optional[str] = None
    cool_down: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_parsed_day(cls, program_id: str, day: ParsedDay) -> "WorkoutSplit":
        return cls(
            program_id=program_id,
            name=day.name,
            day_number=day.day_number,
            exercises=list(day.exercises),
            warm_up=day.warm_up,
            cool_down=day.cool_down,
            notes=day.notes,
        )


class ProgramGenerationResult(BaseModel):
    """Outcome of generate -> parse -> persist"""
    raw_text: str
    days: List[ParsedDay] = Field(default_factory=list)
    program_id: Optional[str] = None
    saved: bool = False
    error: Optional[str] = Field(default=None, description="Persistence failure message when saved is False")
