"""
Parser Models

Pydantic models for the structured workout program extracted from
generated plan text. All models are frozen: a parse call builds them once
and hands them to the caller.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class DayHeaderMatch(BaseModel):
    """One "Day N: Title" header found in the generated text"""
    model_config = ConfigDict(frozen=True)

    day_number: int = Field(..., ge=1)
    title: str
    start_offset: int = Field(..., ge=0, description="Character offset where the header begins")


class DayBlock(BaseModel):
    """Slice of the generated text belonging to one workout day"""
    model_config = ConfigDict(frozen=True)

    day_number: int = Field(..., ge=1)
    title: str
    start_offset: int = Field(default=0, ge=0)
    text: str = ""
    synthetic: bool = Field(default=False, description="Fallback block for text without day headers")


class SectionExtraction(BaseModel):
    """Labeled sections peeled out of a day block"""
    model_config = ConfigDict(frozen=True)

    warm_up: Optional[str] = None
    cool_down: Optional[str] = None
    notes: Optional[str] = None
    remainder: str = Field(default="", description="Day text with the captured sections removed")


class ParsedExercise(BaseModel):
    """Single exercise declared by an exercise header line"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1, description="Lower bound when the source gives a range")


class ParsedDay(BaseModel):
    """Structured workout day"""
    model_config = ConfigDict(frozen=True)

    day_number: int
    name: str
    exercises: List[ParsedExercise] = Field(default_factory=list)
    warm_up: Optional[str] = None
    cool_down: Optional[str] = None
    notes: Optional[str] = None


# Days in order of appearance in the source text
ParsedPlan = List[ParsedDay]
