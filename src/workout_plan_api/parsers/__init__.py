"""Parsers turning generated plan text into structured workout days."""
from .day_segmenter import FALLBACK_DAY_TITLE, find_day_headers, segment_days
from .exercise_extractor import extract_exercises
from .models import (
    DayBlock,
    DayHeaderMatch,
    ParsedDay,
    ParsedExercise,
    ParsedPlan,
    SectionExtraction,
)
from .plan_parser import parse_plan
from .section_extractor import extract_sections

__all__ = [
    "FALLBACK_DAY_TITLE",
    "DayBlock",
    "DayHeaderMatch",
    "ParsedDay",
    "ParsedExercise",
    "ParsedPlan",
    "SectionExtraction",
    "extract_exercises",
    "extract_sections",
    "find_day_headers",
    "parse_plan",
    "segment_days",
]
