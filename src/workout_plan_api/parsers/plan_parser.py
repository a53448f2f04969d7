"""
Plan Parser

Turns raw generated plan text into structured workout days:

    text -> day blocks -> sections + remainder -> exercises -> ParsedDay

Pure and deterministic. Parsing never fails: text without any day header
yields a single "Full Body Workout" day with no exercises.
"""

import logging
from typing import List

from .day_segmenter import segment_days
from .exercise_extractor import extract_exercises
from .models import ParsedDay
from .section_extractor import extract_sections

logger = logging.getLogger(__name__)


def parse_plan(text: str) -> List[ParsedDay]:
    """Parse generated plan text into days in order of appearance"""
    days = []

    for block in segment_days(text):
        if block.synthetic:
            # No day structure to trust: report an empty full body day
            days.append(ParsedDay(day_number=block.day_number, name=block.title))
            continue

        sections = extract_sections(block.text)
        exercises = extract_exercises(sections.remainder)

        days.append(ParsedDay(
            day_number=block.day_number,
            name=block.title,
            exercises=exercises,
            warm_up=sections.warm_up,
            cool_down=sections.cool_down,
            notes=sections.notes,
        ))

    logger.info(
        f"Parsed plan: {len(days)} day(s), "
        f"{sum(len(d.exercises) for d in days)} exercise(s)"
    )
    return days
