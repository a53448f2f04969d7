"""
Exercise Line Extractor

Scans the exercise part of a day block line by line. A header line such as
"Barbell Squat - 3 sets x 8-12 reps" opens an exercise; following free-text
lines become its description until the next header. Lines that never match
the header pattern are dropped; no default exercise is synthesized for them.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .models import ParsedExercise
from .patterns import (
    DAY_HEADER_PATTERN,
    EXERCISE_HEADER_PATTERN,
    NON_EXERCISE_NAME_FRAGMENTS,
    NON_EXERCISE_NAMES,
    SECTION_LABEL_PATTERN,
    clean_label_text,
)

logger = logging.getLogger(__name__)

# Characters stripped from text trailing "reps" on a header line
_TAIL_PUNCTUATION = " \t,;:.-–—"


@dataclass
class _ExerciseDraft:
    """Exercise still collecting description lines"""
    name: str
    sets: int
    reps: int
    description: List[str] = field(default_factory=list)

    def build(self) -> ParsedExercise:
        return ParsedExercise(
            name=self.name,
            sets=self.sets,
            reps=self.reps,
            description=" ".join(self.description),
        )


def is_label_name(name: str) -> bool:
    """True when a header-shaped line names a label instead of an exercise"""
    folded = name.casefold()
    if folded in NON_EXERCISE_NAMES:
        return True
    return any(fragment in folded for fragment in NON_EXERCISE_NAME_FRAGMENTS)


def parse_exercise_header(line: str) -> Optional[_ExerciseDraft]:
    """Parse one exercise header line, or return None if it is not one"""
    match = EXERCISE_HEADER_PATTERN.match(line)
    if not match:
        return None

    name = clean_label_text(match.group("name"))
    sets = int(match.group("sets"))
    # Rep ranges ("8-12") keep the lower bound
    reps = int(match.group("reps"))

    if not name or sets < 1 or reps < 1:
        logger.debug(f"Dropping malformed exercise line: {line!r}")
        return None

    draft = _ExerciseDraft(name=name, sets=sets, reps=reps)
    tail = match.group("tail").strip(_TAIL_PUNCTUATION)
    if tail:
        draft.description.append(tail)
    return draft


def _is_skippable(line: str) -> bool:
    return bool(DAY_HEADER_PATTERN.search(line) or SECTION_LABEL_PATTERN.match(line))


def extract_exercises(remainder: str) -> List[ParsedExercise]:
    """
    Extract the ordered exercises of one day.

    Blank lines separate exercises loosely: they never close the current
    exercise, only the next header does.
    """
    exercises: List[ParsedExercise] = []
    current: Optional[_ExerciseDraft] = None

    for raw_line in remainder.splitlines():
        line = raw_line.strip()

        if not line or _is_skippable(line):
            continue

        draft = parse_exercise_header(line)

        if draft is not None and is_label_name(draft.name):
            logger.debug(f"Skipping label line shaped like an exercise: {line!r}")
            continue

        if draft is not None:
            if current is not None:
                exercises.append(current.build())
            current = draft
        elif current is not None:
            current.description.append(line)

    if current is not None:
        exercises.append(current.build())

    return exercises
