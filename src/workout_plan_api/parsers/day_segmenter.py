"""
Day Segmenter

Splits generated plan text into one block per "Day N: Title" header.
Blocks keep the order in which headers appear; day numbers are neither
renumbered nor deduplicated.
"""

import logging
from typing import List

from .models import DayBlock, DayHeaderMatch
from .patterns import DAY_HEADER_PATTERN, clean_label_text

logger = logging.getLogger(__name__)

# Title of the single day used when the text has no day headers
FALLBACK_DAY_TITLE = "Full Body Workout"


def find_day_headers(text: str) -> List[DayHeaderMatch]:
    """Return every day header in ``text``, left to right."""
    headers = []

    for match in DAY_HEADER_PATTERN.finditer(text):
        day_number = int(match.group(1))
        if day_number < 1:
            # "Day 0:" is not a workout day
            continue

        title = clean_label_text(match.group(2))
        headers.append(DayHeaderMatch(
            day_number=day_number,
            title=title or f"Day {day_number}",
            start_offset=match.start(),
        ))

    return headers


def segment_days(text: str) -> List[DayBlock]:
    """
    Split ``text`` into day blocks.

    Each block runs from its header to the start of the next header, the
    last one to the end of the text. Without any header the whole text
    becomes a single "Full Body Workout" day 1.
    """
    headers = find_day_headers(text)

    if not headers:
        logger.debug("No day headers found, using single fallback day")
        return [DayBlock(
            day_number=1,
            title=FALLBACK_DAY_TITLE,
            start_offset=0,
            text=text,
            synthetic=True,
        )]

    blocks = []
    for i, header in enumerate(headers):
        end = headers[i + 1].start_offset if i + 1 < len(headers) else len(text)
        blocks.append(DayBlock(
            day_number=header.day_number,
            title=header.title,
            start_offset=header.start_offset,
            text=text[header.start_offset:end],
        ))

    return blocks
