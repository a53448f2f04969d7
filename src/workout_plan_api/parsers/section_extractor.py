"""
Section Extractor

Peels the optional WARM-UP, COOL-DOWN and NOTES sections out of a day block
so that only exercise material is left for the exercise extractor.
"""

import logging
from typing import Dict, List, Optional

from .models import SectionExtraction
from .patterns import ALL_CAPS_LABEL_PATTERN, SECTION_LABEL_PATTERN

logger = logging.getLogger(__name__)


def _section_key(label: str) -> str:
    """Map a matched label ("Warm-Up", "NOTES (optional)") to its field name"""
    label = label.lower()
    if label.startswith("warm"):
        return "warm_up"
    if label.startswith("cool"):
        return "cool_down"
    return "notes"


def _section_end(lines: List[str], start: int) -> int:
    """Index of the first line after ``start`` that ends the section"""
    end = start + 1
    while end < len(lines):
        line = lines[end]
        if not line.strip() or ALL_CAPS_LABEL_PATTERN.match(line):
            break
        end += 1
    return end


def extract_sections(block: str) -> SectionExtraction:
    """
    Extract labeled sections from a day block.

    A section starts at a "LABEL:" line (text after the colon included) and
    runs until the next blank line or upper-case label line. Only the first
    occurrence of each label is captured. Captured lines, label line
    included, are removed from the returned remainder.
    """
    lines = block.splitlines()
    sections: Dict[str, Optional[str]] = {}

    for key in ("warm_up", "cool_down", "notes"):
        for i, line in enumerate(lines):
            match = SECTION_LABEL_PATTERN.match(line)
            if not match or _section_key(match.group("label")) != key:
                continue

            end = _section_end(lines, i)
            captured = [match.group("inline")] + lines[i + 1:end]
            text = "\n".join(part.strip() for part in captured).strip()

            sections[key] = text or None
            del lines[i:end]
            logger.debug(f"Extracted {key} section ({end - i} lines)")
            break

    return SectionExtraction(
        warm_up=sections.get("warm_up"),
        cool_down=sections.get("cool_down"),
        notes=sections.get("notes"),
        remainder="\n".join(lines),
    )
