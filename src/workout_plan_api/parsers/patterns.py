"""
Text patterns shared by the plan parsers.

Generated plans follow loose conventions only, so every pattern here is
case-insensitive unless noted and tolerates the markdown emphasis that text
generation services like to sprinkle around labels.
"""

import re

# "Day 3: Upper Body", "day3-legs" (offsets must point at "day")
# "everyday 10-15" and "today 2-3" are not headers
DAY_HEADER_PATTERN = re.compile(
    r'(?<![A-Za-z])day[ \t]*(\d+)'  # The word "day" + optional spaces + day number
    r'[:\-]'  # Separator
    r'(.*)$',  # Title to end of line
    re.IGNORECASE | re.MULTILINE
)

# "WARM-UP:", "**Cool-down:** 5 min walk", "NOTES (optional):"
SECTION_LABEL_PATTERN = re.compile(
    r'^[\s*#_]*'  # Optional indentation / markdown
    r'(?P<label>warm[\s-]?up|cool[\s-]?down|notes(?:\s*\([^)]*\))?)'
    r'[\s*_]*:[\s*_]*'  # Colon, possibly wrapped in emphasis
    r'(?P<inline>.*)$',  # Text on the label line itself
    re.IGNORECASE
)

# Any upper-case "LABEL:" line; ends a captured section. Case-sensitive.
ALL_CAPS_LABEL_PATTERN = re.compile(r'^[\s*#_]*[A-Z][A-Z0-9 \-()/&]*[\s*_]*:')

# "Barbell Squat - 3 sets x 8-12 reps", "1. Push-Up: 3 sets × 10 reps"
EXERCISE_HEADER_PATTERN = re.compile(
    r'^\s*(?:[-*•]\s+|\d+[.)]\s*)?'  # Optional list marker
    r'(?P<name>.+?)'  # Exercise name
    r'\s*[:\-]\s*'  # Separator
    r'(?P<sets>\d+)\s*sets?\s*'  # Sets
    r'[x×]\s*'  # Connector
    r'(?P<reps>\d+)(?:\s*-\s*(?P<reps_max>\d+))?\s*reps?\b'  # Reps or rep range
    r'(?P<tail>.*)$',
    re.IGNORECASE
)

# Name fragments that mark a label rather than an exercise
NON_EXERCISE_NAME_FRAGMENTS = ("note", "tip", "important")
NON_EXERCISE_NAMES = ("warm-up", "cool-down")

# Markdown emphasis / heading characters trimmed from titles and names
MARKDOWN_CHARS = "*_#"


def clean_label_text(text: str) -> str:
    """Trim whitespace and surrounding markdown emphasis."""
    return text.strip().strip(MARKDOWN_CHARS).strip()
