"""Unit tests for the exercise line extractor."""
import pytest

from workout_plan_api.parsers.exercise_extractor import (
    extract_exercises,
    is_label_name,
    parse_exercise_header,
)
from workout_plan_api.parsers.models import ParsedExercise


class TestParseExerciseHeader:
    """Test single header line parsing."""

    def test_rep_range_takes_lower_bound(self):
        draft = parse_exercise_header("Barbell Squat - 3 sets x 8-12 reps")

        assert draft is not None
        assert draft.build() == ParsedExercise(name="Barbell Squat", description="", sets=3, reps=8)

    @pytest.mark.parametrize(
        "line,name,sets,reps",
        [
            ("Push-Up - 3 sets x 10 reps", "Push-Up", 3, 10),
            ("Bent Over Row: 4 sets x 12 reps", "Bent Over Row", 4, 12),
            ("Plank: 1 set x 1 rep", "Plank", 1, 1),
            ("Lat Pulldown: 3 sets × 10-15 reps", "Lat Pulldown", 3, 10),
            ("- Dumbbell Curl: 3 SETS X 12 REPS", "Dumbbell Curl", 3, 12),
            ("1. Overhead Press - 5 sets x 5 reps", "Overhead Press", 5, 5),
            ("**Hip Thrust**: 3 sets x 10 reps", "Hip Thrust", 3, 10),
        ],
    )
    def test_header_variants(self, line, name, sets, reps):
        draft = parse_exercise_header(line)

        assert draft is not None
        assert (draft.name, draft.sets, draft.reps) == (name, sets, reps)

    @pytest.mark.parametrize(
        "line",
        [
            "Squat 3x10",
            "Do 3 sets of squats",
            "Bench Press - three sets x ten reps",
            "Rest 60 seconds between sets",
            "Squat - 0 sets x 10 reps",
        ],
    )
    def test_non_headers_return_none(self, line):
        assert parse_exercise_header(line) is None

    def test_text_after_reps_seeds_description(self):
        draft = parse_exercise_header("Deadlift - 3 sets x 5 reps, rest 2 minutes")

        assert draft.build().description == "rest 2 minutes"


class TestIsLabelName:
    @pytest.mark.parametrize(
        "name",
        ["Note", "Important", "Pro Tip", "warm-up", "COOL-DOWN", "Notes for today"],
    )
    def test_label_names(self, name):
        assert is_label_name(name) is True

    @pytest.mark.parametrize("name", ["Barbell Squat", "Warm-up Squat", "Push-Up"])
    def test_exercise_names(self, name):
        assert is_label_name(name) is False


class TestExtractExercises:
    """Test the line-by-line exercise state machine."""

    def test_following_lines_become_description(self):
        text = (
            "Barbell Squat - 3 sets x 8-12 reps\n"
            "Keep your chest up.\n"
            "Drive through the heels.\n"
        )
        exercises = extract_exercises(text)

        assert exercises == [
            ParsedExercise(
                name="Barbell Squat",
                sets=3,
                reps=8,
                description="Keep your chest up. Drive through the heels.",
            )
        ]

    def test_new_header_closes_current_exercise(self):
        text = (
            "Bench Press - 3 sets x 8 reps\n"
            "Control the descent.\n"
            "Incline Dumbbell Press: 3 sets x 10 reps\n"
        )
        exercises = extract_exercises(text)

        assert [e.name for e in exercises] == ["Bench Press", "Incline Dumbbell Press"]
        assert exercises[0].description == "Control the descent."
        assert exercises[1].description == ""

    def test_blank_lines_do_not_close_exercise(self):
        text = "Lunge - 3 sets x 12 reps\n\nAlternate legs each rep.\n"
        exercises = extract_exercises(text)

        assert len(exercises) == 1
        assert exercises[0].description == "Alternate legs each rep."

    def test_lines_before_first_header_are_dropped(self):
        text = "Let's get started!\nFocus on form today.\nPlank: 3 sets x 1 rep"
        exercises = extract_exercises(text)

        assert len(exercises) == 1
        assert exercises[0].name == "Plank"
        assert exercises[0].description == ""

    def test_day_header_lines_are_skipped(self):
        text = "Day 1: Push\nPush-Up - 3 sets x 10 reps\nDay 1: Push (again)\nSlow tempo"
        exercises = extract_exercises(text)

        assert len(exercises) == 1
        assert exercises[0].description == "Slow tempo"

    def test_label_shaped_lines_are_not_exercises(self):
        text = (
            "Note - 3 sets x 10 reps\n"
            "Warm-up - 2 sets x 10 reps\n"
            "Squat - 3 sets x 5 reps\n"
            "Important: 1 set x 1 rep\n"
            "Brace your core.\n"
        )
        exercises = extract_exercises(text)

        assert [e.name for e in exercises] == ["Squat"]
        assert exercises[0].description == "Brace your core."

    def test_non_matching_lines_never_create_default_exercise(self):
        """No 3x10 default is invented for unstructured lines."""
        text = "Push ups\nSit ups\nJumping jacks"

        assert extract_exercises(text) == []

    def test_empty_input(self):
        assert extract_exercises("") == []
