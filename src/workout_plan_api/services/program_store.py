"""Workout program storage: Supabase tables or in-memory.

Tables:
- ``workout_program``: one program per user (saving again updates it)
- ``workout_splits``: one row per (program_id, day_number) with columns
  name, day_number, exercises and notes. Warm-up and cool-down text is
  stored inside notes under "WARM-UP:" / "COOL-DOWN:" labels and split
  back out on read.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, Tuple

from workout_plan_api.errors import PersistenceError
from workout_plan_api.models import WorkoutProgram, WorkoutSplit
from workout_plan_api.parsers.models import ParsedDay
from workout_plan_api.parsers.section_extractor import extract_sections

logger = logging.getLogger(__name__)

_PROGRAM_TABLE = "workout_program"
_SPLIT_TABLE = "workout_splits"


class ProgramStore(Protocol):
    def save_program(self, program: WorkoutProgram) -> str:
        ...

    def save_day_split(self, program_id: str, day: ParsedDay) -> str:
        ...

    def get_program_for_user(self, user_id: str) -> Optional[WorkoutProgram]:
        ...

    def get_splits(self, program_id: str) -> List[WorkoutSplit]:
        ...

    def get_split(self, split_id: str) -> Optional[WorkoutSplit]:
        ...


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_id(result: Any, what: str) -> str:
    if not result.data:
        raise PersistenceError(f"Failed to save {what}: no row returned")
    return str(result.data[0]["id"])


def _combined_notes(split: WorkoutSplit) -> Optional[str]:
    """Fold warm-up and cool-down into the single notes column"""
    parts = []
    if split.warm_up:
        parts.append(f"WARM-UP: {split.warm_up}")
    if split.cool_down:
        parts.append(f"COOL-DOWN: {split.cool_down}")
    if split.notes:
        # Notes alone are stored unlabeled
        parts.append(f"NOTES: {split.notes}" if parts else split.notes)
    return "\n\n".join(parts) or None


def _split_row_fields(split: WorkoutSplit) -> Dict[str, Any]:
    return {
        "name": split.name,
        "exercises": [e.model_dump() for e in split.exercises],
        "notes": _combined_notes(split),
    }


def _split_from_row(row: Dict[str, Any]) -> WorkoutSplit:
    notes = row.get("notes")
    warm_up = cool_down = None
    if notes:
        sections = extract_sections(notes)
        if sections.warm_up or sections.cool_down:
            warm_up = sections.warm_up
            cool_down = sections.cool_down
            notes = sections.notes
    return WorkoutSplit(
        id=str(row["id"]),
        program_id=str(row["program_id"]),
        name=row["name"],
        day_number=row["day_number"],
        exercises=row.get("exercises") or [],
        warm_up=warm_up,
        cool_down=cool_down,
        notes=notes,
        created_at=row.get("created_at"),
    )


class SupabaseProgramStore:
    """Program store backed by Supabase."""

    def __init__(self, client: Any):
        self.client = client

    def save_program(self, program: WorkoutProgram) -> str:
        try:
            existing = (
                self.client.table(_PROGRAM_TABLE)
                .select("id")
                .eq("user_id", program.user_id)
                .maybe_single()
                .execute()
            )
            fields = {
                "title": program.title,
                "description": program.description,
                "fitness_profile_id": program.fitness_profile_id,
            }
            if existing is not None and existing.data:
                result = (
                    self.client.table(_PROGRAM_TABLE)
                    .update(fields)
                    .eq("id", existing.data["id"])
                    .execute()
                )
            else:
                result = (
                    self.client.table(_PROGRAM_TABLE)
                    .insert({"user_id": program.user_id, **fields})
                    .execute()
                )
        except Exception as e:
            logger.error(f"Program save error for {program.user_id}: {e}")
            raise PersistenceError(f"Failed to save workout program: {e}") from e

        return _row_id(result, "workout program")

    def save_day_split(self, program_id: str, day: ParsedDay) -> str:
        split = WorkoutSplit.from_parsed_day(program_id, day)
        fields = _split_row_fields(split)
        try:
            existing = (
                self.client.table(_SPLIT_TABLE)
                .select("id")
                .eq("program_id", program_id)
                .eq("day_number", day.day_number)
                .maybe_single()
                .execute()
            )
            if existing is not None and existing.data:
                result = (
                    self.client.table(_SPLIT_TABLE)
                    .update(fields)
                    .eq("id", existing.data["id"])
                    .execute()
                )
            else:
                result = (
                    self.client.table(_SPLIT_TABLE)
                    .insert({"program_id": program_id, "day_number": day.day_number, **fields})
                    .execute()
                )
        except Exception as e:
            logger.error(f"Split save error for {program_id} day {day.day_number}: {e}")
            raise PersistenceError(f"Failed to save workout split: {e}") from e

        return _row_id(result, "workout split")

    def get_program_for_user(self, user_id: str) -> Optional[WorkoutProgram]:
        try:
            result = (
                self.client.table(_PROGRAM_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .maybe_single()
                .execute()
            )
        except Exception as e:
            logger.error(f"Program read error for {user_id}: {e}")
            raise PersistenceError(f"Failed to load workout program: {e}") from e

        if result is None or not result.data:
            return None
        return WorkoutProgram(**{**result.data, "id": str(result.data["id"])})

    def get_splits(self, program_id: str) -> List[WorkoutSplit]:
        try:
            result = (
                self.client.table(_SPLIT_TABLE)
                .select("*")
                .eq("program_id", program_id)
                .order("day_number")
                .execute()
            )
        except Exception as e:
            logger.error(f"Split read error for {program_id}: {e}")
            raise PersistenceError(f"Failed to load workout splits: {e}") from e

        return [_split_from_row(row) for row in result.data or []]

    def get_split(self, split_id: str) -> Optional[WorkoutSplit]:
        try:
            result = (
                self.client.table(_SPLIT_TABLE)
                .select("*")
                .eq("id", split_id)
                .maybe_single()
                .execute()
            )
        except Exception as e:
            logger.error(f"Split read error for {split_id}: {e}")
            raise PersistenceError(f"Failed to load workout split: {e}") from e

        if result is None or not result.data:
            return None
        return _split_from_row(result.data)


class InMemoryProgramStore:
    """Process-local program storage with the same upsert rules as Supabase."""

    def __init__(self):
        self._programs: Dict[str, WorkoutProgram] = {}
        self._splits: Dict[Tuple[str, int], WorkoutSplit] = {}

    def save_program(self, program: WorkoutProgram) -> str:
        existing = self._programs.get(program.user_id)
        if existing:
            saved = existing.model_copy(update={
                "title": program.title,
                "description": program.description,
                "fitness_profile_id": program.fitness_profile_id,
            })
        else:
            saved = program.model_copy(update={"id": str(uuid.uuid4()), "created_at": _now()})
        self._programs[program.user_id] = saved
        return saved.id

    def save_day_split(self, program_id: str, day: ParsedDay) -> str:
        key = (program_id, day.day_number)
        existing = self._splits.get(key)
        split = WorkoutSplit.from_parsed_day(program_id, day)
        if existing:
            split = split.model_copy(update={"id": existing.id, "created_at": existing.created_at})
        else:
            split = split.model_copy(update={"id": str(uuid.uuid4()), "created_at": _now()})
        self._splits[key] = split
        return split.id

    def get_program_for_user(self, user_id: str) -> Optional[WorkoutProgram]:
        return self._programs.get(user_id)

    def get_splits(self, program_id: str) -> List[WorkoutSplit]:
        splits = [s for (pid, _), s in self._splits.items() if pid == program_id]
        return sorted(splits, key=lambda s: s.day_number)

    def get_split(self, split_id: str) -> Optional[WorkoutSplit]:
        for split in self._splits.values():
            if split.id == split_id:
                return split
        return None
