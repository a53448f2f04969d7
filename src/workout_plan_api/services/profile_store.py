"""Fitness profile storage: Supabase ``fitness_profile`` table or in-memory."""
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Protocol

from workout_plan_api.errors import PersistenceError
from workout_plan_api.models import FitnessProfile

logger = logging.getLogger(__name__)

_TABLE = "fitness_profile"


class ProfileStore(Protocol):
    def get_profile(self, user_id: str) -> Optional[FitnessProfile]:
        ...

    def save_profile(self, profile: FitnessProfile) -> FitnessProfile:
        ...


def _profile_from_row(row: Dict[str, Any]) -> FitnessProfile:
    return FitnessProfile(
        id=str(row["id"]) if row.get("id") is not None else None,
        user_id=row["user_id"],
        quiz_data=row.get("quiz_data") or {},
        created_at=row.get("created_at"),
    )


class SupabaseProfileStore:
    """One profile per user; saving again replaces the quiz answers."""

    def __init__(self, client: Any):
        self.client = client

    def get_profile(self, user_id: str) -> Optional[FitnessProfile]:
        try:
            result = (
                self.client.table(_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .maybe_single()
                .execute()
            )
        except Exception as e:
            logger.error(f"Profile read error for {user_id}: {e}")
            raise PersistenceError(f"Failed to load fitness profile: {e}") from e

        if result is None or not result.data:
            return None
        return _profile_from_row(result.data)

    def save_profile(self, profile: FitnessProfile) -> FitnessProfile:
        quiz_data = profile.quiz_data.model_dump(by_alias=True)
        try:
            existing = (
                self.client.table(_TABLE)
                .select("id")
                .eq("user_id", profile.user_id)
                .maybe_single()
                .execute()
            )
            if existing is not None and existing.data:
                result = (
                    self.client.table(_TABLE)
                    .update({"quiz_data": quiz_data})
                    .eq("id", existing.data["id"])
                    .execute()
                )
            else:
                result = (
                    self.client.table(_TABLE)
                    .insert({"user_id": profile.user_id, "quiz_data": quiz_data})
                    .execute()
                )
        except Exception as e:
            logger.error(f"Profile save error for {profile.user_id}: {e}")
            raise PersistenceError(f"Failed to save fitness profile: {e}") from e

        if not result.data:
            raise PersistenceError("Failed to save fitness profile: no row returned")
        return _profile_from_row(result.data[0])


class InMemoryProfileStore:
    """Process-local profile storage for tests and unconfigured environments."""

    def __init__(self):
        self._profiles: Dict[str, FitnessProfile] = {}

    def get_profile(self, user_id: str) -> Optional[FitnessProfile]:
        return self._profiles.get(user_id)

    def save_profile(self, profile: FitnessProfile) -> FitnessProfile:
        existing = self._profiles.get(profile.user_id)
        if existing:
            saved = existing.model_copy(update={"quiz_data": profile.quiz_data})
        else:
            saved = profile.model_copy(update={
                "id": str(uuid.uuid4()),
                "created_at": datetime.now(timezone.utc).isoformat(),
            })
        self._profiles[profile.user_id] = saved
        return saved
