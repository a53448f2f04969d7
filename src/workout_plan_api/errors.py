"""Exceptions raised by the workout plan API."""


class WorkoutPlanError(Exception):
    """Base class for workout plan API errors."""


class GenerationError(WorkoutPlanError):
    """The text generation service failed after exhausting retries."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.message = message
        self.attempts = attempts


class PersistenceError(WorkoutPlanError):
    """A profile or program store operation failed."""
