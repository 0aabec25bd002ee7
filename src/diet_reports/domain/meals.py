"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MealLogEntry:
    """A logged meal with a local wall-clock timestamp.

    ``None`` marks an unknown value. Calories must be resolved to a number
    before the entry reaches aggregation; macros may stay unknown.
    """

    id: str
    name: str
    calories: int | None
    timestamp: datetime
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    remarks: str | None = None


@dataclass(frozen=True)
class MealLogDraft:
    """User-supplied fields for creating or editing a meal log."""

    name: str
    calories: int
    timestamp: datetime
    remarks: str | None = None
