"""Meal log service: fetches backend records and normalizes them to entries."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

import httpx
from pydantic import ValidationError

from diet_reports.adapters.meal_log_api_client import MealLogClient
from diet_reports.adapters.meal_log_models import ApiCalorieGoal, ApiMealLog
from diet_reports.domain.meals import MealLogDraft, MealLogEntry
from diet_reports.services.local_time import (
    format_local_datetime,
    parse_local_datetime_or,
)

UNNAMED_MEAL = "(Unnamed)"

_logger = logging.getLogger(__name__)


@dataclass
class MealLogService:
    """Service for reading and writing a user's meal logs."""

    client: MealLogClient
    clock: Callable[[], datetime] = field(default=datetime.now)

    async def list_entries(self, user_id: str) -> list[MealLogEntry]:
        """Return the user's meal logs, newest first."""
        rows = await self.client.list_meal_logs(user_id)
        now = self.clock()
        entries: list[MealLogEntry] = []
        for row in rows:
            try:
                record = ApiMealLog.model_validate(row)
            except ValidationError as exc:
                _logger.warning(
                    "Skipping invalid meal log record for %s: %r (%s)",
                    user_id,
                    row,
                    exc.errors(include_url=False),
                )
                continue
            entries.append(entry_from_record(record, now))
        entries.sort(key=lambda entry: entry.timestamp, reverse=True)
        return entries

    async def create_entry(self, user_id: str, draft: MealLogDraft) -> None:
        """Create a meal log from a draft."""
        await self.client.create_meal_log(user_id, draft_payload(draft))

    async def update_entry(self, entry_id: str, draft: MealLogDraft) -> None:
        """Replace an existing meal log with the draft values."""
        await self.client.update_meal_log(entry_id, draft_payload(draft))

    async def delete_entry(self, entry_id: str) -> None:
        """Delete a meal log."""
        await self.client.delete_meal_log(entry_id)

    async def get_daily_goal(self, user_id: str) -> int | None:
        """Return today's calorie goal, or None when unavailable."""
        try:
            payload = await self.client.get_today_goal(user_id)
        except httpx.HTTPError as exc:
            _logger.warning("Failed to fetch calorie goal for %s: %s", user_id, exc)
            return None
        goal = ApiCalorieGoal.model_validate(payload)
        if goal.daily_target is None:
            return None
        return round(goal.daily_target)


def entry_from_record(record: ApiMealLog, now: datetime) -> MealLogEntry:
    """Normalize a backend record into a meal log entry.

    Missing calories become 0 here so aggregation always sees a number.
    An unparseable timestamp falls back to ``now`` and is logged.
    """
    return MealLogEntry(
        id=str(record.meal_log_id),
        name=record.foods_consumed or UNNAMED_MEAL,
        calories=round(record.calories) if record.calories is not None else 0,
        timestamp=parse_local_datetime_or(
            record.time_consumed,
            now,
            source=f"meal log {record.meal_log_id} timestamp",
        ),
        protein=record.protein,
        carbs=record.carbs,
        fat=record.fat,
        remarks=record.remarks or None,
    )


def draft_payload(draft: MealLogDraft) -> dict[str, object]:
    """Build the backend request body for a draft."""
    name = draft.name.strip()
    if not name:
        raise ValueError("Meal name must not be empty")
    remarks = (draft.remarks or "").strip()
    return {
        "foodsConsumed": name,
        "calories": max(draft.calories, 0),
        "remarks": remarks or None,
        "timeConsumed": format_local_datetime(draft.timestamp),
    }
