"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import httpx
import pytest

from diet_reports.adapters.meal_log_api_client import MealLogClient
from diet_reports.config import Settings
from diet_reports.containers import AppContainer
from diet_reports.domain.meals import MealLogEntry
from diet_reports.services.meal_logs import MealLogService
from diet_reports.services.reports import ReportService

FIXED_NOW = datetime(2024, 3, 10, 12, 0, 0)


def make_entry(  # noqa: PLR0913
    entry_id: str,
    timestamp: str | datetime,
    calories: int | None = 0,
    name: str | None = None,
    protein: float | None = None,
    carbs: float | None = None,
    fat: float | None = None,
) -> MealLogEntry:
    """Build a meal log entry from a compact description."""
    if isinstance(timestamp, str):
        timestamp = datetime.fromisoformat(timestamp)
    return MealLogEntry(
        id=entry_id,
        name=name or f"Meal {entry_id}",
        calories=calories,
        timestamp=timestamp,
        protein=protein,
        carbs=carbs,
        fat=fat,
    )


@dataclass
class FakeMealLogClient(MealLogClient):
    """In-memory meal log backend that records writes."""

    rows: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    goals: dict[str, dict[str, object]] = field(default_factory=dict)
    created: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    updated: list[tuple[str, dict[str, object]]] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    fail_goal: bool = False
    fail_list: bool = False

    async def list_meal_logs(self, firebase_id: str) -> list[dict[str, object]]:
        if self.fail_list:
            raise httpx.ConnectError("backend down")
        return self.rows.get(firebase_id, [])

    async def create_meal_log(
        self, firebase_id: str, payload: dict[str, object]
    ) -> None:
        self.created.append((firebase_id, payload))

    async def update_meal_log(
        self, meal_log_id: str, payload: dict[str, object]
    ) -> None:
        self.updated.append((meal_log_id, payload))

    async def delete_meal_log(self, meal_log_id: str) -> None:
        self.deleted.append(meal_log_id)

    async def get_today_goal(self, firebase_id: str) -> dict[str, object]:
        if self.fail_goal:
            raise httpx.ConnectError("backend down")
        return self.goals.get(firebase_id, {})


@pytest.fixture
def settings() -> Settings:
    return Settings(
        backend_base_url="http://backend.test",
        default_calorie_goal=2000,
    )


@pytest.fixture
def meal_log_client() -> FakeMealLogClient:
    return FakeMealLogClient()


@pytest.fixture
def container(settings: Settings, meal_log_client: FakeMealLogClient) -> AppContainer:
    meal_log_service = MealLogService(client=meal_log_client, clock=lambda: FIXED_NOW)
    report_service = ReportService(
        meal_log_service=meal_log_service,
        default_goal=settings.default_calorie_goal,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_log_client=meal_log_client,
        meal_log_service=meal_log_service,
        report_service=report_service,
        close_resources=close_resources,
    )
