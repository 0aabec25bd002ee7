"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from diet_reports.adapters.meal_log_api_client import (
    HttpxMealLogClient,
    MealLogClient,
)
from diet_reports.config import Settings
from diet_reports.services.meal_logs import MealLogService
from diet_reports.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_log_client: MealLogClient
    meal_log_service: MealLogService
    report_service: ReportService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    meal_log_client = HttpxMealLogClient.create(
        base_url=resolved_settings.backend_base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    meal_log_service = MealLogService(client=meal_log_client)
    report_service = ReportService(
        meal_log_service=meal_log_service,
        default_goal=resolved_settings.default_calorie_goal,
    )

    async def close_resources() -> None:
        await meal_log_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_log_client=meal_log_client,
        meal_log_service=meal_log_service,
        report_service=report_service,
        close_resources=close_resources,
    )
