"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable
from contextlib import asynccontextmanager
from datetime import date
from typing import Literal, TypeVar

import httpx
from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse

from diet_reports.app_logging import configure_logging
from diet_reports.containers import AppContainer
from diet_reports.domain.calendar import DayCursor, MonthCursor, WeekCursor
from diet_reports.services.formatting import (
    day_title,
    format_daily_report,
    format_period_report,
    month_title,
    week_title,
)
from diet_reports.services.reports import Direction, navigate

ReportFormat = Literal["json", "text"]

_T = TypeVar("_T")


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    async def _fetch(user_id: str, report: Awaitable[_T]) -> _T:
        try:
            return await report
        except httpx.HTTPError as exc:
            logger.exception("Failed to load meal logs", extra={"user_id": user_id})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Meal log backend unavailable",
            ) from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/users/{user_id}/reports/daily", response_model=None)
    async def daily_report(
        user_id: str,
        request: Request,
        day: date | None = None,
        format: ReportFormat = "json",  # noqa: A002
    ) -> dict[str, object] | PlainTextResponse:
        """Return the daily report for a user."""
        state_container: AppContainer = request.app.state.container
        cursor = DayCursor(day) if day else DayCursor.today()
        view = await _fetch(
            user_id, state_container.report_service.get_daily(user_id, cursor)
        )
        if format == "text":
            return PlainTextResponse(format_daily_report(view))
        return {
            "title": day_title(cursor.day),
            "report": view,
            "previous": navigate(cursor, Direction.PREVIOUS),
            "next": navigate(cursor, Direction.NEXT),
        }

    @app.get("/users/{user_id}/reports/weekly", response_model=None)
    async def weekly_report(
        user_id: str,
        request: Request,
        week_of: date | None = None,
        format: ReportFormat = "json",  # noqa: A002
    ) -> dict[str, object] | PlainTextResponse:
        """Return the weekly report containing ``week_of`` (default this week)."""
        state_container: AppContainer = request.app.state.container
        cursor = WeekCursor.containing(week_of) if week_of else WeekCursor.this_week()
        view = await _fetch(
            user_id, state_container.report_service.get_weekly(user_id, cursor)
        )
        title = week_title(cursor)
        if format == "text":
            return PlainTextResponse(format_period_report(title, view))
        return {
            "title": title,
            "report": view,
            "previous": navigate(cursor, Direction.PREVIOUS),
            "next": navigate(cursor, Direction.NEXT),
        }

    @app.get("/users/{user_id}/reports/monthly", response_model=None)
    async def monthly_report(
        user_id: str,
        request: Request,
        year: int | None = Query(default=None, ge=1, le=9999),
        month: int | None = Query(default=None, ge=1, le=12),
        format: ReportFormat = "json",  # noqa: A002
    ) -> dict[str, object] | PlainTextResponse:
        """Return the monthly report; ``month`` is 1-12."""
        state_container: AppContainer = request.app.state.container
        current = MonthCursor.this_month()
        cursor = MonthCursor(
            year=year if year is not None else current.year,
            month_index=month - 1 if month is not None else current.month_index,
        )
        view = await _fetch(
            user_id, state_container.report_service.get_monthly(user_id, cursor)
        )
        title = month_title(cursor)
        if format == "text":
            return PlainTextResponse(format_period_report(title, view))
        return {
            "title": title,
            "report": view,
            "previous": navigate(cursor, Direction.PREVIOUS),
            "next": navigate(cursor, Direction.NEXT),
        }

    return app
