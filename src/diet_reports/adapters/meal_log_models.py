"""Pydantic models for meal log backend payloads."""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _to_nullable_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return max(number, 0.0)


class ApiMealLog(BaseModel):
    """Meal log record as returned by the backend."""

    model_config = ConfigDict(populate_by_name=True)

    meal_log_id: int | str = Field(alias="mealLogId")
    foods_consumed: str | None = Field(default=None, alias="foodsConsumed")
    calories: float | None = None
    remarks: str | None = None
    time_consumed: str | None = Field(default=None, alias="timeConsumed")
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None

    @field_validator("foods_consumed", "remarks", "time_consumed", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value)

    @field_validator("calories", "protein", "carbs", "fat", mode="before")
    @classmethod
    def _coerce_numbers(cls, value: object) -> float | None:
        return _to_nullable_float(value)


class ApiCalorieGoal(BaseModel):
    """Today's calorie goal as returned by the backend."""

    daily_target: float | None = Field(default=None, alias="dailyTarget")

    @field_validator("daily_target", mode="before")
    @classmethod
    def _ignore_non_numbers(cls, value: object) -> float | None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        if not math.isfinite(value):
            return None
        return float(value)
