"""Meal log backend API client."""

from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx


class MealLogClient(Protocol):
    """Interface for meal log backend interactions."""

    async def list_meal_logs(self, firebase_id: str) -> list[dict[str, object]]:
        """Return raw meal log records for a user."""

    async def create_meal_log(
        self, firebase_id: str, payload: dict[str, object]
    ) -> None:
        """Create a meal log for a user."""

    async def update_meal_log(
        self, meal_log_id: str, payload: dict[str, object]
    ) -> None:
        """Replace an existing meal log."""

    async def delete_meal_log(self, meal_log_id: str) -> None:
        """Delete a meal log."""

    async def get_today_goal(self, firebase_id: str) -> dict[str, object]:
        """Return the raw calorie goal payload for today."""


@dataclass
class HttpxMealLogClient(MealLogClient):
    """HTTPX-backed meal log client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 15.0
    ) -> "HttpxMealLogClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def list_meal_logs(self, firebase_id: str) -> list[dict[str, object]]:
        """Fetch all meal logs for a user."""
        response = await self.http_client.get(
            self._user_url(firebase_id), timeout=self.timeout_seconds
        )
        response.raise_for_status()
        data = response.json()
        return data if isinstance(data, list) else []

    async def create_meal_log(
        self, firebase_id: str, payload: dict[str, object]
    ) -> None:
        """POST a new meal log."""
        response = await self.http_client.post(
            self._user_url(firebase_id), json=payload, timeout=self.timeout_seconds
        )
        response.raise_for_status()

    async def update_meal_log(
        self, meal_log_id: str, payload: dict[str, object]
    ) -> None:
        """PUT an updated meal log."""
        response = await self.http_client.put(
            self._log_url(meal_log_id), json=payload, timeout=self.timeout_seconds
        )
        response.raise_for_status()

    async def delete_meal_log(self, meal_log_id: str) -> None:
        """DELETE a meal log."""
        response = await self.http_client.delete(
            self._log_url(meal_log_id), timeout=self.timeout_seconds
        )
        response.raise_for_status()

    async def get_today_goal(self, firebase_id: str) -> dict[str, object]:
        """Fetch today's calorie goal."""
        response = await self.http_client.get(
            f"{self.base_url}/api/calorie-goal/today",
            params={"firebaseId": firebase_id},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        data = response.json()
        return data if isinstance(data, dict) else {}

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _user_url(self, firebase_id: str) -> str:
        return f"{self.base_url}/api/meallogs/by-firebase/{quote(firebase_id, safe='')}"

    def _log_url(self, meal_log_id: str) -> str:
        return f"{self.base_url}/api/meallogs/{quote(meal_log_id, safe='')}"
