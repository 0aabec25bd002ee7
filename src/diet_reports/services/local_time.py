"""Zone-less timestamp codec for server meal log times.

The backend sends wall-clock times with no zone, e.g. ``2024-03-10T08:00:00``
or ``2024-03-10 08:00:00``. They are decoded field by field into naive
datetimes so no UTC or device-zone conversion can shift the calendar day.
"""

import logging
import re
from datetime import datetime

_LOCAL_DATETIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2}):(\d{2})$"
)

_logger = logging.getLogger(__name__)


class LocalTimeParseError(ValueError):
    """Raised when a timestamp string is not a valid local wall-clock time."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Invalid local timestamp: {raw!r}")
        self.raw = raw


def parse_local_datetime(raw: str) -> datetime:
    """Parse ``YYYY-MM-DD[T ]HH:mm:ss`` into a naive local datetime."""
    if not isinstance(raw, str):
        raise LocalTimeParseError(raw)
    match = _LOCAL_DATETIME_RE.match(raw)
    if match is None:
        raise LocalTimeParseError(raw)
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise LocalTimeParseError(raw) from exc


def parse_local_datetime_or(
    raw: object, fallback: datetime, *, source: str = "timestamp"
) -> datetime:
    """Parse a timestamp, returning ``fallback`` (with a warning) on failure.

    ``source`` names the record the value came from in the warning.
    """
    try:
        return parse_local_datetime(raw)  # type: ignore[arg-type]
    except LocalTimeParseError:
        _logger.warning(
            "Unparseable %s %r, using fallback %s",
            source,
            raw,
            format_local_datetime(fallback),
        )
        return fallback


def format_local_datetime(instant: datetime) -> str:
    """Format a naive local datetime as ``YYYY-MM-DDTHH:mm:ss``."""
    if instant.tzinfo is not None:
        raise ValueError("Local timestamps must be naive datetimes")
    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
    )
