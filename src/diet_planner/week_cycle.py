"""Two-week plan cycle helpers.

Plans alternate between week 1 and week 2 indefinitely, anchored at the date
the plan started. Slots in the nested day map are addressed by a composite
key such as ``week1_Monday``.
"""

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKS: tuple[int, ...] = (1, 2)
DEFAULT_START_OFFSET_DAYS = 14


@dataclass(frozen=True)
class WeekAndDay:
    """A slot in the two-week cycle."""

    week: int
    day: str

    @property
    def key(self) -> str:
        return format_week_day(self.week, self.day)


def current_week_and_day(
    start_date: datetime | date | str | None = None,
    now: datetime | None = None,
    default_offset_days: int = DEFAULT_START_OFFSET_DAYS,
) -> WeekAndDay:
    """Return the current cycle week (1 or 2) and capitalized weekday name.

    Without a usable ``start_date`` the plan is assumed to have started
    ``default_offset_days`` ago. A start date in the future yields week 1.
    """
    current = _as_utc(now) if now is not None else datetime.now(tz=UTC)
    start = _parse_start_date(start_date)
    if start is None:
        start = current - timedelta(days=default_offset_days)
    days_since_start = math.floor((current - start) / timedelta(days=1))
    if days_since_start < 0:
        week = 1
    else:
        week = (days_since_start // 7) % 2 + 1
    return WeekAndDay(week=week, day=DAY_NAMES[current.weekday()])


def format_week_day(week: int, day: str) -> str:
    """Format a week number and day into a key like ``week1_Monday``."""
    return f"week{week}_{day}"


def parse_week_day(key: str) -> WeekAndDay:
    """Parse a week-day key, defaulting to week 1 for legacy day-only keys."""
    if not key.startswith("week"):
        return WeekAndDay(week=1, day=key)
    parts = key.split("_")
    if len(parts) != 2:  # noqa: PLR2004
        return WeekAndDay(week=1, day=key)
    week_part, day = parts
    try:
        week = int(week_part.removeprefix("week"))
    except ValueError:
        week = 1
    return WeekAndDay(week=week, day=day)


def normalize_day_name(day: str) -> str:
    """Capitalize a weekday name the way plan rows store it."""
    cleaned = day.strip()
    return cleaned[:1].upper() + cleaned[1:].lower()


def _parse_start_date(value: datetime | date | str | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return _as_utc(parsed)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
