"""Domain models for calorie analytics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalorieDay:
    """Calories planned for a single week-day slot."""

    key: str
    week: int
    day: str
    calories: float


@dataclass(frozen=True)
class CalorieSummary:
    """Aggregated calories for a plan."""

    days: list[CalorieDay]
    total_calories: float
    average_calories: int
    max_day: CalorieDay | None
    min_day: CalorieDay | None
