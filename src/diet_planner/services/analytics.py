"""Calorie analytics for a plan."""

import math
from dataclasses import dataclass
from uuid import UUID

from diet_planner.domain.analytics import CalorieDay, CalorieSummary
from diet_planner.services.plans import PlanService
from diet_planner.week_cycle import DAY_NAMES, format_week_day, normalize_day_name


@dataclass
class AnalyticsService:
    """Service computing per-day calorie totals for a plan."""

    plan_service: PlanService

    def calorie_summary(self, plan_id: UUID, user_id: UUID) -> CalorieSummary:
        """Return per-day calories with total, average, max and min days."""
        plan = self.plan_service.get_accessible_plan(plan_id, user_id)
        per_slot: dict[tuple[int, str], float] = {}
        stored: dict[str, float] = {}
        weeks = {1}
        for day, meals in self.plan_service.load_tree(plan.id):
            day_name = normalize_day_name(day.day_of_week)
            if day.total_calories is not None:
                stored[day_name] = stored.get(day_name, 0.0) + day.total_calories
            for _, items in meals:
                for item in items:
                    week = item.week or 1
                    weeks.add(week)
                    slot = (week, day_name)
                    per_slot[slot] = per_slot.get(slot, 0.0) + (item.calories or 0.0)

        days = []
        for week in sorted(weeks):
            for day_name in DAY_NAMES:
                if week == 1 and day_name in stored:
                    calories = stored[day_name]
                else:
                    calories = per_slot.get((week, day_name), 0.0)
                days.append(
                    CalorieDay(
                        key=format_week_day(week, day_name),
                        week=week,
                        day=day_name,
                        calories=calories,
                    )
                )
        return summarize(days)


def summarize(days: list[CalorieDay]) -> CalorieSummary:
    """Aggregate calorie days; the min day ignores days with no calories."""
    if not days:
        return CalorieSummary(
            days=[], total_calories=0.0, average_calories=0, max_day=None, min_day=None
        )
    total = sum(day.calories for day in days)
    max_day = days[0]
    for day in days:
        if day.calories > max_day.calories:
            max_day = day
    non_zero = [day for day in days if day.calories > 0]
    min_day = min(non_zero, key=lambda day: day.calories) if non_zero else days[0]
    return CalorieSummary(
        days=days,
        total_calories=total,
        average_calories=math.floor(total / len(days) + 0.5),
        max_day=max_day,
        min_day=min_day,
    )
