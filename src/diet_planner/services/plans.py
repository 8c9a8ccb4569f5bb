"""Plan browsing: templates and the nested week/day view."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from diet_planner.domain.plans import (
    MEAL_TYPES,
    Day,
    FoodItem,
    FoodItemId,
    Meal,
    NewFoodItem,
    Plan,
)
from diet_planner.errors import PlanNotFound
from diet_planner.week_cycle import (
    DAY_NAMES,
    DEFAULT_START_OFFSET_DAYS,
    current_week_and_day,
    format_week_day,
    normalize_day_name,
)


class PlanRepository(Protocol):
    """Persistence interface for plans and their nested rows."""

    def get_plan(self, plan_id: UUID) -> Plan | None:
        """Return a plan by id, if present."""

    def get_template(self, template_id: UUID) -> Plan | None:
        """Return a plan by id only when it is a template."""

    def list_templates(self) -> list[Plan]:
        """Return all template plans."""

    def list_user_plans(self) -> list[Plan]:
        """Return every non-template plan."""

    def create_plan(
        self,
        name: str,
        description: str | None,
        owner_id: UUID,
        created_at: datetime,
    ) -> Plan:
        """Insert a user-owned plan and return it."""

    def create_template(
        self, name: str, description: str | None, created_at: datetime
    ) -> Plan:
        """Insert an ownerless template plan and return it."""

    def list_days(self, plan_id: UUID) -> list[Day]:
        """Return the days of a plan."""

    def get_day(self, day_id: UUID) -> Day | None:
        """Return a day by id, if present."""

    def create_day(
        self, plan_id: UUID, day_of_week: str, total_calories: float | None
    ) -> Day:
        """Insert a day under a plan and return it."""

    def list_meals(self, day_id: UUID) -> list[Meal]:
        """Return the meals of a day."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""

    def create_meal(self, day_id: UUID, meal_type: str) -> Meal:
        """Insert a meal under a day and return it."""

    def list_food_items(self, meal_id: UUID) -> list[FoodItem]:
        """Return the food items of a meal."""

    def get_food_item(self, food_item_id: FoodItemId) -> FoodItem | None:
        """Return a food item by id, if present."""

    def create_food_item(self, meal_id: UUID, item: NewFoodItem) -> FoodItem:
        """Insert a food item under a meal and return it."""

    def set_food_item_completed(
        self, food_item_id: FoodItemId, completed: bool
    ) -> None:
        """Update the denormalized completed flag of a food item."""


@dataclass
class PlanService:
    """Read-side service for templates and plan trees."""

    repository: PlanRepository
    default_start_offset_days: int = DEFAULT_START_OFFSET_DAYS

    def list_templates(self) -> list[Plan]:
        """Return the templates users can clone."""
        return self.repository.list_templates()

    def get_accessible_plan(self, plan_id: UUID, user_id: UUID) -> Plan:
        """Return a plan the user may read: a template or one they own."""
        plan = self.repository.get_plan(plan_id)
        if plan is None:
            raise PlanNotFound()
        if not plan.is_template and plan.owner_id != user_id:
            raise PlanNotFound()
        return plan

    def load_tree(
        self, plan_id: UUID
    ) -> list[tuple[Day, list[tuple[Meal, list[FoodItem]]]]]:
        """Load every day, meal and food item of a plan."""
        tree = []
        for day in self.repository.list_days(plan_id):
            meals = [
                (meal, self.repository.list_food_items(meal.id))
                for meal in self.repository.list_meals(day.id)
            ]
            tree.append((day, meals))
        return tree

    def get_plan_view(
        self,
        plan_id: UUID,
        user_id: UUID,
        start_date: datetime | str | None = None,
        now: datetime | None = None,
    ) -> dict[str, object]:
        """Return the plan as a day map keyed by ``week{N}_{Day}``."""
        plan = self.get_accessible_plan(plan_id, user_id)
        days: dict[str, dict[str, object]] = {}
        for day, meals in self.load_tree(plan.id):
            day_name = normalize_day_name(day.day_of_week)
            for meal, items in meals:
                if not items:
                    entry = days.setdefault(format_week_day(1, day_name), _empty_day())
                    entry["meals"].setdefault(meal.meal_type, [])
                    entry["mealCalories"].setdefault(meal.meal_type, 0.0)
                for item in items:
                    key = format_week_day(item.week or 1, day_name)
                    entry = days.setdefault(key, _empty_day())
                    meal_items = entry["meals"].setdefault(meal.meal_type, [])
                    meal_items.append(_serialize_food_item(item))
                    calories = item.calories or 0.0
                    meal_calories = entry["mealCalories"]
                    meal_calories[meal.meal_type] = (
                        meal_calories.get(meal.meal_type, 0.0) + calories
                    )
                    entry["totalCalories"] += calories
        current = current_week_and_day(
            start_date or plan.created_at,
            now=now,
            default_offset_days=self.default_start_offset_days,
        )
        return {
            "id": str(plan.id),
            "planName": plan.name,
            "planDescription": plan.description,
            "isTemplate": plan.is_template,
            "days": {
                key: {**entry, "meals": _ordered_meals(entry["meals"])}
                for key, entry in sorted(
                    days.items(), key=lambda pair: _slot_order(pair[0])
                )
            },
            "current": {"week": current.week, "day": current.day, "key": current.key},
        }


def _empty_day() -> dict[str, object]:
    return {"meals": {}, "mealCalories": {}, "totalCalories": 0.0}


def _slot_order(key: str) -> tuple[int, int]:
    week_part, _, day = key.partition("_")
    week = int(week_part.removeprefix("week") or 1)
    day_index = DAY_NAMES.index(day) if day in DAY_NAMES else len(DAY_NAMES)
    return week, day_index


def _ordered_meals(meals: dict[str, list]) -> dict[str, list]:
    def rank(meal_type: str) -> int:
        if meal_type in MEAL_TYPES:
            return MEAL_TYPES.index(meal_type)
        return len(MEAL_TYPES)

    return dict(sorted(meals.items(), key=lambda pair: rank(pair[0])))


def _serialize_food_item(item: FoodItem) -> dict[str, object]:
    return {
        "id": item.id,
        "food": item.food_name,
        "calories": item.calories,
        "quantity": item.quantity,
        "unit": item.unit,
        "completed": item.completed,
        "carbs": item.carbohydrates,
        "sugars": item.sugars,
        "protein": item.protein,
        "fat": item.fat,
    }
