"""Domain models for meal and food completion tracking."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from diet_planner.domain.plans import FoodItemId


@dataclass(frozen=True)
class MealCompletion:
    """Completion record for a meal slot of a plan."""

    user_id: UUID
    diet_plan_id: UUID
    day: str
    meal_type: str
    completed: bool
    completed_at: datetime | None


@dataclass(frozen=True)
class FoodCompletion:
    """Completion record for a single food item."""

    user_id: UUID
    food_item_id: FoodItemId
    completed: bool
    completed_at: datetime | None
