"""Supabase repository for completion records."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_planner.domain.completions import FoodCompletion, MealCompletion
from diet_planner.domain.plans import FoodItemId, parse_food_item_id
from diet_planner.services.completions import CompletionRepository

MEAL_COMPLETIONS_TABLE = "meal_completions"
FOOD_COMPLETIONS_TABLE = "user_food_item_completion"
MEAL_COMPLETION_SCOPE = "user_id,diet_plan_id,day,meal_type"
FOOD_COMPLETION_SCOPE = "user_id,meal_food_item_id"


@dataclass
class SupabaseCompletionRepository(CompletionRepository):
    """Supabase implementation for meal and food item completions."""

    client: Client

    def get_meal_completion(
        self, user_id: UUID, diet_plan_id: UUID, day: str, meal_type: str
    ) -> MealCompletion | None:
        response = (
            self.client.table(MEAL_COMPLETIONS_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .eq("diet_plan_id", str(diet_plan_id))
            .eq("day", day)
            .eq("meal_type", meal_type)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal_completion(response.data[0])

    def upsert_meal_completion(self, record: MealCompletion) -> None:
        self.client.table(MEAL_COMPLETIONS_TABLE).upsert(
            {
                "user_id": str(record.user_id),
                "diet_plan_id": str(record.diet_plan_id),
                "day": record.day,
                "meal_type": record.meal_type,
                "completed": record.completed,
                "completed_at": _format_timestamp(record.completed_at),
            },
            on_conflict=MEAL_COMPLETION_SCOPE,
        ).execute()

    def get_food_completion(
        self, user_id: UUID, food_item_id: FoodItemId
    ) -> FoodCompletion | None:
        response = (
            self.client.table(FOOD_COMPLETIONS_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .eq("meal_food_item_id", str(food_item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food_completion(response.data[0])

    def upsert_food_completion(self, record: FoodCompletion) -> None:
        self.client.table(FOOD_COMPLETIONS_TABLE).upsert(
            {
                "user_id": str(record.user_id),
                "meal_food_item_id": record.food_item_id,
                "completed": record.completed,
                "completed_at": _format_timestamp(record.completed_at),
            },
            on_conflict=FOOD_COMPLETION_SCOPE,
        ).execute()


def _format_timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None


def _parse_meal_completion(row: dict[str, object]) -> MealCompletion:
    return MealCompletion(
        user_id=UUID(row["user_id"]),
        diet_plan_id=UUID(row["diet_plan_id"]),
        day=str(row["day"]),
        meal_type=str(row["meal_type"]),
        completed=bool(row.get("completed", False)),
        completed_at=_parse_timestamp(row.get("completed_at")),
    )


def _parse_food_completion(row: dict[str, object]) -> FoodCompletion:
    return FoodCompletion(
        user_id=UUID(row["user_id"]),
        food_item_id=parse_food_item_id(row["meal_food_item_id"]),
        completed=bool(row.get("completed", False)),
        completed_at=_parse_timestamp(row.get("completed_at")),
    )
