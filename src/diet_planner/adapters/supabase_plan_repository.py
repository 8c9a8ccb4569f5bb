"""Supabase repository for plans, days, meals and food items."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from diet_planner.domain.plans import (
    Day,
    FoodItem,
    FoodItemId,
    Meal,
    NewFoodItem,
    Plan,
    parse_food_item_id,
)
from diet_planner.services.plans import PlanRepository

PLANS_TABLE = "diet_plans"
DAYS_TABLE = "diet_days"
MEALS_TABLE = "diet_meals"
FOOD_ITEMS_TABLE = "diet_food_items"


@dataclass
class SupabasePlanRepository(PlanRepository):
    """Supabase implementation for the plan tree."""

    client: Client

    def get_plan(self, plan_id: UUID) -> Plan | None:
        """Return a plan by id, if present."""
        response = (
            self.client.table(PLANS_TABLE)
            .select("*")
            .eq("id", str(plan_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def get_template(self, template_id: UUID) -> Plan | None:
        """Return a template plan by id, if present."""
        response = (
            self.client.table(PLANS_TABLE)
            .select("*")
            .eq("id", str(template_id))
            .eq("is_template", True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_plan(response.data[0])

    def list_templates(self) -> list[Plan]:
        """Return all template plans."""
        response = (
            self.client.table(PLANS_TABLE)
            .select("id, name, description, owner_id, is_template, created_at")
            .eq("is_template", True)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def list_user_plans(self) -> list[Plan]:
        """Return all non-template plans."""
        response = (
            self.client.table(PLANS_TABLE)
            .select("id, name, description, owner_id, is_template, created_at")
            .eq("is_template", False)
            .execute()
        )
        return [_parse_plan(row) for row in response.data or []]

    def create_plan(
        self,
        name: str,
        description: str | None,
        owner_id: UUID,
        created_at: datetime,
    ) -> Plan:
        """Insert a user-owned plan and return it."""
        response = (
            self.client.table(PLANS_TABLE)
            .insert(
                {
                    "name": name,
                    "description": description,
                    "owner_id": str(owner_id),
                    "is_template": False,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("No plan returned")
        return _parse_plan(response.data[0])

    def create_template(
        self, name: str, description: str | None, created_at: datetime
    ) -> Plan:
        """Insert an ownerless template plan and return it."""
        response = (
            self.client.table(PLANS_TABLE)
            .insert(
                {
                    "name": name,
                    "description": description,
                    "owner_id": None,
                    "is_template": True,
                    "created_at": created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("No template returned")
        return _parse_plan(response.data[0])

    def list_days(self, plan_id: UUID) -> list[Day]:
        """Return the days of a plan."""
        response = (
            self.client.table(DAYS_TABLE)
            .select("*")
            .eq("diet_plan_id", str(plan_id))
            .execute()
        )
        return [_parse_day(row) for row in response.data or []]

    def get_day(self, day_id: UUID) -> Day | None:
        """Return a day by id, if present."""
        response = (
            self.client.table(DAYS_TABLE)
            .select("*")
            .eq("id", str(day_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_day(response.data[0])

    def create_day(
        self, plan_id: UUID, day_of_week: str, total_calories: float | None
    ) -> Day:
        """Insert a day under a plan and return it."""
        response = (
            self.client.table(DAYS_TABLE)
            .insert(
                {
                    "diet_plan_id": str(plan_id),
                    "day_of_week": day_of_week,
                    "total_calories": total_calories,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create day")
        return _parse_day(response.data[0])

    def list_meals(self, day_id: UUID) -> list[Meal]:
        """Return the meals of a day."""
        response = (
            self.client.table(MEALS_TABLE)
            .select("*")
            .eq("diet_day_id", str(day_id))
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table(MEALS_TABLE)
            .select("*")
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def create_meal(self, day_id: UUID, meal_type: str) -> Meal:
        """Insert a meal under a day and return it."""
        response = (
            self.client.table(MEALS_TABLE)
            .insert({"diet_day_id": str(day_id), "meal_type": meal_type})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        return _parse_meal(response.data[0])

    def list_food_items(self, meal_id: UUID) -> list[FoodItem]:
        """Return the food items of a meal."""
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .select("*")
            .eq("diet_meal_id", str(meal_id))
            .execute()
        )
        return [_parse_food_item(row) for row in response.data or []]

    def get_food_item(self, food_item_id: FoodItemId) -> FoodItem | None:
        """Return a food item by id, if present."""
        response = (
            self.client.table(FOOD_ITEMS_TABLE)
            .select("*")
            .eq("id", str(food_item_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food_item(response.data[0])

    def create_food_item(self, meal_id: UUID, item: NewFoodItem) -> FoodItem:
        """Insert a food item under a meal and return it.

        Week-1 rows leave ``week`` to the column default so inserts also work
        before the two-week migration has added the column.
        """
        payload: dict[str, object] = {
            "diet_meal_id": str(meal_id),
            "food_name": item.food_name,
            "calories": item.calories,
            "carbohydrates": item.carbohydrates,
            "sugars": item.sugars,
            "protein": item.protein,
            "fat": item.fat,
            "quantity": item.quantity,
            "unit": item.unit,
            "completed": item.completed,
        }
        if item.week != 1:
            payload["week"] = item.week
        response = self.client.table(FOOD_ITEMS_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food item")
        return _parse_food_item(response.data[0])

    def set_food_item_completed(
        self, food_item_id: FoodItemId, completed: bool
    ) -> None:
        """Update the completed flag on a food item row."""
        self.client.table(FOOD_ITEMS_TABLE).update({"completed": completed}).eq(
            "id", str(food_item_id)
        ).execute()


def _parse_plan(row: dict[str, object]) -> Plan:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return Plan(
        id=UUID(row["id"]),
        name=str(row.get("name") or ""),
        description=row.get("description"),
        owner_id=UUID(row["owner_id"]) if row.get("owner_id") else None,
        is_template=bool(row.get("is_template", False)),
        created_at=created_at,
    )


def _parse_day(row: dict[str, object]) -> Day:
    return Day(
        id=UUID(row["id"]),
        plan_id=UUID(row["diet_plan_id"]),
        day_of_week=str(row.get("day_of_week") or ""),
        total_calories=_optional_float(row.get("total_calories")),
    )


def _parse_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(row["id"]),
        day_id=UUID(row["diet_day_id"]),
        meal_type=str(row.get("meal_type") or ""),
    )


def _parse_food_item(row: dict[str, object]) -> FoodItem:
    quantity = _optional_float(row.get("quantity"))
    return FoodItem(
        id=parse_food_item_id(row["id"]),
        meal_id=UUID(row["diet_meal_id"]),
        food_name=str(row.get("food_name") or ""),
        calories=_optional_float(row.get("calories")),
        carbohydrates=_optional_float(row.get("carbohydrates")),
        sugars=_optional_float(row.get("sugars")),
        protein=_optional_float(row.get("protein")),
        fat=_optional_float(row.get("fat")),
        quantity=quantity if quantity is not None else 1,
        unit=str(row.get("unit") or "g"),
        completed=bool(row.get("completed", False)),
        week=int(row.get("week") or 1),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
