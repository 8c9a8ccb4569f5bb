"""Domain models for diet plans and their nested rows."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "snack", "dinner")

# Food item rows use an integer identity column; other rows use UUIDs.
FoodItemId = int | str


def parse_food_item_id(value: object) -> FoodItemId:
    """Normalize a food item id read from a row or a request."""
    if isinstance(value, int):
        return value
    text = str(value).strip()
    return int(text) if text.isdigit() else text


@dataclass(frozen=True)
class Plan:
    """A diet plan row, either a template or user-owned."""

    id: UUID
    name: str
    description: str | None
    owner_id: UUID | None
    is_template: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class Day:
    """A day within a plan."""

    id: UUID
    plan_id: UUID
    day_of_week: str
    total_calories: float | None = None


@dataclass(frozen=True)
class Meal:
    """A meal slot within a day."""

    id: UUID
    day_id: UUID
    meal_type: str


@dataclass(frozen=True)
class FoodItem:
    """A food item within a meal."""

    id: FoodItemId
    meal_id: UUID
    food_name: str
    calories: float | None = None
    carbohydrates: float | None = None
    sugars: float | None = None
    protein: float | None = None
    fat: float | None = None
    quantity: float = 1
    unit: str = "g"
    completed: bool = False
    week: int = 1


@dataclass(frozen=True)
class NewFoodItem:
    """Payload for inserting a food item under a meal."""

    food_name: str
    calories: float | None
    carbohydrates: float | None
    sugars: float | None
    protein: float | None
    fat: float | None
    quantity: float
    unit: str
    completed: bool
    week: int

    @classmethod
    def copy_of(cls, item: FoodItem, *, default_unit: str = "g") -> "NewFoodItem":
        """Build an insert payload copying every nutrition field of ``item``."""
        return cls(
            food_name=item.food_name,
            calories=item.calories,
            carbohydrates=item.carbohydrates,
            sugars=item.sugars,
            protein=item.protein,
            fat=item.fat,
            quantity=item.quantity if item.quantity is not None else 1,
            unit=item.unit or default_unit,
            completed=bool(item.completed),
            week=item.week or 1,
        )


@dataclass(frozen=True)
class CloneError:
    """Diagnostic for one branch of the plan tree that failed to copy."""

    type: str
    template_id: UUID | FoodItemId
    error: str

    def to_dict(self) -> dict[str, object]:
        key = {
            "day": "templateDayId",
            "meals": "templateDayId",
            "meal": "templateMealId",
            "foods": "templateMealId",
            "food": "templateFoodId",
        }[self.type]
        template_id = (
            str(self.template_id)
            if isinstance(self.template_id, UUID)
            else self.template_id
        )
        return {"type": self.type, key: template_id, "error": self.error}


@dataclass(frozen=True)
class CloneResult:
    """Outcome of cloning a template into a user-owned plan."""

    new_plan_id: UUID
    errors: list[CloneError] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.errors)
