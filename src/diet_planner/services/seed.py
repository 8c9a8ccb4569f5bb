"""Seeds the plan store with the built-in two-week template."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from diet_planner.domain.plans import MEAL_TYPES, Meal, NewFoodItem, Plan
from diet_planner.domain.seed_template import (
    TEMPLATE_DESCRIPTION,
    TEMPLATE_NAME,
    TWO_WEEK_TEMPLATE,
    TemplateFood,
)
from diet_planner.errors import SeedFailed
from diet_planner.services.migration import MigrationService
from diet_planner.services.plans import PlanRepository
from diet_planner.week_cycle import DAY_NAMES, format_week_day

_logger = logging.getLogger(__name__)

WEEKS = (1, 2)

SeedTemplate = dict[str, dict[str, tuple[TemplateFood, ...]]]


@dataclass(frozen=True)
class SeedResult:
    """Rows created by a seed run."""

    plan: Plan
    days: int
    meals: int
    food_items: int

    def to_dict(self) -> dict[str, object]:
        return {
            "dietPlanId": str(self.plan.id),
            "planName": self.plan.name,
            "dietDays": self.days,
            "meals": self.meals,
            "foodItems": self.food_items,
        }


@dataclass
class SeedService:
    """Builds a template plan from the packaged two-week template.

    One day per weekday and one meal per meal type are created; food items of
    both weeks hang off the same meal and differ by ``week``. Any failed
    insert aborts the run with ``SeedFailed`` and leaves earlier rows in place.
    """

    plan_repository: PlanRepository
    migration_service: MigrationService
    template: SeedTemplate = field(default_factory=lambda: TWO_WEEK_TEMPLATE)

    def seed_template(self, plan_name: str | None = None) -> SeedResult:
        """Create the template plan and return what was inserted."""
        self.migration_service.ensure_week_column()

        try:
            plan = self.plan_repository.create_template(
                name=plan_name or TEMPLATE_NAME,
                description=TEMPLATE_DESCRIPTION,
                created_at=datetime.now(tz=UTC),
            )
        except Exception as exc:
            raise _failed("Failed to create diet plan.", exc) from exc

        meals = self._create_meals(plan)
        food_items = 0
        for week in WEEKS:
            for day_name in DAY_NAMES:
                slot = self.template.get(format_week_day(week, day_name), {})
                for meal_type, foods in slot.items():
                    meal = meals.get((day_name, meal_type))
                    if meal is None:
                        continue
                    for food in foods:
                        self._create_food_item(meal, food, week)
                        food_items += 1

        _logger.info(
            "Seeded template %s: %s days, %s meals, %s food items",
            plan.id,
            len(DAY_NAMES),
            len(meals),
            food_items,
        )
        return SeedResult(
            plan=plan, days=len(DAY_NAMES), meals=len(meals), food_items=food_items
        )

    def _create_meals(self, plan: Plan) -> dict[tuple[str, str], Meal]:
        meals: dict[tuple[str, str], Meal] = {}
        for day_name in DAY_NAMES:
            try:
                day = self.plan_repository.create_day(
                    plan_id=plan.id, day_of_week=day_name, total_calories=None
                )
            except Exception as exc:
                raise _failed(
                    f"Failed to create diet day for {day_name}.", exc
                ) from exc
            for meal_type in MEAL_TYPES:
                try:
                    meals[(day_name, meal_type)] = self.plan_repository.create_meal(
                        day_id=day.id, meal_type=meal_type
                    )
                except Exception as exc:
                    raise _failed(
                        f"Failed to create meal {meal_type} for {day_name}.", exc
                    ) from exc
        return meals

    def _create_food_item(self, meal: Meal, food: TemplateFood, week: int) -> None:
        nutrition = food.nutrition
        item = NewFoodItem(
            food_name=food.food_name,
            calories=nutrition.calories,
            carbohydrates=nutrition.carbohydrates,
            sugars=None,
            protein=nutrition.protein,
            fat=nutrition.fat,
            quantity=food.quantity,
            unit=food.unit,
            completed=False,
            week=week,
        )
        try:
            self.plan_repository.create_food_item(meal.id, item)
        except Exception as exc:
            raise _failed(f"Failed to create food item {food.food_name}.", exc) from exc


def _failed(message: str, exc: Exception) -> SeedFailed:
    _logger.warning("%s %s", message, exc)
    return SeedFailed(message, detail=str(exc))
