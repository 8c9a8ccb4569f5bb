"""One-shot migration of user plans to the two-week cycle."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from diet_planner.domain.plans import FoodItem, NewFoodItem, Plan
from diet_planner.errors import MigrationFailed
from diet_planner.services.plans import PlanRepository
from diet_planner.week_cycle import normalize_day_name

FOOD_ITEMS_TABLE = "diet_food_items"
WEEK_COLUMN = "week"
ADD_WEEK_COLUMN_SQL = (
    f"ALTER TABLE {FOOD_ITEMS_TABLE} ADD COLUMN {WEEK_COLUMN} INTEGER DEFAULT 1"
)

_logger = logging.getLogger(__name__)


class SchemaRepository(Protocol):
    """Server-side procedures used to inspect and alter the schema."""

    def column_exists(self, table_name: str, column_name: str) -> bool:
        """Return True when the column exists on the table."""

    def execute_sql(self, sql: str) -> None:
        """Execute a DDL statement on the server."""


@dataclass(frozen=True)
class MigrationResult:
    """Outcome for a single (plan, day, meal type) group."""

    plan_id: UUID
    status: str
    message: str
    day: str | None = None
    meal_type: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"planId": str(self.plan_id)}
        if self.day is not None:
            payload["day"] = self.day
        if self.meal_type is not None:
            payload["mealType"] = self.meal_type
        payload[self.status] = self.message
        return payload


@dataclass
class MigrationService:
    """Adds the week column and duplicates week-1 food items as week 2."""

    schema_repository: SchemaRepository
    plan_repository: PlanRepository

    def migrate_to_two_week(self) -> list[MigrationResult]:
        """Run the migration; groups that already have week 2 are skipped."""
        self.ensure_week_column()
        try:
            plans = self.plan_repository.list_user_plans()
        except Exception as exc:
            raise MigrationFailed(
                "Error fetching diet plans.", detail=str(exc)
            ) from exc

        results: list[MigrationResult] = []
        for plan in plans:
            results.extend(self._migrate_plan(plan))
        _logger.info(
            "Two-week migration finished: %s plans, %s results",
            len(plans),
            len(results),
        )
        return results

    def ensure_week_column(self) -> None:
        """Add the week column to food items when it is missing."""
        try:
            exists = self.schema_repository.column_exists(FOOD_ITEMS_TABLE, WEEK_COLUMN)
        except Exception as exc:
            raise MigrationFailed(
                "Error checking column.", detail=str(exc)
            ) from exc
        if exists:
            return
        try:
            self.schema_repository.execute_sql(ADD_WEEK_COLUMN_SQL)
        except Exception as exc:
            raise MigrationFailed(
                "Error adding week column.", detail=str(exc)
            ) from exc
        _logger.info("Added %s column to %s", WEEK_COLUMN, FOOD_ITEMS_TABLE)

    def _migrate_plan(self, plan: Plan) -> list[MigrationResult]:
        try:
            groups = self._group_items(plan.id)
        except Exception as exc:
            _logger.warning("Failed to load food items for plan %s: %s", plan.id, exc)
            return [
                MigrationResult(
                    plan_id=plan.id,
                    status="error",
                    message=f"Error fetching food items: {exc}",
                )
            ]

        results = []
        for (day, meal_type), items in groups.items():
            if any(item.week == 2 for item in items):  # noqa: PLR2004
                results.append(
                    MigrationResult(
                        plan_id=plan.id,
                        day=day,
                        meal_type=meal_type,
                        status="skipped",
                        message="Week 2 items already exist",
                    )
                )
                continue
            results.extend(self._duplicate_week_one(plan.id, day, meal_type, items))
        return results

    def _group_items(self, plan_id: UUID) -> dict[tuple[str, str], list[FoodItem]]:
        groups: dict[tuple[str, str], list[FoodItem]] = {}
        for day in self.plan_repository.list_days(plan_id):
            day_name = normalize_day_name(day.day_of_week)
            for meal in self.plan_repository.list_meals(day.id):
                items = self.plan_repository.list_food_items(meal.id)
                if items:
                    groups.setdefault((day_name, meal.meal_type), []).extend(items)
        return groups

    def _duplicate_week_one(
        self, plan_id: UUID, day: str, meal_type: str, items: list[FoodItem]
    ) -> list[MigrationResult]:
        results = []
        for item in items:
            if (item.week or 1) != 1:
                continue
            payload = replace(NewFoodItem.copy_of(item), week=2, completed=False)
            try:
                self.plan_repository.create_food_item(item.meal_id, payload)
            except Exception as exc:
                _logger.warning("Failed to create week 2 copy of %s: %s", item.id, exc)
                results.append(
                    MigrationResult(
                        plan_id=plan_id,
                        day=day,
                        meal_type=meal_type,
                        status="error",
                        message=f"Error creating week 2 item: {exc}",
                    )
                )
        if not results:
            results.append(
                MigrationResult(
                    plan_id=plan_id,
                    day=day,
                    meal_type=meal_type,
                    status="success",
                    message="Created week 2 items from week 1",
                )
            )
        return results
