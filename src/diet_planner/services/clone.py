"""Template cloning: deep-copies a template plan into a user-owned plan."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from diet_planner.domain.plans import (
    CloneError,
    CloneResult,
    Day,
    Meal,
    NewFoodItem,
)
from diet_planner.errors import (
    AuthRequired,
    CreatePlanFailed,
    FetchDaysFailed,
    TemplateNotFound,
)
from diet_planner.services.plans import PlanRepository

_logger = logging.getLogger(__name__)


@dataclass
class CloneService:
    """Copies a template's days, meals and food items into a new plan.

    Preconditions (auth, template lookup, plan insert, day fetch) fail fast.
    Below the plan level each branch is copied independently: a failure is
    logged and recorded, and the remaining siblings are still copied.
    """

    repository: PlanRepository
    default_unit: str = "g"

    def clone(self, template_id: UUID, requesting_user_id: UUID | None) -> CloneResult:
        """Clone a template for a user and return the new plan id with errors."""
        if requesting_user_id is None:
            raise AuthRequired()

        try:
            template = self.repository.get_template(template_id)
        except Exception as exc:
            _logger.warning("Template lookup failed: %s: %s", template_id, exc)
            raise TemplateNotFound(detail=str(exc)) from exc
        if template is None:
            raise TemplateNotFound()

        try:
            new_plan = self.repository.create_plan(
                name=template.name,
                description=template.description,
                owner_id=requesting_user_id,
                created_at=datetime.now(tz=UTC),
            )
        except Exception as exc:
            _logger.warning("Plan insert failed for template %s: %s", template_id, exc)
            raise CreatePlanFailed(detail=str(exc)) from exc

        try:
            template_days = self.repository.list_days(template.id)
        except Exception as exc:
            _logger.warning("Day fetch failed for template %s: %s", template_id, exc)
            raise FetchDaysFailed(detail=str(exc)) from exc

        errors: list[CloneError] = []
        for template_day in template_days:
            self._clone_day(template_day, new_plan.id, errors)

        _logger.info(
            "Cloned template %s into plan %s for user %s (%s errors)",
            template_id,
            new_plan.id,
            requesting_user_id,
            len(errors),
        )
        return CloneResult(new_plan_id=new_plan.id, errors=errors)

    def _clone_day(
        self, template_day: Day, new_plan_id: UUID, errors: list[CloneError]
    ) -> None:
        try:
            new_day = self.repository.create_day(
                plan_id=new_plan_id,
                day_of_week=template_day.day_of_week,
                total_calories=template_day.total_calories,
            )
        except Exception as exc:
            _record(errors, "day", template_day.id, exc)
            return

        try:
            template_meals = self.repository.list_meals(template_day.id)
        except Exception as exc:
            _record(errors, "meals", template_day.id, exc)
            return

        for template_meal in template_meals:
            self._clone_meal(template_meal, new_day.id, errors)

    def _clone_meal(
        self, template_meal: Meal, new_day_id: UUID, errors: list[CloneError]
    ) -> None:
        try:
            new_meal = self.repository.create_meal(
                day_id=new_day_id, meal_type=template_meal.meal_type
            )
        except Exception as exc:
            _record(errors, "meal", template_meal.id, exc)
            return

        try:
            template_foods = self.repository.list_food_items(template_meal.id)
        except Exception as exc:
            _record(errors, "foods", template_meal.id, exc)
            return

        for template_food in template_foods:
            try:
                self.repository.create_food_item(
                    new_meal.id,
                    NewFoodItem.copy_of(template_food, default_unit=self.default_unit),
                )
            except Exception as exc:
                _record(errors, "food", template_food.id, exc)


def _record(
    errors: list[CloneError], branch: str, template_id: UUID, exc: Exception
) -> None:
    _logger.warning("Clone %s branch failed for %s: %s", branch, template_id, exc)
    errors.append(CloneError(type=branch, template_id=template_id, error=str(exc)))
