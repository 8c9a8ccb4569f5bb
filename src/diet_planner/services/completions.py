"""Meal and food item completion tracking."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from diet_planner.domain.completions import FoodCompletion, MealCompletion
from diet_planner.domain.plans import FoodItem, FoodItemId
from diet_planner.errors import CompletionFailed, FoodItemNotFound
from diet_planner.services.plans import PlanRepository
from diet_planner.week_cycle import format_week_day, normalize_day_name, parse_week_day

_logger = logging.getLogger(__name__)


class CompletionRepository(Protocol):
    """Persistence interface for completion records.

    Upserts must be atomic on the record's scope so that at most one record
    exists per (user, meal slot) and per (user, food item).
    """

    def get_meal_completion(
        self, user_id: UUID, diet_plan_id: UUID, day: str, meal_type: str
    ) -> MealCompletion | None:
        """Return the completion record for a meal slot, if present."""

    def upsert_meal_completion(self, record: MealCompletion) -> None:
        """Insert or update a meal completion record."""

    def get_food_completion(
        self, user_id: UUID, food_item_id: FoodItemId
    ) -> FoodCompletion | None:
        """Return the completion record for a food item, if present."""

    def upsert_food_completion(self, record: FoodCompletion) -> None:
        """Insert or update a food completion record."""


@dataclass
class CompletionService:
    """Service that records completion and keeps meal/item flags in step."""

    completion_repository: CompletionRepository
    plan_repository: PlanRepository

    def set_meal_completion(  # noqa: PLR0913
        self,
        user_id: UUID,
        diet_plan_id: UUID,
        day: str,
        meal_type: str,
        completed: bool,
        cascade: bool = False,
    ) -> MealCompletion:
        """Mark a meal slot complete or incomplete.

        With ``cascade`` the same flag is applied to every food item of the
        slot.
        """
        try:
            record = self._write_meal_completion(
                user_id, diet_plan_id, day, meal_type, completed
            )
            if cascade:
                for item in self._slot_items(diet_plan_id, day, meal_type):
                    self._write_food_completion(user_id, item.id, completed)
                    self.plan_repository.set_food_item_completed(item.id, completed)
        except Exception as exc:
            _logger.exception("Meal completion update failed")
            raise CompletionFailed(
                "Error updating meal completion.", detail=str(exc)
            ) from exc
        return record

    def set_food_completion(
        self,
        user_id: UUID,
        food_item_id: FoodItemId,
        completed: bool,
        cascade: bool = False,
    ) -> FoodCompletion:
        """Mark a food item complete or incomplete.

        The completion record is written first and the flag is then mirrored
        onto the food item row, so a failed record write leaves both
        untouched. With ``cascade`` the parent meal's completion is
        recomputed from its sibling items.
        """
        try:
            item = self.plan_repository.get_food_item(food_item_id)
        except Exception as exc:
            _logger.warning("Food item lookup failed: %s: %s", food_item_id, exc)
            raise FoodItemNotFound(detail=str(exc)) from exc
        if item is None:
            raise FoodItemNotFound()

        try:
            record = self._write_food_completion(user_id, food_item_id, completed)
            self.plan_repository.set_food_item_completed(food_item_id, completed)
            if cascade:
                self._sync_meal_completion(user_id, item)
        except Exception as exc:
            _logger.exception("Food completion update failed")
            raise CompletionFailed(
                "Error updating food completion.", detail=str(exc)
            ) from exc
        return record

    def _write_meal_completion(
        self,
        user_id: UUID,
        diet_plan_id: UUID,
        day: str,
        meal_type: str,
        completed: bool,
    ) -> MealCompletion:
        record = MealCompletion(
            user_id=user_id,
            diet_plan_id=diet_plan_id,
            day=day,
            meal_type=meal_type,
            completed=completed,
            completed_at=_completed_at(completed),
        )
        self.completion_repository.upsert_meal_completion(record)
        return record

    def _write_food_completion(
        self, user_id: UUID, food_item_id: FoodItemId, completed: bool
    ) -> FoodCompletion:
        record = FoodCompletion(
            user_id=user_id,
            food_item_id=food_item_id,
            completed=completed,
            completed_at=_completed_at(completed),
        )
        self.completion_repository.upsert_food_completion(record)
        return record

    def _slot_items(
        self, diet_plan_id: UUID, day_key: str, meal_type: str
    ) -> list[FoodItem]:
        slot = parse_week_day(day_key)
        day_name = normalize_day_name(slot.day)
        items: list[FoodItem] = []
        for day in self.plan_repository.list_days(diet_plan_id):
            if normalize_day_name(day.day_of_week) != day_name:
                continue
            for meal in self.plan_repository.list_meals(day.id):
                if meal.meal_type != meal_type:
                    continue
                items.extend(
                    item
                    for item in self.plan_repository.list_food_items(meal.id)
                    if (item.week or 1) == slot.week
                )
        return items

    def _sync_meal_completion(self, user_id: UUID, item: FoodItem) -> None:
        # Read-then-write: concurrent sibling toggles can leave the meal flag stale.
        meal = self.plan_repository.get_meal(item.meal_id)
        if meal is None:
            return
        day = self.plan_repository.get_day(meal.day_id)
        if day is None:
            return
        siblings = [
            sibling
            for sibling in self.plan_repository.list_food_items(meal.id)
            if (sibling.week or 1) == (item.week or 1)
        ]
        all_completed = bool(siblings) and all(s.completed for s in siblings)
        day_key = format_week_day(item.week or 1, normalize_day_name(day.day_of_week))
        existing = self.completion_repository.get_meal_completion(
            user_id, day.plan_id, day_key, meal.meal_type
        )
        if existing is None and not all_completed:
            return
        if existing is not None and existing.completed == all_completed:
            return
        self._write_meal_completion(
            user_id, day.plan_id, day_key, meal.meal_type, all_completed
        )


def _completed_at(completed: bool) -> datetime | None:
    return datetime.now(tz=UTC) if completed else None
