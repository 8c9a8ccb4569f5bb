"""Pydantic models for request payloads."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from diet_planner.domain.plans import FoodItemId, parse_food_item_id

MealType = Literal["breakfast", "lunch", "snack", "dinner"]


class CloneRequest(BaseModel):
    """Body of a template clone request."""

    model_config = ConfigDict(populate_by_name=True)

    template_id: UUID = Field(alias="templateId")


class MealCompletionRequest(BaseModel):
    """Body of a meal completion toggle."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    diet_plan_id: UUID = Field(alias="dietPlanId")
    day: str = Field(min_length=1)
    meal_type: MealType = Field(alias="mealType")
    completed: bool


class FoodCompletionRequest(BaseModel):
    """Body of a food item completion toggle."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    food_item_id: int | str = Field(alias="foodItemId")
    completed: bool

    @field_validator("food_item_id")
    @classmethod
    def _normalize_food_item_id(cls, value: int | str) -> FoodItemId:
        food_item_id = parse_food_item_id(value)
        if food_item_id == "":
            raise ValueError("must not be empty")
        return food_item_id


class SeedRequest(BaseModel):
    """Optional body of a template seed request."""

    model_config = ConfigDict(populate_by_name=True)

    custom_plan_name: str | None = Field(
        default=None, alias="customPlanName", min_length=1
    )
