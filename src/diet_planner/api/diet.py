"""Clone and completion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from diet_planner.api.dependencies import (
    get_bearer_token,
    get_container,
    unexpected_error,
)
from diet_planner.api.schemas import (
    CloneRequest,
    FoodCompletionRequest,
    MealCompletionRequest,
)
from diet_planner.containers import AppContainer
from diet_planner.errors import DietPlanError

router = APIRouter(tags=["diet"])


@router.post("/clone")
async def clone_template(
    payload: CloneRequest,
    token: str | None = Depends(get_bearer_token),
    container: AppContainer = Depends(get_container),
) -> JSONResponse:
    """Clone a template into a plan owned by the caller.

    The body is validated before the token is checked.
    """
    try:
        user_id = container.auth_service.authenticate(token)
        result = container.clone_service.clone(payload.template_id, user_id)
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("cloning template", exc) from exc

    body: dict[str, object] = {
        "success": True,
        "dietPlanId": str(result.new_plan_id),
    }
    if not result.partial:
        return JSONResponse(status_code=status.HTTP_200_OK, content=body)
    body["partial"] = True
    body["errors"] = [error.to_dict() for error in result.errors]
    return JSONResponse(status_code=status.HTTP_207_MULTI_STATUS, content=body)


@router.post("/meal-completion")
async def meal_completion(
    payload: MealCompletionRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Mark a meal slot complete or incomplete."""
    try:
        container.completion_service.set_meal_completion(
            user_id=payload.user_id,
            diet_plan_id=payload.diet_plan_id,
            day=payload.day,
            meal_type=payload.meal_type,
            completed=payload.completed,
            cascade=True,
        )
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("updating meal completion", exc) from exc
    return {
        "success": True,
        "message": f"Meal marked as {_state(payload.completed)}",
    }


@router.post("/food-completion")
async def food_completion(
    payload: FoodCompletionRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Mark a food item complete or incomplete."""
    try:
        container.completion_service.set_food_completion(
            user_id=payload.user_id,
            food_item_id=payload.food_item_id,
            completed=payload.completed,
            cascade=True,
        )
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("updating food completion", exc) from exc
    return {
        "success": True,
        "message": f"Food item marked as {_state(payload.completed)}",
    }


def _state(completed: bool) -> str:
    return "completed" if completed else "not completed"
