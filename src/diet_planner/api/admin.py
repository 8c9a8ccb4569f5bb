"""Admin-only maintenance endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from diet_planner.api.dependencies import get_container, require_admin, unexpected_error
from diet_planner.api.schemas import SeedRequest
from diet_planner.containers import AppContainer
from diet_planner.errors import DietPlanError

router = APIRouter(tags=["admin"])


@router.post("/migrate-to-two-week", dependencies=[Depends(require_admin)])
async def migrate_to_two_week(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Duplicate week-1 food items as week 2 for every user plan."""
    try:
        results = container.migration_service.migrate_to_two_week()
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("migrating plans", exc) from exc
    return {
        "success": True,
        "message": "Migration to 2-week diet plan completed",
        "results": [result.to_dict() for result in results],
    }


@router.post("/seed", dependencies=[Depends(require_admin)])
async def seed_template(
    payload: SeedRequest | None = None,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create the built-in two-week template plan."""
    plan_name = payload.custom_plan_name if payload else None
    try:
        result = container.seed_service.seed_template(plan_name)
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("seeding template", exc) from exc
    return {
        "success": True,
        "message": "Successfully seeded the database with a 2-week Italian diet plan",
        "results": result.to_dict(),
    }
