"""Read-only plan, template and analytics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query

from diet_planner.api.dependencies import get_container, require_user, unexpected_error
from diet_planner.containers import AppContainer
from diet_planner.errors import DietPlanError

if TYPE_CHECKING:
    from diet_planner.domain.analytics import CalorieDay, CalorieSummary

router = APIRouter(tags=["plans"])


@router.get("/templates")
async def list_templates(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the available plan templates."""
    try:
        templates = container.plan_service.list_templates()
    except Exception as exc:
        raise unexpected_error("listing templates", exc) from exc
    return {
        "success": True,
        "templates": [
            {
                "id": str(template.id),
                "name": template.name,
                "description": template.description,
                "createdAt": (
                    template.created_at.isoformat() if template.created_at else None
                ),
            }
            for template in templates
        ],
    }


@router.get("/plans/{plan_id}")
async def get_plan(
    plan_id: UUID,
    start_date: str | None = Query(default=None, alias="startDate"),
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a plan as a week-day map with the current slot."""
    try:
        plan = container.plan_service.get_plan_view(
            plan_id, user_id, start_date=start_date
        )
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("loading plan", exc) from exc
    return {"success": True, "plan": plan}


@router.get("/plans/{plan_id}/analytics")
async def get_plan_analytics(
    plan_id: UUID,
    user_id: UUID = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return per-day calorie analytics for a plan."""
    try:
        summary = container.analytics_service.calorie_summary(plan_id, user_id)
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("computing analytics", exc) from exc
    return {"success": True, "analytics": _format_summary(summary)}


def _format_summary(summary: CalorieSummary) -> dict[str, object]:
    return {
        "days": [_format_day(day) for day in summary.days],
        "totalCalories": summary.total_calories,
        "averageCalories": summary.average_calories,
        "maxDay": _format_day(summary.max_day) if summary.max_day else None,
        "minDay": _format_day(summary.min_day) if summary.min_day else None,
    }


def _format_day(day: CalorieDay) -> dict[str, object]:
    return {
        "key": day.key,
        "week": day.week,
        "day": day.day,
        "calories": day.calories,
    }
