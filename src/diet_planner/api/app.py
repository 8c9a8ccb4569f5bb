"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from diet_planner.api.admin import router as admin_router
from diet_planner.api.diet import router as diet_router
from diet_planner.api.plans import router as plans_router
from diet_planner.app_logging import configure_logging
from diet_planner.containers import AppContainer
from diet_planner.errors import DietPlanError, InvalidRequest


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Diet Planner")
    app.state.container = container

    app.include_router(diet_router)
    app.include_router(plans_router)
    app.include_router(admin_router)

    @app.exception_handler(DietPlanError)
    async def handle_diet_plan_error(
        request: Request, exc: DietPlanError
    ) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "error": exc.public_message(container.settings.environment),
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = InvalidRequest(_validation_message(exc))
        return JSONResponse(
            status_code=error.status_code,
            content={"success": False, "error": error.message},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body."
    location = ".".join(
        str(part) for part in first.get("loc", ()) if part not in ("body", "query")
    ) or "body"
    if first.get("type") == "missing":
        return f"Missing required field: {location}"
    return f"Invalid value for {location}: {first.get('msg', 'invalid')}"
