"""Shared request dependencies."""

from __future__ import annotations

import logging
from uuid import UUID  # noqa: TC003

from fastapi import Depends, Header, Request

from diet_planner.config import parse_bearer_token
from diet_planner.containers import AppContainer
from diet_planner.errors import DietPlanError, ServerError

_logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def get_bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Return the bearer token from the Authorization header, if any."""
    return parse_bearer_token(authorization)


def require_user(
    token: str | None = Depends(get_bearer_token),
    container: AppContainer = Depends(get_container),
) -> UUID:
    """Authenticate the request and return the user id."""
    try:
        return container.auth_service.authenticate(token)
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("authenticating request", exc) from exc


def require_admin(
    token: str | None = Depends(get_bearer_token),
    container: AppContainer = Depends(get_container),
) -> UUID:
    """Authenticate the request and ensure the user is an admin."""
    try:
        return container.auth_service.require_admin(token)
    except DietPlanError:
        raise
    except Exception as exc:
        raise unexpected_error("checking admin role", exc) from exc


def unexpected_error(action: str, exc: Exception) -> ServerError:
    """Log an unexpected failure and wrap it in a ServerError."""
    _logger.exception("Unexpected error while %s", action)
    return ServerError(detail=str(exc))
