"""Application errors mapped to HTTP responses."""

from fastapi import status


class DietPlanError(Exception):
    """Base error carrying a user-facing message and HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error."

    def __init__(self, message: str | None = None, detail: str | None = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def public_message(self, environment: str) -> str:
        """Return the message, with the underlying detail only when running locally."""
        if self.detail and environment == "local":
            return f"{self.message} ({self.detail})"
        return self.message


class InvalidRequest(DietPlanError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class AuthRequired(DietPlanError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required."


class AdminRequired(DietPlanError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Admin privileges required."


class TemplateNotFound(DietPlanError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Template not found."


class PlanNotFound(DietPlanError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Plan not found or does not belong to user."


class FoodItemNotFound(DietPlanError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Food item not found."


class CreatePlanFailed(DietPlanError):
    default_message = "Failed to create user plan."


class FetchDaysFailed(DietPlanError):
    default_message = "Failed to fetch template days."


class CompletionFailed(DietPlanError):
    default_message = "Failed to update completion status."


class MigrationFailed(DietPlanError):
    default_message = "Migration failed."


class SeedFailed(DietPlanError):
    default_message = "Failed to seed the template plan."


class ServerError(DietPlanError):
    """Catch-all for unexpected failures."""
