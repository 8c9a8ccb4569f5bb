"""Bearer-token authentication and admin checks."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from diet_planner.errors import AdminRequired, AuthRequired

ADMIN_ROLE = "admin"


class AuthClient(Protocol):
    """Interface for resolving access tokens to users."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, otherwise None."""


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_role(self, user_id: UUID) -> str | None:
        """Return the profile role for a user, if any."""


@dataclass
class AuthService:
    """Service that authenticates requests."""

    auth_client: AuthClient
    profile_repository: ProfileRepository

    def authenticate(self, access_token: str | None) -> UUID:
        """Return the user id for a token or raise AuthRequired."""
        if not access_token:
            raise AuthRequired()
        user_id = self.auth_client.get_user_id(access_token)
        if user_id is None:
            raise AuthRequired("Invalid authentication token.")
        return user_id

    def require_admin(self, access_token: str | None) -> UUID:
        """Return the user id when the token belongs to an admin."""
        user_id = self.authenticate(access_token)
        if self.profile_repository.get_role(user_id) != ADMIN_ROLE:
            raise AdminRequired()
        return user_id
