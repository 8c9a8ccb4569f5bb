"""Supabase-backed token verification and profile lookups."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from diet_planner.services.auth import AuthClient, ProfileRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthClient(AuthClient):
    """Resolves access tokens with Supabase Auth."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        try:
            response = self.client.auth.get_user(access_token)
        except Exception as exc:
            _logger.warning("Token verification failed: %s", exc)
            return None
        user = getattr(response, "user", None) if response else None
        if user is None or not getattr(user, "id", None):
            return None
        return UUID(str(user.id))


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Reads user roles from the profiles table."""

    client: Client

    def get_role(self, user_id: UUID) -> str | None:
        response = (
            self.client.table("profiles")
            .select("role")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        role = response.data[0].get("role")
        return str(role) if role else None
