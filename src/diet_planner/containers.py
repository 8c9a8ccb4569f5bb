"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from diet_planner.adapters.supabase_auth_client import (
    SupabaseAuthClient,
    SupabaseProfileRepository,
)
from diet_planner.adapters.supabase_completion_repository import (
    SupabaseCompletionRepository,
)
from diet_planner.adapters.supabase_plan_repository import SupabasePlanRepository
from diet_planner.adapters.supabase_schema_repository import SupabaseSchemaRepository
from diet_planner.config import Settings
from diet_planner.services.analytics import AnalyticsService
from diet_planner.services.auth import AuthService
from diet_planner.services.clone import CloneService
from diet_planner.services.completions import CompletionService
from diet_planner.services.migration import MigrationService
from diet_planner.services.plans import PlanService
from diet_planner.services.seed import SeedService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    plan_service: PlanService
    clone_service: CloneService
    completion_service: CompletionService
    analytics_service: AnalyticsService
    migration_service: MigrationService
    seed_service: SeedService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    data_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    plan_repository = SupabasePlanRepository(data_client)
    completion_repository = SupabaseCompletionRepository(data_client)
    schema_repository = SupabaseSchemaRepository(data_client)
    profile_repository = SupabaseProfileRepository(data_client)

    migration_service = MigrationService(schema_repository, plan_repository)
    plan_service = PlanService(
        plan_repository,
        default_start_offset_days=resolved_settings.default_plan_start_offset_days,
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(
            auth_client=SupabaseAuthClient(auth_client),
            profile_repository=profile_repository,
        ),
        plan_service=plan_service,
        clone_service=CloneService(
            plan_repository, default_unit=resolved_settings.default_food_unit
        ),
        completion_service=CompletionService(completion_repository, plan_repository),
        analytics_service=AnalyticsService(plan_service),
        migration_service=migration_service,
        seed_service=SeedService(plan_repository, migration_service),
    )
