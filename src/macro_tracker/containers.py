"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_auth_client import (
    HttpxSupabaseAuthClient,
    IdentityProvider,
)
from macro_tracker.adapters.supabase_favorite_repository import (
    SupabaseFavoriteRepository,
)
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from macro_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from macro_tracker.adapters.supabase_weight_log_repository import (
    SupabaseWeightLogRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.favorites import FavoriteService
from macro_tracker.services.foods import FoodService
from macro_tracker.services.meals import MealLogService
from macro_tracker.services.profiles import ProfileService
from macro_tracker.services.weights import WeightLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_provider: IdentityProvider
    profile_service: ProfileService
    food_service: FoodService
    meal_log_service: MealLogService
    weight_log_service: WeightLogService
    favorite_service: FavoriteService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_repository = SupabaseFoodRepository(supabase_client)
    auth_client = HttpxSupabaseAuthClient.create(
        base_url=resolved_settings.auth_base_url,
        api_key=resolved_settings.supabase_anon_key,
        timeout_seconds=resolved_settings.auth_timeout_seconds,
    )

    async def close_resources() -> None:
        await auth_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_provider=auth_client,
        profile_service=ProfileService(SupabaseProfileRepository(supabase_client)),
        food_service=FoodService(food_repository),
        meal_log_service=MealLogService(
            food_repository=food_repository,
            repository=SupabaseMealLogRepository(supabase_client),
        ),
        weight_log_service=WeightLogService(
            SupabaseWeightLogRepository(supabase_client)
        ),
        favorite_service=FavoriteService(SupabaseFavoriteRepository(supabase_client)),
        close_resources=close_resources,
    )
