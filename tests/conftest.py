"""Shared test fixtures."""

from dataclasses import dataclass, field, fields, replace
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from macro_tracker.adapters.supabase_auth_client import IdentityProvider
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.foods import FavoriteRecord, FoodCategory, FoodRecord
from macro_tracker.domain.meals import MealLogRecord, MealType
from macro_tracker.domain.profiles import (
    ActivityLevel,
    GoalType,
    ProfileRecord,
    UnitSystem,
)
from macro_tracker.domain.weights import WeightLogRecord
from macro_tracker.services.favorites import FavoriteRepository, FavoriteService
from macro_tracker.services.foods import FoodRepository, FoodService
from macro_tracker.services.meals import MealLogRepository, MealLogService
from macro_tracker.services.profiles import ProfileRepository, ProfileService
from macro_tracker.services.weights import WeightLogRepository, WeightLogService

USER_TOKEN = "user-token"
OTHER_TOKEN = "other-token"


def make_food(  # noqa: PLR0913
    name: str = "Chicken Breast",
    category: FoodCategory = FoodCategory.PROTEINS,
    calories: float = 165,
    protein: float = 31,
    carbs: float = 0,
    fat: float = 3.6,
    serving_grams: float = 100,
    is_system_food: bool = True,
    created_by: UUID | None = None,
) -> FoodRecord:
    return FoodRecord(
        id=uuid4(),
        name=name,
        category=category,
        calories_per_serving=calories,
        protein_grams=protein,
        carbs_grams=carbs,
        fat_grams=fat,
        serving_size=f"{serving_grams:g}g",
        serving_grams=serving_grams,
        is_system_food=is_system_food,
        created_by=created_by,
    )


def make_profile(user_id: UUID, **overrides: object) -> ProfileRecord:
    values: dict[str, object] = {
        "id": uuid4(),
        "user_id": user_id,
        "name": None,
        "age": None,
        "gender": None,
        "current_weight": None,
        "height": None,
        "target_weight": None,
        "goal_type": GoalType.MAINTAIN,
        "activity_level": ActivityLevel.MODERATELY_ACTIVE,
        "daily_calorie_target": None,
        "daily_protein_target": None,
        "daily_carbs_target": None,
        "daily_fat_target": None,
        "unit_system": UnitSystem.METRIC,
        "onboarding_completed": False,
    }
    values.update(overrides)
    return ProfileRecord(**values)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, ProfileRecord] = field(default_factory=dict)
    updates: list[dict[str, object]] = field(default_factory=list)

    def get_profile(self, user_id: UUID) -> ProfileRecord | None:
        return self.profiles.get(user_id)

    def update_profile(
        self, user_id: UUID, updates: dict[str, object]
    ) -> ProfileRecord:
        self.updates.append(dict(updates))
        known = {item.name for item in fields(ProfileRecord)}
        current = self.profiles[user_id]
        updated = replace(
            current, **{key: value for key, value in updates.items() if key in known}
        )
        self.profiles[user_id] = updated
        return updated


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: dict[UUID, FoodRecord] = field(default_factory=dict)

    def add(self, food: FoodRecord) -> FoodRecord:
        self.foods[food.id] = food
        return food

    def search_foods(
        self, user_id: UUID, query: str | None, category: FoodCategory | None
    ) -> list[FoodRecord]:
        results = []
        for food in self.foods.values():
            if not (food.is_system_food or food.created_by == user_id):
                continue
            if query and query.lower() not in food.name.lower():
                continue
            if category is not None and food.category != category:
                continue
            results.append(food)
        return results

    def get_food(self, food_id: UUID) -> FoodRecord | None:
        return self.foods.get(food_id)

    def create_food(self, user_id: UUID, payload: dict[str, object]) -> FoodRecord:
        food = FoodRecord(
            id=uuid4(),
            name=str(payload["name"]),
            category=FoodCategory(payload.get("category", FoodCategory.CUSTOM)),
            calories_per_serving=float(payload.get("calories_per_serving", 0)),
            protein_grams=float(payload.get("protein_grams", 0)),
            carbs_grams=float(payload.get("carbs_grams", 0)),
            fat_grams=float(payload.get("fat_grams", 0)),
            serving_size=str(payload.get("serving_size", "100g")),
            serving_grams=float(payload.get("serving_grams", 100)),
            is_system_food=bool(payload.get("is_system_food", False)),
            created_by=user_id,
        )
        self.foods[food.id] = food
        return food

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodRecord:
        updated = replace(self.foods[food_id], **payload)
        self.foods[food_id] = updated
        return updated

    def delete_food(self, food_id: UUID) -> None:
        self.foods.pop(food_id, None)


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log repository for tests."""

    logs: dict[UUID, MealLogRecord] = field(default_factory=dict)

    def create_meal_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> MealLogRecord:
        log = MealLogRecord(
            id=uuid4(),
            user_id=user_id,
            food_id=UUID(str(payload["food_id"])),
            meal_type=MealType(payload["meal_type"]),
            servings=float(payload["servings"]),
            calories=int(payload["calories"]),
            protein=float(payload["protein"]),
            carbs=float(payload["carbs"]),
            fat=float(payload["fat"]),
            logged_date=date.fromisoformat(str(payload["logged_date"])),
            created_at=datetime.now(tz=UTC),
        )
        self.logs[log.id] = log
        return log

    def list_meal_logs(self, user_id: UUID, logged_date: date) -> list[MealLogRecord]:
        return [
            log
            for log in self.logs.values()
            if log.user_id == user_id and log.logged_date == logged_date
        ]

    def get_meal_log(self, user_id: UUID, log_id: UUID) -> MealLogRecord | None:
        log = self.logs.get(log_id)
        if log is None or log.user_id != user_id:
            return None
        return log

    def update_meal_log(
        self, user_id: UUID, log_id: UUID, payload: dict[str, object]
    ) -> MealLogRecord:
        updated = replace(self.logs[log_id], **payload)
        self.logs[log_id] = updated
        return updated

    def delete_meal_log(self, user_id: UUID, log_id: UUID) -> None:
        self.logs.pop(log_id, None)


@dataclass
class InMemoryWeightLogRepository(WeightLogRepository):
    """In-memory weight log repository keyed by user and date."""

    logs: dict[tuple[UUID, date], WeightLogRecord] = field(default_factory=dict)

    def upsert_weight_log(
        self, user_id: UUID, payload: dict[str, object]
    ) -> WeightLogRecord:
        logged_date = date.fromisoformat(str(payload["logged_date"]))
        existing = self.logs.get((user_id, logged_date))
        log = WeightLogRecord(
            id=existing.id if existing else uuid4(),
            user_id=user_id,
            weight=float(payload["weight"]),
            logged_date=logged_date,
            notes=payload.get("notes"),
        )
        self.logs[(user_id, logged_date)] = log
        return log

    def list_weight_logs(self, user_id: UUID, since: date) -> list[WeightLogRecord]:
        return [
            log
            for (owner, logged_date), log in self.logs.items()
            if owner == user_id and logged_date >= since
        ]

    def get_weight_log(self, user_id: UUID, log_id: UUID) -> WeightLogRecord | None:
        for log in self.logs.values():
            if log.id == log_id and log.user_id == user_id:
                return log
        return None

    def delete_weight_log(self, user_id: UUID, log_id: UUID) -> None:
        for key, log in list(self.logs.items()):
            if log.id == log_id and log.user_id == user_id:
                del self.logs[key]


@dataclass
class InMemoryFavoriteRepository(FavoriteRepository):
    """In-memory favorite repository for tests."""

    favorites: list[FavoriteRecord] = field(default_factory=list)

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecord]:
        return [fav for fav in reversed(self.favorites) if fav.user_id == user_id]

    def add_favorite(self, user_id: UUID, food_id: UUID) -> FavoriteRecord:
        favorite = FavoriteRecord(id=uuid4(), user_id=user_id, food_id=food_id)
        self.favorites.append(favorite)
        return favorite

    def remove_favorite(self, user_id: UUID, food_id: UUID) -> None:
        self.favorites = [
            fav
            for fav in self.favorites
            if not (fav.user_id == user_id and fav.food_id == food_id)
        ]


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider that maps fixed tokens to user ids."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    async def get_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        supabase_anon_key="anon.payload.signature",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    return uuid4()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def profile_repository(user_id: UUID) -> InMemoryProfileRepository:
    repository = InMemoryProfileRepository()
    repository.profiles[user_id] = make_profile(user_id)
    return repository


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_id: UUID,
    other_user_id: UUID,
    food_repository: InMemoryFoodRepository,
    profile_repository: InMemoryProfileRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_provider=FakeIdentityProvider(
            tokens={USER_TOKEN: user_id, OTHER_TOKEN: other_user_id}
        ),
        profile_service=ProfileService(profile_repository),
        food_service=FoodService(food_repository),
        meal_log_service=MealLogService(
            food_repository=food_repository,
            repository=InMemoryMealLogRepository(),
        ),
        weight_log_service=WeightLogService(InMemoryWeightLogRepository()),
        favorite_service=FavoriteService(InMemoryFavoriteRepository()),
        close_resources=close_resources,
    )
