"""Favorite foods service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.foods import FavoriteRecord


class FavoriteRepository(Protocol):
    """Persistence interface for favorites."""

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecord]:
        """Return a user's favorites, newest first, with foods joined."""

    def add_favorite(self, user_id: UUID, food_id: UUID) -> FavoriteRecord:
        """Mark a food as favorite."""

    def remove_favorite(self, user_id: UUID, food_id: UUID) -> None:
        """Remove a food from favorites."""


@dataclass
class FavoriteService:
    """Application service for favorites."""

    repository: FavoriteRepository

    def list_favorites(self, user_id: UUID) -> list[FavoriteRecord]:
        """Return the user's favorites."""
        return self.repository.list_favorites(user_id)

    def is_favorite(self, user_id: UUID, food_id: UUID) -> bool:
        """Return True when the food is one of the user's favorites."""
        return any(
            favorite.food_id == food_id
            for favorite in self.repository.list_favorites(user_id)
        )

    def add_favorite(self, user_id: UUID, food_id: UUID) -> FavoriteRecord:
        """Add a favorite, returning the existing row if already present."""
        for favorite in self.repository.list_favorites(user_id):
            if favorite.food_id == food_id:
                return favorite
        return self.repository.add_favorite(user_id, food_id)

    def remove_favorite(self, user_id: UUID, food_id: UUID) -> None:
        """Remove a favorite."""
        self.repository.remove_favorite(user_id, food_id)

    def toggle_favorite(self, user_id: UUID, food_id: UUID) -> bool:
        """Flip favorite state and return the new state."""
        if self.is_favorite(user_id, food_id):
            self.repository.remove_favorite(user_id, food_id)
            return False
        self.repository.add_favorite(user_id, food_id)
        return True
