from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    visited_places: int = 0
    # Meters, summed from the places' distance labels
    distance_walked: float = 0.0
    favorite_places: int = 0
    collection_comments: int = 0
    days_active: int = 0
    completed_collections: int = 0
    categories_explored: int = 0
    restaurants_visited: int = 0
