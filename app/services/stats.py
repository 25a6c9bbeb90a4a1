from __future__ import annotations

from collections.abc import Sequence

from app.schemas.places import Place
from app.schemas.stats import UserStats
from app.services.distance import parse_distance_label

DINING_CATEGORIES = frozenset({"Ресторан", "Кафе"})


def is_dining(place: Place) -> bool:
    return place.category in DINING_CATEGORIES


def count_categories_explored(catalog: Sequence[Place]) -> int:
    return len({p.category for p in catalog if p.is_visited})


def compute_stats(
    catalog: Sequence[Place],
    *,
    collection_comments: int = 0,
    days_active: int = 0,
) -> UserStats:
    """Full recompute from the catalog.

    Used on load and for recovery; the incremental path in
    :func:`apply_place_change` must always agree with it.
    """
    visited = [p for p in catalog if p.is_visited]
    return UserStats(
        visited_places=len(visited),
        distance_walked=sum(parse_distance_label(p.distance) for p in visited),
        favorite_places=sum(1 for p in catalog if p.is_favorite),
        collection_comments=collection_comments,
        days_active=days_active,
        completed_collections=0,
        categories_explored=count_categories_explored(catalog),
        restaurants_visited=sum(1 for p in visited if is_dining(p)),
    )


def apply_place_change(
    stats: UserStats,
    before: Place,
    after: Place,
    catalog_after: Sequence[Place],
) -> UserStats:
    """Update ``stats`` for a single place going from ``before`` to ``after``."""
    update: dict[str, int | float] = {}

    if after.is_visited and not before.is_visited:
        update["visited_places"] = stats.visited_places + 1
        update["distance_walked"] = stats.distance_walked + parse_distance_label(after.distance)
        if is_dining(after):
            update["restaurants_visited"] = stats.restaurants_visited + 1
        # A new visit may land in an already explored category, so recount
        update["categories_explored"] = count_categories_explored(catalog_after)

    if after.is_favorite != before.is_favorite:
        update["favorite_places"] = stats.favorite_places + (1 if after.is_favorite else -1)

    if not update:
        return stats
    return stats.model_copy(update=update)


def apply_comment(stats: UserStats, *, is_new: bool) -> UserStats:
    if not is_new:
        return stats
    return stats.model_copy(update={"collection_comments": stats.collection_comments + 1})


def with_days_active(stats: UserStats, days_active: int) -> UserStats:
    if stats.days_active == days_active:
        return stats
    return stats.model_copy(update={"days_active": days_active})
