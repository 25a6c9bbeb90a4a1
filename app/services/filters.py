from __future__ import annotations

from collections.abc import Sequence

from app.models.enums import CategoryKey, RadiusBucket
from app.schemas.filters import FilterSelection
from app.schemas.places import Place
from app.services.distance import parse_distance_label

RADIUS_CEILINGS_M: dict[RadiusBucket, float] = {
    RadiusBucket.m500: 500,
    RadiusBucket.km1: 1000,
    RadiusBucket.km5: 5000,
}

# Single source of truth for category labels; collections use it too.
CATEGORY_LABELS: dict[CategoryKey, str] = {
    CategoryKey.cafe: "Кафе",
    CategoryKey.restaurant: "Ресторан",
    CategoryKey.park: "Парк",
    CategoryKey.museum: "Музей",
    CategoryKey.theater: "Театр",
    CategoryKey.shopping: "Торговый центр",
    CategoryKey.bar: "Бар",
}

_KEYS_BY_LABEL: dict[str, CategoryKey] = {label: key for key, label in CATEGORY_LABELS.items()}


def category_key_for(label: str) -> CategoryKey | None:
    return _KEYS_BY_LABEL.get(label)


def category_label_for(key: CategoryKey) -> str:
    return CATEGORY_LABELS[key]


def _matches_radius(place: Place, radius: frozenset[RadiusBucket]) -> bool:
    # Buckets are a union of inclusive ceilings, not bands: {500m, 5km} admits everything <= 5 km
    meters = parse_distance_label(place.distance)
    return any(meters <= RADIUS_CEILINGS_M[bucket] for bucket in radius)


def matches(place: Place, selection: FilterSelection) -> bool:
    if selection.show_favorites_only and not place.is_favorite:
        return False

    query = selection.search_query.lower()
    if query and query not in place.name.lower():
        return False

    if selection.radius and not _matches_radius(place, selection.radius):
        return False

    if selection.categories:
        key = category_key_for(place.category)
        if key is None or key not in selection.categories:
            return False

    if selection.tags and place.price_level not in selection.tags:
        return False

    return True


def filter_places(catalog: Sequence[Place], selection: FilterSelection) -> list[Place]:
    return [p for p in catalog if matches(p, selection)]
