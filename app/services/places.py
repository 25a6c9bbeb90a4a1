from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from app.schemas.places import Place

logger = logging.getLogger(__name__)

Catalog = tuple[Place, ...]

_catalog_adapter = TypeAdapter(list[Place])


def find_place(catalog: Sequence[Place], place_id: str) -> Place | None:
    for place in catalog:
        if place.id == place_id:
            return place
    return None


def _replace(catalog: Catalog, updated: Place) -> Catalog:
    return tuple(updated if p.id == updated.id else p for p in catalog)


def toggle_favorite(catalog: Catalog, place_id: str) -> Catalog:
    place = find_place(catalog, place_id)
    if place is None:
        return catalog
    return _replace(catalog, place.model_copy(update={"is_favorite": not place.is_favorite}))


def mark_visited(catalog: Catalog, place_id: str) -> Catalog:
    # Visited only ever goes false -> true; repeated marks must not be counted twice
    place = find_place(catalog, place_id)
    if place is None or place.is_visited:
        return catalog
    return _replace(catalog, place.model_copy(update={"is_visited": True}))


def has_unique_ids(places: Sequence[Place]) -> bool:
    return len({p.id for p in places}) == len(places)


def parse_places(raw: str | bytes) -> list[Place]:
    """Decode a JSON array of places; raises ``ValidationError`` on bad input."""
    return _catalog_adapter.validate_json(raw)


def load_catalog(raw: str | None, default: Catalog) -> Catalog:
    if raw is None:
        return default
    try:
        places = parse_places(raw)
    except ValidationError as e:
        logger.warning("Stored catalog is malformed (%s errors); using default seed", e.error_count())
        return default
    if not has_unique_ids(places):
        logger.warning("Stored catalog has duplicate place ids; using default seed")
        return default
    return tuple(places)


def dump_catalog(catalog: Sequence[Place]) -> str:
    return json.dumps(
        [p.model_dump(mode="json", by_alias=True) for p in catalog],
        ensure_ascii=False,
    )
