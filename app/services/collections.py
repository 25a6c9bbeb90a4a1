from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence

from pydantic import TypeAdapter, ValidationError

from app.schemas.collections import Collection
from app.schemas.places import Place
from app.services.filters import category_key_for

logger = logging.getLogger(__name__)

_collections_adapter = TypeAdapter(list[Collection])
_comments_adapter = TypeAdapter(dict[str, str])


def parse_collections(raw: str | bytes) -> list[Collection]:
    return _collections_adapter.validate_json(raw)


def find_collection(collections: Sequence[Collection], collection_id: str) -> Collection | None:
    for collection in collections:
        if collection.id == collection_id:
            return collection
    return None


def is_member(collection: Collection, place: Place) -> bool:
    if place.id in collection.place_ids:
        return True
    key = category_key_for(place.category)
    return key is not None and key in collection.category_keys


def collection_places(collection: Collection, catalog: Sequence[Place]) -> list[Place]:
    """Members of a collection in catalog order."""
    return [p for p in catalog if is_member(collection, p)]


def total_unique_places(collections: Sequence[Collection], catalog: Sequence[Place]) -> int:
    return sum(1 for p in catalog if any(is_member(c, p) for c in collections))


def add_collection_comment(
    comments: Mapping[str, str],
    collections: Sequence[Collection],
    collection_id: str,
    text: str,
) -> tuple[dict[str, str], bool]:
    """Store a comment for a collection.

    Returns the updated mapping and whether the collection got its first
    comment. Blank text and unknown collections leave the mapping as is.
    """
    text = text.strip()
    if not text or find_collection(collections, collection_id) is None:
        return dict(comments), False
    is_new = not comments.get(collection_id)
    updated = dict(comments)
    updated[collection_id] = text
    return updated, is_new


def load_comments(raw: str | None) -> dict[str, str]:
    if raw is None:
        return {}
    try:
        comments = _comments_adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning("Stored collection comments are malformed (%s errors); starting empty", e.error_count())
        return {}
    return {k: v for k, v in comments.items() if v.strip()}


def dump_comments(comments: Mapping[str, str]) -> str:
    return json.dumps(dict(comments), ensure_ascii=False, sort_keys=True)
