from __future__ import annotations

import logging
from pathlib import Path

from app.schemas.collections import Collection
from app.services.collections import parse_collections
from app.services.places import Catalog, has_unique_ids, parse_places

logger = logging.getLogger(__name__)

PLACES_FILE = "places.json"
COLLECTIONS_FILE = "collections.json"


def load_seed_catalog(seed_dir: str | Path) -> Catalog:
    path = Path(seed_dir) / PLACES_FILE
    places = parse_places(path.read_bytes())
    if not has_unique_ids(places):
        raise ValueError(f"Seed catalog {path} has duplicate place ids")
    logger.info("Seed catalog loaded: %s places", len(places))
    return tuple(places)


def load_seed_collections(seed_dir: str | Path) -> tuple[Collection, ...]:
    path = Path(seed_dir) / COLLECTIONS_FILE
    return tuple(parse_collections(path.read_bytes()))
