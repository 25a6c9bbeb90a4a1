from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from app.models.enums import View
from app.schemas.places import Place
from app.services.places import dump_catalog, parse_places

logger = logging.getLogger(__name__)

Route = tuple[Place, ...]


def contains(route: Sequence[Place], place_id: str) -> bool:
    return any(p.id == place_id for p in route)


def add_to_route(route: Route, place: Place) -> Route:
    if contains(route, place.id):
        return route
    return (*route, place)


def remove_from_route(route: Route, place_id: str) -> Route:
    if not contains(route, place_id):
        return route
    return tuple(p for p in route if p.id != place_id)


def clear_route(route: Route) -> Route:
    return ()


def navigate_to(route: Route, place: Place) -> tuple[Route, View]:
    """Add the place if missing and tell the caller to switch to the map."""
    return add_to_route(route, place), View.map


def resolve_route(route: Sequence[Place], catalog: Sequence[Place]) -> Route:
    """Current catalog version of every stop, or the stored copy if it is gone."""
    by_id = {p.id: p for p in catalog}
    return tuple(by_id.get(p.id, p) for p in route)


def load_route(raw: str | None) -> Route:
    if raw is None:
        return ()
    try:
        places = parse_places(raw)
    except ValidationError as e:
        logger.warning("Stored route is malformed (%s errors); starting empty", e.error_count())
        return ()

    route: Route = ()
    for place in places:
        route = add_to_route(route, place)
    if len(route) != len(places):
        logger.warning("Stored route had %s duplicate stops; dropped", len(places) - len(route))
    return route


def dump_route(route: Sequence[Place]) -> str:
    return dump_catalog(route)
