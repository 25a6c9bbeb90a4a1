from __future__ import annotations

from fastapi import Query, Request

from app.models.enums import CategoryKey, PriceLevel, RadiusBucket
from app.schemas.filters import FilterSelection
from app.services.session import TripSession


def get_trip_session(request: Request) -> TripSession:
    return request.app.state.trip_session


def get_filter_selection(
    q: str = Query(default="", max_length=200),
    radius: list[RadiusBucket] = Query(default=[]),
    category: list[CategoryKey] = Query(default=[]),
    tag: list[PriceLevel] = Query(default=[]),
    favorites_only: bool = Query(default=False),
) -> FilterSelection:
    return FilterSelection(
        radius=frozenset(radius),
        categories=frozenset(category),
        tags=frozenset(tag),
        search_query=q,
        show_favorites_only=favorites_only,
    )
