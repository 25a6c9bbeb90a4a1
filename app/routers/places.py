from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.config import settings
from app.core.deps import get_filter_selection, get_trip_session
from app.core.messages import notice_message
from app.schemas.filters import FilterSelection
from app.schemas.places import ActionResponse, Place, PlaceListResponse, PlaceResponse
from app.services.distance import format_distance_label, haversine_distance, parse_distance_label
from app.services.session import Notice, TripSession

router = APIRouter(prefix="/places", tags=["places"])


def _to_place_response(place: Place, *, in_route: bool = False) -> PlaceResponse:
    return PlaceResponse(
        id=place.id,
        name=place.name,
        category=place.category,
        address=place.address,
        hours=place.hours,
        rating=place.rating,
        price_level=place.price_level,
        distance=place.distance,
        distance_meters=parse_distance_label(place.distance),
        straight_distance=format_distance_label(
            haversine_distance(settings.user_latitude, settings.user_longitude, place.latitude, place.longitude)
        ),
        latitude=place.latitude,
        longitude=place.longitude,
        image=place.image,
        user_comment=place.user_comment,
        is_visited=place.is_visited,
        is_favorite=place.is_favorite,
        is_in_route=in_route,
    )


def _to_action_response(notice: Notice | None) -> ActionResponse:
    if notice is None:
        return ActionResponse(changed=False)
    return ActionResponse(
        changed=notice.changed,
        kind=notice.kind,
        place_id=notice.place_id,
        place_name=notice.place_name,
        message=notice_message(notice),
        view=notice.view,
    )


@router.get("", response_model=PlaceListResponse)
def list_places(
    selection: FilterSelection = Depends(get_filter_selection),
    session: TripSession = Depends(get_trip_session),
) -> PlaceListResponse:
    items = session.visible_places(selection)
    return PlaceListResponse(
        items=[_to_place_response(p, in_route=session.in_route(p.id)) for p in items],
        total=len(items),
    )


@router.get("/{place_id}", response_model=PlaceResponse)
def get_place(place_id: str, session: TripSession = Depends(get_trip_session)) -> PlaceResponse:
    place = session.find_place(place_id)
    if not place:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Place not found")
    return _to_place_response(place, in_route=session.in_route(place_id))


@router.post("/{place_id}/favorite", response_model=ActionResponse)
def toggle_favorite(place_id: str, session: TripSession = Depends(get_trip_session)) -> ActionResponse:
    return _to_action_response(session.toggle_favorite(place_id))


@router.post("/{place_id}/visit", response_model=ActionResponse)
def mark_visited(place_id: str, session: TripSession = Depends(get_trip_session)) -> ActionResponse:
    return _to_action_response(session.mark_visited(place_id))
