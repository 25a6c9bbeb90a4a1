from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.deps import get_trip_session
from app.routers.places import _to_action_response, _to_place_response
from app.schemas.places import ActionResponse
from app.schemas.route import RouteAddRequest, RouteResponse
from app.services.navigation import map_center, navigator_url, route_coordinates
from app.services.session import TripSession

router = APIRouter(prefix="/route", tags=["route"])


def _origin() -> tuple[float, float]:
    return settings.user_latitude, settings.user_longitude


@router.get("", response_model=RouteResponse)
def get_route(session: TripSession = Depends(get_trip_session)) -> RouteResponse:
    route = session.route_places()
    origin = _origin()
    return RouteResponse(
        items=[_to_place_response(p, in_route=True) for p in route],
        total=len(route),
        coordinates=route_coordinates(route, origin),
        center=map_center(route, origin),
        navigator_url=navigator_url(
            route,
            origin,
            base_url=settings.navigator_url,
            transport=settings.navigator_transport,
        ),
    )


@router.post("", response_model=ActionResponse)
def add_to_route(payload: RouteAddRequest, session: TripSession = Depends(get_trip_session)) -> ActionResponse:
    return _to_action_response(session.add_to_route(payload.place_id))


@router.post("/navigate", response_model=ActionResponse)
def navigate_to(payload: RouteAddRequest, session: TripSession = Depends(get_trip_session)) -> ActionResponse:
    return _to_action_response(session.navigate_to(payload.place_id))


@router.delete("/{place_id}", response_model=ActionResponse)
def remove_from_route(place_id: str, session: TripSession = Depends(get_trip_session)) -> ActionResponse:
    return _to_action_response(session.remove_from_route(place_id))


@router.delete("", response_model=ActionResponse)
def clear_route(session: TripSession = Depends(get_trip_session)) -> ActionResponse:
    return _to_action_response(session.clear_route())
