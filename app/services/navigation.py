from __future__ import annotations

from collections.abc import Sequence

from app.schemas.places import Place

Coordinate = tuple[float, float]


def route_coordinates(route: Sequence[Place], origin: Coordinate) -> list[Coordinate]:
    return [origin, *((p.latitude, p.longitude) for p in route)]


def map_center(route: Sequence[Place], origin: Coordinate) -> Coordinate:
    if route:
        return route[0].latitude, route[0].longitude
    return origin


def navigator_url(
    route: Sequence[Place],
    origin: Coordinate,
    *,
    base_url: str,
    transport: str = "mt",
) -> str | None:
    """Deep link for the external navigator: ``rtext=lat,lon~lat,lon&rtt=mode``."""
    if not route:
        return None
    points = "~".join(f"{lat},{lon}" for lat, lon in route_coordinates(route, origin))
    return f"{base_url}?rtext={points}&rtt={transport}"
