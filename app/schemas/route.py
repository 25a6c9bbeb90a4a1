from __future__ import annotations

from pydantic import BaseModel, Field

from app.schemas.places import PlaceResponse


class RouteAddRequest(BaseModel):
    place_id: str = Field(min_length=1)


class RouteResponse(BaseModel):
    items: list[PlaceResponse]
    total: int
    # Origin first, then every route stop, as [lat, lon] pairs
    coordinates: list[tuple[float, float]]
    center: tuple[float, float]
    navigator_url: str | None
