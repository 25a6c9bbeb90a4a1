from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import NoticeKind, PriceLevel, View


class Place(BaseModel):
    """Catalog entry.

    Instances are frozen: store operations return updated copies so readers
    never observe a half-applied change. Serialized with camelCase keys to
    keep the stored blob shape of the web client.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    category: str
    address: str = ""
    hours: str = ""
    rating: float = 0.0
    price_level: PriceLevel = PriceLevel.medium
    distance: str = ""
    image: str | None = None
    latitude: float
    longitude: float
    user_comment: str | None = None
    is_visited: bool = False
    is_favorite: bool = False


class PlaceResponse(BaseModel):
    id: str
    name: str
    category: str
    address: str
    hours: str
    rating: float
    price_level: PriceLevel
    distance: str
    distance_meters: float
    # Straight-line distance from the reference location, as a label
    straight_distance: str
    latitude: float
    longitude: float
    image: str | None
    user_comment: str | None
    is_visited: bool
    is_favorite: bool
    is_in_route: bool


class PlaceListResponse(BaseModel):
    items: list[PlaceResponse]
    total: int


class ActionResponse(BaseModel):
    changed: bool
    kind: NoticeKind | None = None
    place_id: str | None = None
    place_name: str | None = None
    message: str | None = None
    # Screen the caller should switch to, if the action asks for one
    view: View | None = None
