from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import CategoryKey
from app.schemas.places import PlaceResponse


class Collection(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str = ""
    category: str = ""
    image: str | None = None
    place_ids: tuple[str, ...] = ()
    # Members by category go through the same label<->key table as the filters
    category_keys: tuple[CategoryKey, ...] = ()


class CollectionResponse(BaseModel):
    id: str
    title: str
    description: str
    category: str
    image: str | None
    places_count: int
    user_comment: str | None


class CollectionDetailResponse(CollectionResponse):
    places: list[PlaceResponse]


class CollectionListResponse(BaseModel):
    items: list[CollectionResponse]
    total: int
    unique_places: int


class CommentUpdate(BaseModel):
    text: str = Field(max_length=2000)
