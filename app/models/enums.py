from __future__ import annotations

from enum import Enum


class PriceLevel(str, Enum):
    budget = "budget"
    medium = "medium"
    premium = "premium"


class RadiusBucket(str, Enum):
    m500 = "500m"
    km1 = "1km"
    km5 = "5km"


class CategoryKey(str, Enum):
    cafe = "cafe"
    restaurant = "restaurant"
    park = "park"
    museum = "museum"
    theater = "theater"
    shopping = "shopping"
    bar = "bar"


class View(str, Enum):
    explore = "explore"
    collections = "collections"
    map = "map"
    achievements = "achievements"


class NoticeKind(str, Enum):
    favorite_added = "favorite_added"
    favorite_removed = "favorite_removed"
    visited = "visited"
    route_added = "route_added"
    route_duplicate = "route_duplicate"
    route_removed = "route_removed"
    route_cleared = "route_cleared"
    navigating = "navigating"
    comment_saved = "comment_saved"
