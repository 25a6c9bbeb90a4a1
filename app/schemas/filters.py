from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from app.models.enums import CategoryKey, PriceLevel, RadiusBucket


class FilterSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    radius: frozenset[RadiusBucket] = frozenset()
    categories: frozenset[CategoryKey] = frozenset()
    tags: frozenset[PriceLevel] = frozenset()
    search_query: str = ""
    show_favorites_only: bool = False

    @property
    def has_active_filters(self) -> bool:
        return bool(self.radius or self.categories or self.tags)

    def reset(self) -> FilterSelection:
        """Drop bucket/category/tag choices; search and favorites switch are independent."""
        return self.model_copy(update={"radius": frozenset(), "categories": frozenset(), "tags": frozenset()})
