from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from app.db.crud import ACTIVE_DAYS_KEY, COMMENTS_KEY, PLACES_KEY, ROUTE_KEY, BlobStore
from app.models.enums import NoticeKind, View
from app.schemas.achievements import Achievement
from app.schemas.collections import Collection
from app.schemas.filters import FilterSelection
from app.schemas.places import Place
from app.schemas.stats import UserStats
from app.services import activity, collections as collections_service, places as place_store, route as route_builder
from app.services.achievements import evaluate_achievements
from app.services.filters import filter_places
from app.services.places import Catalog
from app.services.route import Route
from app.services.stats import apply_comment, apply_place_change, compute_stats, with_days_active

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    """What happened, for the caller to phrase a toast."""

    kind: NoticeKind
    place_id: str | None = None
    place_name: str | None = None
    collection_id: str | None = None
    count: int | None = None
    # False when the action left the state as it was (e.g. place already in route)
    changed: bool = True
    view: View | None = None


class TripSession:
    """Owns the single mutable reference to the user's state.

    Every action runs the pure store/route functions, applies the incremental
    stats update for the affected place and writes the changed blob. Writes are
    fire-and-forget: a failed write is logged and the in-memory state wins.
    Actions are serialized with a lock: FastAPI runs sync handlers in a
    threadpool and they all share this one session.
    """

    def __init__(
        self,
        *,
        blobs: BlobStore,
        default_catalog: Catalog,
        collections: tuple[Collection, ...] = (),
        today: Callable[[], date] = date.today,
    ) -> None:
        self._blobs = blobs
        self._lock = threading.RLock()
        self._today = today
        self.collections = collections

        self.catalog: Catalog = place_store.load_catalog(store_read(self._blobs, PLACES_KEY), default_catalog)
        self.route: Route = route_builder.load_route(store_read(self._blobs, ROUTE_KEY))
        self.comments: dict[str, str] = collections_service.load_comments(store_read(self._blobs, COMMENTS_KEY))
        self.active_days: list[date] = activity.load_days(store_read(self._blobs, ACTIVE_DAYS_KEY))
        self.view: View = View.explore

        self.stats: UserStats = compute_stats(
            self.catalog,
            collection_comments=len(self.comments),
            days_active=activity.days_active(self.active_days),
        )
        self.touch()
        logger.info(
            "Session ready: %s places, %s in route, %s visited",
            len(self.catalog),
            len(self.route),
            self.stats.visited_places,
        )

    # Persistence

    def _persist(self, key: str, value: str) -> None:
        try:
            self._blobs.write(key, value)
        except Exception:
            logger.exception("Failed to persist %s", key)

    def _save_catalog(self) -> None:
        self._persist(PLACES_KEY, place_store.dump_catalog(self.catalog))

    def _save_route(self) -> None:
        self._persist(ROUTE_KEY, route_builder.dump_route(self.route))

    def touch(self) -> None:
        """Record today as an active day."""
        with self._lock:
            today = self._today()
            if today in self.active_days:
                return
            self.active_days = activity.record_activity(self.active_days, today)
            self.stats = with_days_active(self.stats, activity.days_active(self.active_days))
            self._persist(ACTIVE_DAYS_KEY, activity.dump_days(self.active_days))

    # Places

    def find_place(self, place_id: str) -> Place | None:
        return place_store.find_place(self.catalog, place_id)

    def _apply(self, place_id: str, mutate: Callable[[Catalog, str], Catalog]) -> Place | None:
        with self._lock:
            before = place_store.find_place(self.catalog, place_id)
            updated = mutate(self.catalog, place_id)
            if before is None or updated is self.catalog:
                return None
            after = place_store.find_place(updated, place_id)
            self.catalog = updated
            self.stats = apply_place_change(self.stats, before, after, updated)
            self._save_catalog()
            self.touch()
            return after

    def toggle_favorite(self, place_id: str) -> Notice | None:
        place = self._apply(place_id, place_store.toggle_favorite)
        if place is None:
            return None
        kind = NoticeKind.favorite_added if place.is_favorite else NoticeKind.favorite_removed
        return Notice(kind=kind, place_id=place.id, place_name=place.name)

    def mark_visited(self, place_id: str) -> Notice | None:
        place = self._apply(place_id, place_store.mark_visited)
        if place is None:
            return None
        return Notice(kind=NoticeKind.visited, place_id=place.id, place_name=place.name)

    def visible_places(self, selection: FilterSelection) -> list[Place]:
        return filter_places(self.catalog, selection)

    # Route

    def route_places(self) -> Route:
        return route_builder.resolve_route(self.route, self.catalog)

    def in_route(self, place_id: str) -> bool:
        return route_builder.contains(self.route, place_id)

    def add_to_route(self, place_id: str) -> Notice | None:
        with self._lock:
            place = self.find_place(place_id)
            if place is None:
                return None
            updated = route_builder.add_to_route(self.route, place)
            if updated is self.route:
                return Notice(
                    kind=NoticeKind.route_duplicate, place_id=place.id, place_name=place.name, changed=False
                )
            self.route = updated
            self._save_route()
            self.touch()
            return Notice(kind=NoticeKind.route_added, place_id=place.id, place_name=place.name)

    def navigate_to(self, place_id: str) -> Notice | None:
        with self._lock:
            place = self.find_place(place_id)
            if place is None:
                return None
            updated, self.view = route_builder.navigate_to(self.route, place)
            if updated is not self.route:
                self.route = updated
                self._save_route()
            self.touch()
            return Notice(kind=NoticeKind.navigating, place_id=place.id, place_name=place.name, view=self.view)

    def remove_from_route(self, place_id: str) -> Notice | None:
        with self._lock:
            updated = route_builder.remove_from_route(self.route, place_id)
            if updated is self.route:
                return None
            removed = next(p for p in self.route if p.id == place_id)
            self.route = updated
            self._save_route()
            self.touch()
            return Notice(kind=NoticeKind.route_removed, place_id=removed.id, place_name=removed.name)

    def clear_route(self) -> Notice:
        with self._lock:
            count = len(self.route)
            self.route = route_builder.clear_route(self.route)
            self._save_route()
            self.touch()
            return Notice(kind=NoticeKind.route_cleared, count=count)

    # Collections

    def add_collection_comment(self, collection_id: str, text: str) -> Notice | None:
        with self._lock:
            updated, is_new = collections_service.add_collection_comment(
                self.comments, self.collections, collection_id, text
            )
            if updated == self.comments:
                return None
            self.comments = updated
            self.stats = apply_comment(self.stats, is_new=is_new)
            self._persist(COMMENTS_KEY, collections_service.dump_comments(self.comments))
            self.touch()
            return Notice(kind=NoticeKind.comment_saved, collection_id=collection_id)

    # Achievements

    def achievements(self) -> list[Achievement]:
        return evaluate_achievements(self.stats)

    def recompute_stats(self) -> UserStats:
        """Rebuild stats from scratch, e.g. after a suspected drift."""
        with self._lock:
            self.stats = compute_stats(
                self.catalog,
                collection_comments=len(self.comments),
                days_active=activity.days_active(self.active_days),
            )
            return self.stats


def store_read(blobs: BlobStore, key: str) -> str | None:
    try:
        return blobs.read(key)
    except Exception:
        logger.exception("Failed to read %s; falling back to defaults", key)
        return None
