import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest

from app.db.crud import ACTIVE_DAYS_KEY, COMMENTS_KEY, PLACES_KEY, ROUTE_KEY
from app.models.enums import NoticeKind, View
from app.schemas.collections import Collection
from app.services.places import load_catalog
from app.services.route import load_route
from app.services.session import TripSession

COLLECTIONS = (Collection(id="3", title="Романтика", place_ids=("1",)),)


@pytest.fixture()
def session(blobs, catalog):
    return TripSession(
        blobs=blobs,
        default_catalog=catalog,
        collections=COLLECTIONS,
        today=lambda: date(2026, 10, 19),
    )


def test_starts_from_seed_and_records_activity(session, blobs, catalog):
    assert session.catalog is catalog
    assert session.route == ()
    assert session.stats.days_active == 1
    assert blobs.read(ACTIVE_DAYS_KEY) == '["2026-10-19"]'


def test_mutations_are_persisted_and_reloaded(session, blobs, catalog):
    session.mark_visited("2")
    session.toggle_favorite("3")
    session.add_to_route("1")
    session.add_to_route("5")

    assert load_catalog(blobs.read(PLACES_KEY), ()) == session.catalog
    assert [p.id for p in load_route(blobs.read(ROUTE_KEY))] == ["1", "5"]

    reopened = TripSession(blobs=blobs, default_catalog=catalog, collections=COLLECTIONS)
    assert reopened.stats.visited_places == 1
    assert reopened.stats.favorite_places == 1
    assert [p.id for p in reopened.route] == ["1", "5"]


def test_malformed_storage_falls_back(blobs, catalog):
    blobs.write(PLACES_KEY, "{broken")
    blobs.write(ROUTE_KEY, "[{}]")
    session = TripSession(blobs=blobs, default_catalog=catalog)
    assert session.catalog is catalog
    assert session.route == ()


def test_notices_describe_actions(session):
    notice = session.toggle_favorite("1")
    assert notice.kind is NoticeKind.favorite_added
    assert notice.place_name == "Кофейня «Зерно»"
    assert session.toggle_favorite("1").kind is NoticeKind.favorite_removed

    assert session.mark_visited("1").kind is NoticeKind.visited
    assert session.mark_visited("1") is None

    assert session.add_to_route("2").kind is NoticeKind.route_added
    duplicate = session.add_to_route("2")
    assert duplicate.kind is NoticeKind.route_duplicate
    assert duplicate.changed is False
    assert session.remove_from_route("2").kind is NoticeKind.route_removed
    assert session.remove_from_route("2") is None

    assert session.toggle_favorite("missing") is None
    assert session.add_to_route("missing") is None


def test_navigate_to_switches_view(session):
    notice = session.navigate_to("4")
    assert notice.kind is NoticeKind.navigating
    assert notice.view is View.map
    assert session.view is View.map
    session.navigate_to("4")
    assert [p.id for p in session.route] == ["4"]


def test_clear_route(session):
    session.add_to_route("1")
    session.add_to_route("2")
    notice = session.clear_route()
    assert notice.count == 2
    assert session.route == ()


def test_route_reflects_current_place_state(session):
    session.add_to_route("1")
    session.toggle_favorite("1")
    assert session.route_places()[0].is_favorite is True


def test_comment_added_then_edited_counts_once(session, blobs):
    assert session.add_collection_comment("3", "Очень уютно").kind is NoticeKind.comment_saved
    assert session.add_collection_comment("3", "Очень уютно, вернусь").kind is NoticeKind.comment_saved
    assert session.stats.collection_comments == 1
    assert session.comments == {"3": "Очень уютно, вернусь"}
    assert "вернусь" in blobs.read(COMMENTS_KEY)


def test_incremental_stats_match_recompute(session):
    for place_id in ("1", "2", "2", "3", "missing"):
        session.mark_visited(place_id)
        session.toggle_favorite(place_id)
    session.toggle_favorite("3")
    incremental = session.stats
    assert session.recompute_stats() == incremental


def test_failed_write_keeps_memory_state(session, monkeypatch):
    def boom(key, value):
        raise RuntimeError("disk full")

    monkeypatch.setattr(session._blobs, "write", boom)
    assert session.mark_visited("1").kind is NoticeKind.visited
    assert session.stats.visited_places == 1


def test_achievements_follow_stats(session):
    for place_id in ("1", "2", "3", "4", "5"):
        session.mark_visited(place_id)
    unlocked = [a.id for a in session.achievements() if a.is_unlocked]
    # five visits across five distinct categories
    assert unlocked == ["1", "4"]


def test_route_actions_count_as_activity(blobs, catalog):
    days = iter([date(2026, 10, 19), date(2026, 10, 20), date(2026, 10, 21), date(2026, 10, 22)])
    session = TripSession(blobs=blobs, default_catalog=catalog, today=lambda: next(days))
    session.add_to_route("1")
    session.navigate_to("2")
    session.remove_from_route("1")
    assert session.stats.days_active == 4
    assert session.active_days[-1] - session.active_days[0] == timedelta(days=3)


def test_concurrent_toggles_keep_stats_consistent(blobs, make_place, monkeypatch):
    catalog = tuple(make_place(str(i)) for i in range(200))
    session = TripSession(blobs=blobs, default_catalog=catalog, today=lambda: date(2026, 10, 19))
    # keep the test about in-memory state, not sqlite throughput
    monkeypatch.setattr(session._blobs, "write", lambda key, value: None)
    interval = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(session.toggle_favorite, [p.id for p in catalog]))
    finally:
        sys.setswitchinterval(interval)

    favorites = sum(1 for p in session.catalog if p.is_favorite)
    assert favorites == 200
    assert session.stats.favorite_places == favorites
    assert session.recompute_stats().favorite_places == favorites
