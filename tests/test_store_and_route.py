from app.models.enums import View
from app.services.places import dump_catalog, find_place, load_catalog, mark_visited, toggle_favorite
from app.services.route import (
    add_to_route,
    clear_route,
    dump_route,
    load_route,
    navigate_to,
    remove_from_route,
    resolve_route,
)


def test_toggle_favorite_twice_restores_catalog(catalog):
    once = toggle_favorite(catalog, "2")
    assert find_place(once, "2").is_favorite is True
    assert toggle_favorite(once, "2") == catalog


def test_toggle_favorite_keeps_untouched_places(catalog):
    updated = toggle_favorite(catalog, "3")
    assert updated is not catalog
    assert updated[0] is catalog[0]
    assert updated[2] is not catalog[2]
    # the input snapshot is not modified
    assert catalog[2].is_favorite is False


def test_unknown_id_is_noop(catalog):
    assert toggle_favorite(catalog, "missing") is catalog
    assert mark_visited(catalog, "missing") is catalog


def test_mark_visited_is_monotonic(catalog):
    visited = mark_visited(catalog, "1")
    assert find_place(visited, "1").is_visited is True
    assert mark_visited(visited, "1") is visited

    # no other operation brings the flag back
    later = toggle_favorite(toggle_favorite(visited, "1"), "1")
    assert find_place(later, "1").is_visited is True


def test_load_catalog_falls_back_on_bad_blobs(catalog, make_place):
    assert load_catalog(None, catalog) is catalog
    assert load_catalog("{not json", catalog) is catalog
    assert load_catalog('[{"id": "1"}]', catalog) is catalog

    dup = dump_catalog([make_place("7"), make_place("7", name="Другое")])
    assert load_catalog(dup, catalog) is catalog


def test_catalog_blob_uses_camel_case(catalog):
    visited = mark_visited(catalog, "1")
    raw = dump_catalog(visited)
    assert '"isVisited": true' in raw
    assert '"priceLevel": "budget"' in raw
    assert load_catalog(raw, ()) == visited


def test_add_to_route_is_idempotent(catalog):
    route = add_to_route(add_to_route((), catalog[0]), catalog[1])
    once = add_to_route(route, catalog[2])
    twice = add_to_route(once, catalog[2])
    assert twice == once
    assert len(twice) == len(route) + 1
    assert [p.id for p in twice] == ["1", "2", "3"]


def test_remove_and_clear_route(catalog):
    route = tuple(catalog[:3])
    assert [p.id for p in remove_from_route(route, "2")] == ["1", "3"]
    assert remove_from_route(route, "missing") is route
    assert clear_route(route) == ()


def test_navigate_to_adds_once_and_switches_to_map(catalog):
    route, view = navigate_to((), catalog[3])
    assert view is View.map
    again, view = navigate_to(route, catalog[3])
    assert again is route
    assert view is View.map


def test_resolve_route_prefers_catalog_state(catalog):
    route = (catalog[0], catalog[1])
    updated = toggle_favorite(catalog, "1")
    resolved = resolve_route(route, updated[1:])  # "1" no longer in catalog
    assert resolved[0] is catalog[0]

    resolved = resolve_route(route, updated)
    assert resolved[0].is_favorite is True


def test_load_route_drops_duplicates_and_bad_blobs(catalog):
    raw = dump_route([catalog[0], catalog[1], catalog[0]])
    assert [p.id for p in load_route(raw)] == ["1", "2"]
    assert load_route(None) == ()
    assert load_route("garbage") == ()
