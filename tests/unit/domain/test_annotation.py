"""Tests for AnnotationPolicy — result annotation and map markers."""

from cafe_finder.domain.entities.map_session import MapSession
from cafe_finder.domain.policies.annotation import (
    REMOVE_HINT,
    SAVE_HINT,
    USER_POPUP,
    annotate_cafes,
    build_map_markers,
    distance_suffix,
)
from cafe_finder.domain.value_objects.enums import MarkerKind
from tests.conftest import LONDON, PARIS, make_cafe


def _favorites(*ids):
    return lambda cafe_id: cafe_id in ids


def test_annotate_without_user_location_has_no_distance(paris_cafes):
    views = annotate_cafes(paris_cafes, None, _favorites())
    assert [v.distance_km for v in views] == [None, None, None]


def test_annotate_rounds_distance_to_two_decimals():
    london_cafe = make_cafe(9, "Monmouth", LONDON.latitude, LONDON.longitude)
    (view,) = annotate_cafes([london_cafe], PARIS, _favorites())
    assert view.distance_km == round(PARIS.distance_km(LONDON), 2)
    assert 343 < view.distance_km < 344


def test_annotate_preserves_order_and_flags_favorites(paris_cafes):
    views = annotate_cafes(paris_cafes, PARIS, _favorites(2))
    assert [v.cafe.id for v in views] == [1, 2, 3]
    assert [v.is_favorite for v in views] == [False, True, False]


def test_distance_suffix():
    assert distance_suffix(None) == ""
    assert distance_suffix(1.5) == " — 1.50 km from you"


def test_markers_without_location_or_results():
    assert build_map_markers(MapSession(), _favorites()) == []


def test_markers_user_first_then_results(paris_cafes):
    session = MapSession(cafes=paris_cafes)
    session.locate_user(PARIS)
    markers = build_map_markers(session, _favorites(3))

    assert markers[0].kind == MarkerKind.USER
    assert markers[0].popup == USER_POPUP
    assert [m.kind for m in markers[1:]] == [MarkerKind.SEARCH, MarkerKind.SEARCH, MarkerKind.FAVORITE]
    assert [m.cafe_id for m in markers[1:]] == [1, 2, 3]


def test_marker_popup_text(paris_cafes):
    session = MapSession(cafes=paris_cafes[:1])
    (marker,) = build_map_markers(session, _favorites())
    assert marker.popup == f"Café de Flore\n{SAVE_HINT}"

    session.locate_user(PARIS)
    _, marker = build_map_markers(session, _favorites(1))
    assert marker.popup.startswith("Café de Flore — ")
    assert marker.popup.endswith(f" km from you\n{REMOVE_HINT}")
