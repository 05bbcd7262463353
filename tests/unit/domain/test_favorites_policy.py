"""Tests for FavoritesPolicy."""

from cafe_finder.domain.policies.favorites import contains_cafe, dedupe_by_id, toggle_cafe
from tests.conftest import make_cafe


def test_toggle_appends_new_cafe():
    favorites = (make_cafe(1),)
    result = toggle_cafe(favorites, make_cafe(2))
    assert [c.id for c in result] == [1, 2]


def test_toggle_removes_by_id_not_full_value():
    """A re-fetched cafe with the same id but a new name still removes the saved one."""
    favorites = (make_cafe(1, "Old name"), make_cafe(2))
    result = toggle_cafe(favorites, make_cafe(1, "New name", 11.0, 21.0))
    assert [c.id for c in result] == [2]


def test_toggle_does_not_mutate_input():
    favorites = (make_cafe(1),)
    toggle_cafe(favorites, make_cafe(2))
    assert len(favorites) == 1


def test_toggle_twice_moves_item_to_end():
    favorites = (make_cafe(1), make_cafe(2), make_cafe(3))
    once = toggle_cafe(favorites, make_cafe(1))
    twice = toggle_cafe(once, make_cafe(1))
    assert set(c.id for c in twice) == {1, 2, 3}
    assert [c.id for c in twice] == [2, 3, 1]


def test_contains_cafe():
    favorites = (make_cafe(1), make_cafe("a"))
    assert contains_cafe(favorites, 1)
    assert contains_cafe(favorites, "a")
    assert not contains_cafe(favorites, 2)
    assert not contains_cafe((), 1)


def test_dedupe_keeps_first_occurrence():
    cafes = [make_cafe(1, "first"), make_cafe(2), make_cafe(1, "second")]
    result = dedupe_by_id(cafes)
    assert [c.id for c in result] == [1, 2]
    assert result[0].name == "first"
