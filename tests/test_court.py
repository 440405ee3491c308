import dataclasses

import pytest

from solo_bounce.entities import Court


def test_from_screen_uses_border():
    court = Court.from_screen(24, 80)
    assert (court.top, court.right, court.bottom, court.left) == (3, 76, 20, 3)


def test_from_screen_custom_border():
    court = Court.from_screen(30, 100, border=1)
    assert (court.top, court.right, court.bottom, court.left) == (1, 98, 28, 1)


def test_inner_height(court):
    assert court.inner_height == 16


def test_contains_includes_edges(court):
    assert court.contains(3, 3)
    assert court.contains(20, 76)
    assert court.contains(12, 40)
    assert not court.contains(2, 40)
    assert not court.contains(21, 40)
    assert not court.contains(12, 77)
    assert not court.contains(12, 2)


def test_court_is_immutable(court):
    with pytest.raises(dataclasses.FrozenInstanceError):
        court.top = 0
