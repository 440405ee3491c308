import random

import pytest

from solo_bounce.constants import MAX_DELAY
from solo_bounce.entities import Ball


def test_create_holds_all_lives():
    ball = Ball.create(3)
    assert ball.remaining == 3


@pytest.mark.parametrize("seed", range(50))
def test_reinitialize_stays_in_ranges(court, seed):
    ball = Ball.create(3)
    ball.reinitialize(court, random.Random(seed))

    # upper bounds are exclusive
    assert court.top + 1 <= ball.y < court.bottom - 1
    assert court.left + 1 <= ball.x < court.right - 1
    assert ball.y_dir in (-1, 1)
    assert ball.x_dir in (-1, 1)
    assert 1 <= ball.y_delay < MAX_DELAY
    assert 1 <= ball.x_delay < MAX_DELAY // 2
    assert ball.y_count == ball.y_delay
    assert ball.x_count == ball.x_delay
    assert ball.remaining == 2


def test_reinitialize_is_reproducible(court):
    first, second = Ball.create(3), Ball.create(3)
    first.reinitialize(court, random.Random(99))
    second.reinitialize(court, random.Random(99))
    assert first == second


def test_reinitialize_consumes_one_life_each_time(court, rng):
    ball = Ball.create(3)
    seen = []
    for _ in range(3):
        ball.reinitialize(court, rng)
        seen.append(ball.remaining)
    assert seen == [2, 1, 0]


def test_advance_axes_are_independent():
    ball = Ball(
        remaining=0,
        x=10,
        y=10,
        x_dir=1,
        y_dir=-1,
        x_delay=2,
        y_delay=3,
        x_count=2,
        y_count=3,
    )
    positions = []
    moved = []
    for _ in range(6):
        moved.append(ball.advance())
        positions.append(ball.position)

    assert moved == [False, True, True, True, False, True]
    assert positions == [
        (10, 10),
        (10, 11),  # x only
        (9, 11),  # y only
        (9, 12),
        (9, 12),
        (8, 13),  # both on the same tick
    ]
    assert (ball.y_count, ball.x_count) == (3, 2)


def test_advance_resets_counter_to_delay():
    ball = Ball(remaining=0, x=5, y=5, x_delay=4, y_delay=1, x_count=1, y_count=1)
    ball.advance()
    assert ball.x_count == 4
    assert ball.y_count == 1
    assert ball.position == (6, 6)


def test_zero_delay_freezes_axis():
    ball = Ball(remaining=0, x=5, y=5, x_delay=0, y_delay=0)
    assert not any(ball.advance() for _ in range(10))
    assert ball.position == (5, 5)
