import pytest

from solo_bounce.entities import Ball
from solo_bounce.scenes.pong import Contact, RoundCoordinator, RoundState


@pytest.fixture()
def rounds(court, surface, rng):
    return RoundCoordinator(court, surface, rng)


def miss(ball, court):
    # just inside the right edge, below the paddle (rows 10..14)
    ball.x, ball.y = court.right - 1, 17


def test_starts_serving(rounds):
    assert rounds.state is RoundState.SERVING
    assert not rounds.game_over


def test_serve_puts_ball_in_play(rounds, surface):
    ball = Ball.create(3)
    rounds.serve(ball)

    assert rounds.state is RoundState.IN_PLAY
    assert ball.remaining == 2
    assert surface.cells[ball.position] == ball.symbol
    assert surface.lives == [2]


def test_after_move_without_contact(rounds, paddle):
    ball = Ball.create(3)
    rounds.serve(ball)
    ball.x, ball.y = 40, 12
    assert rounds.after_move(ball, paddle) is Contact.NO_CONTACT
    assert rounds.state is RoundState.IN_PLAY


def test_lose_with_balls_left_serves_again(rounds, surface, paddle, court):
    ball = Ball.create(3)
    rounds.serve(ball)
    miss(ball, court)

    assert rounds.after_move(ball, paddle) is Contact.LOSE
    assert ("erase", 17, court.right - 1) in surface.calls
    assert rounds.state is RoundState.IN_PLAY
    assert rounds.serves == 2
    assert ball.remaining == 1


def test_three_losses_end_the_game(rounds, surface, paddle, court):
    ball = Ball.create(3)
    rounds.serve(ball)

    results = []
    for _ in range(3):
        miss(ball, court)
        results.append(rounds.after_move(ball, paddle))

    assert results == [Contact.LOSE] * 3
    assert rounds.state is RoundState.GAME_OVER
    assert rounds.game_over
    assert rounds.serves == 3
    # lives only ever go down, once per serve
    assert surface.lives == [2, 1, 0]


def test_game_over_is_final(rounds, surface, paddle, court):
    ball = Ball.create(1)
    rounds.serve(ball)
    miss(ball, court)
    assert rounds.after_move(ball, paddle) is Contact.LOSE
    assert rounds.game_over

    miss(ball, court)
    assert rounds.after_move(ball, paddle) is Contact.NO_CONTACT
    rounds.serve(ball)
    assert rounds.serves == 1
    assert ball.remaining == 0
    assert surface.lives == [0]
