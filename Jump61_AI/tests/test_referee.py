"""Tests for move notation, per-move timeouts, and referee enforcement."""

import time

import pytest

from Jump61_AI.Board import Board
from Jump61_AI.Square import Side
from Jump61_AI.engine import referee
from Jump61_AI.engine.errors import IllegalMoveError, OutOfBoundsError


def test_parse_inverts_move_string():
    b = Board(6)
    for n in range(36):
        assert referee.parse_move(b.move_string(n), b) == n


def test_parse_accepts_extra_whitespace():
    b = Board(4)
    assert referee.parse_move("  2   3 ", b) == b.sq_num(2, 3)


@pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "1 x"])
def test_parse_rejects_bad_shape(text):
    with pytest.raises(IllegalMoveError):
        referee.parse_move(text, Board(4))


@pytest.mark.parametrize("text", ["0 1", "1 0", "5 1", "1 5", "-1 2"])
def test_parse_rejects_squares_off_the_board(text):
    with pytest.raises(OutOfBoundsError):
        referee.parse_move(text, Board(4))


def test_timeout_rejected():
    b = Board(6)
    deadline = time.time() - 0.1
    with pytest.raises(TimeoutError):
        referee.check_move("1 1", b, Side.RED, deadline, move_index=0)


def test_valid_move_passes():
    b = Board(6)
    deadline = time.time() + 1
    assert referee.check_move("2 3", b, Side.RED, deadline, move_index=0) == b.sq_num(2, 3)
    assert referee.check_move("2 3", b, Side.RED) == b.sq_num(2, 3)


def test_opponent_square_rejected():
    b = Board(6)
    b.add_spot(Side.RED, 1, 1)
    with pytest.raises(IllegalMoveError):
        referee.check_move("1 1", b, Side.BLUE, move_index=1)
    assert referee.check_move("1 1", b, Side.RED) == 0


def test_no_moves_after_game_is_won():
    b = Board.from_dump("===\n    1r 1r \n    1r 1r \n===\n")
    with pytest.raises(IllegalMoveError):
        referee.check_move("1 1", b, Side.RED)
