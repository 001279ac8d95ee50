"""Tests for backgammon.core.board_state."""

import numpy as np
import pytest

from backgammon.core.board import NUM_OF_ALL_STONES
from backgammon.core.board_state import Board, Point, Space
from backgammon.core.location import DenormalizedLocation, IndexLocation
from backgammon.core.player import Player
from backgammon.utils.bitmask import bits_from_indices


# ── setup ────────────────────────────────────────────────────────────

def test_empty_board():
    board = Board.empty()
    for i in range(24):
        assert board.point(i) == Point(IndexLocation(i).denormalize(), 0, Player.NONE)
    assert board.bar(Player.BLACK) == Point(DenormalizedLocation(25), 0, Player.BLACK)
    assert board.rail(Player.WHITE) == Point(DenormalizedLocation(25), 0, Player.WHITE)


def test_standard_layout():
    board = Board.standard()
    black = {23: 2, 12: 5, 7: 3, 5: 5}
    white = {0: 2, 11: 5, 16: 3, 18: 5}
    for i in range(24):
        point = board.point(i)
        if i in black:
            assert (point.count, point.player) == (black[i], Player.BLACK)
        elif i in white:
            assert (point.count, point.player) == (white[i], Player.WHITE)
        else:
            assert (point.count, point.player) == (0, Player.NONE)


def test_standard_totals():
    board = Board.standard()
    assert board.totals(Player.BLACK) == NUM_OF_ALL_STONES
    assert board.totals(Player.WHITE) == NUM_OF_ALL_STONES


def test_standard_is_mirrored():
    board = Board.standard()
    for i in range(24):
        point, mirror = board.point(i), board.point(23 - i)
        assert point.count == mirror.count
        assert point.player == mirror.player.opponent


# ── slots ────────────────────────────────────────────────────────────

def test_space_locations():
    assert Space.bar(Player.BLACK).location() == DenormalizedLocation(25)
    assert Space.bar(Player.WHITE).location() == DenormalizedLocation(0)
    assert Space.rail(Player.BLACK).location() == DenormalizedLocation(0)
    assert Space.rail(Player.WHITE).location() == DenormalizedLocation(25)
    assert Space.point(4).location() == DenormalizedLocation(5)


def test_set_and_get_point():
    board = Board.empty()
    board.set(Space.point(9), 3, Player.WHITE)
    assert board.get(Space.point(9)) == Point(DenormalizedLocation(10), 3, Player.WHITE)


def test_set_zero_clears_owner():
    board = Board.standard()
    board.set(Space.point(23), 0, Player.BLACK)
    assert board.point(23).player is Player.NONE


def test_set_rejects_negative_count():
    with pytest.raises(ValueError):
        Board.empty().set(Space.point(0), -1, Player.BLACK)


def test_set_rejects_unowned_stones():
    with pytest.raises(ValueError):
        Board.empty().set(Space.point(0), 2, Player.NONE)


def test_bar_and_rail_keep_their_owner():
    board = Board.empty()
    board.set(Space.bar(Player.WHITE), 2, Player.NONE)
    board.set(Space.rail(Player.BLACK), 0, Player.NONE)
    assert board.bar(Player.WHITE) == Point(DenormalizedLocation(0), 2, Player.WHITE)
    assert board.rail(Player.BLACK).player is Player.BLACK


# ── queries ──────────────────────────────────────────────────────────

def test_occupied_mask():
    board = Board.standard()
    assert board.occupied_mask(Player.BLACK) == bits_from_indices([5, 7, 12, 23])
    assert board.occupied_mask(Player.WHITE) == bits_from_indices([0, 11, 16, 18])


def test_pieces_behind_black(make_board):
    board = make_board(black={10: 1, 2: 1})
    assert board.pieces_behind(5, Player.BLACK) is True
    assert board.pieces_behind(10, Player.BLACK) is False  # strictly behind
    assert board.pieces_behind(1, Player.BLACK) is True


def test_pieces_behind_white(make_board):
    board = make_board(white={10: 1, 20: 1})
    assert board.pieces_behind(18, Player.WHITE) is True
    assert board.pieces_behind(10, Player.WHITE) is False
    assert board.pieces_behind(5, Player.WHITE) is False


def test_bar_stone_is_behind_everything(make_board):
    board = make_board(black={0: 1}, bar=(1, 0))
    assert board.pieces_behind(23, Player.BLACK) is True


def test_all_in_home(make_board):
    assert Board.standard().all_in_home(Player.BLACK) is False
    assert make_board(black={0: 3, 5: 2}).all_in_home(Player.BLACK) is True
    assert make_board(black={6: 1}).all_in_home(Player.BLACK) is False
    assert make_board(white={18: 3, 23: 1}).all_in_home(Player.WHITE) is True
    assert make_board(white={17: 1}).all_in_home(Player.WHITE) is False
    assert make_board(white={20: 1}, bar=(0, 1)).all_in_home(Player.WHITE) is False


def test_totals_include_bar_and_rail(make_board):
    board = make_board(black={3: 2}, bar=(1, 0), rail=(4, 0))
    assert board.totals(Player.BLACK) == 7
    assert board.totals(Player.WHITE) == 0


# ── equality / copy ──────────────────────────────────────────────────

def test_structural_equality():
    assert Board.standard() == Board.standard()
    assert Board.standard() != Board.empty()
    assert Board.standard().key() == Board.standard().key()


def test_bar_and_rail_take_part_in_equality(make_board):
    assert make_board(bar=(1, 0)) != make_board()
    assert make_board(rail=(0, 1)) != make_board()


def test_copy_is_independent():
    board = Board.standard()
    clone = board.copy()
    clone.set(Space.point(0), 0, Player.NONE)
    assert board.point(0).count == 2
    assert not np.shares_memory(board.counts, clone.counts)


def test_board_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Board.empty())
