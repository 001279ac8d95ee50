"""Shared fixtures: boards and engines built from {index: count} layouts."""

import random

import pytest

from backgammon.core.board_state import Board, Space
from backgammon.core.dice import DiceRoll
from backgammon.core.engine import GameEngine
from backgammon.core.player import Player
from backgammon.core.state import BackgammonState


@pytest.fixture
def make_board():
    """Factory: make_board(black={index: count}, white={...}, bar=(b, w), rail=(b, w))."""

    def _make(black=None, white=None, bar=(0, 0), rail=(0, 0)) -> Board:
        board = Board.empty()
        for player, stones in ((Player.BLACK, black or {}), (Player.WHITE, white or {})):
            for index, count in stones.items():
                board.set(Space.point(index), count, player)
            board.set(Space.bar(player), bar[player], player)
            board.set(Space.rail(player), rail[player], player)
        return board

    return _make


@pytest.fixture
def make_state(make_board):
    """Factory: make_state((a, b), player=Player.BLACK, **layout) with debug checks on."""

    def _make(dice, player=Player.BLACK, **layout) -> BackgammonState:
        board = make_board(**layout)
        return BackgammonState(board, DiceRoll.from_values(*dice), player, debug=True)

    return _make


@pytest.fixture
def make_engine(make_state):
    """Factory: same arguments as make_state, wrapped in a seeded GameEngine."""

    def _make(dice, player=Player.BLACK, **layout) -> GameEngine:
        return GameEngine(make_state(dice, player, **layout), rng=random.Random(0))

    return _make


@pytest.fixture
def opening_engine():
    """Standard position, BLACK to play 3-1."""
    state = BackgammonState(Board.standard(), DiceRoll.from_values(3, 1), Player.BLACK, debug=True)
    return GameEngine(state, rng=random.Random(0))
