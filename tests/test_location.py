"""Tests for backgammon.core.location and backgammon.core.player."""

import pytest

from backgammon.core.errors import (
    BackgammonError,
    InvalidDenormalizedLocation,
    InvalidIndexLocation,
    InvalidNormalizedLocation,
    LocationError,
)
from backgammon.core.location import DenormalizedLocation, IndexLocation, NormalizedLocation
from backgammon.core.player import Player


# ── Player ───────────────────────────────────────────────────────────

def test_opponent_is_an_involution():
    assert Player.BLACK.opponent is Player.WHITE
    assert Player.WHITE.opponent is Player.BLACK
    assert ~~Player.BLACK is Player.BLACK


def test_none_is_its_own_opponent():
    assert Player.NONE.opponent is Player.NONE


def test_directions():
    assert Player.BLACK.direction == -1
    assert Player.WHITE.direction == 1
    with pytest.raises(ValueError):
        Player.NONE.direction


def test_player_str():
    assert str(Player.BLACK) == "Black"


# ── NormalizedLocation ───────────────────────────────────────────────

@pytest.mark.parametrize("value", [-1, 26, 120])
def test_normalized_out_of_range(value):
    with pytest.raises(InvalidNormalizedLocation) as exc:
        NormalizedLocation(value, Player.BLACK)
    assert exc.value.position == value


def test_normalized_rejects_none_player():
    with pytest.raises(InvalidNormalizedLocation):
        NormalizedLocation(3, Player.NONE)


def test_normalized_to_index():
    assert NormalizedLocation(1, Player.BLACK).to_index() == IndexLocation(0)
    assert NormalizedLocation(24, Player.BLACK).to_index() == IndexLocation(23)
    assert NormalizedLocation(1, Player.WHITE).to_index() == IndexLocation(23)
    assert NormalizedLocation(24, Player.WHITE).to_index() == IndexLocation(0)


@pytest.mark.parametrize("value", [0, 25])
@pytest.mark.parametrize("player", [Player.BLACK, Player.WHITE])
def test_rail_and_bar_have_no_index(value, player):
    with pytest.raises(InvalidIndexLocation):
        NormalizedLocation(value, player).to_index()


def test_normalized_denormalize():
    assert NormalizedLocation(25, Player.BLACK).denormalize() == DenormalizedLocation(25)
    assert NormalizedLocation(25, Player.WHITE).denormalize() == DenormalizedLocation(0)
    assert NormalizedLocation(6, Player.WHITE).denormalize() == DenormalizedLocation(19)


# ── DenormalizedLocation ─────────────────────────────────────────────

@pytest.mark.parametrize("value", [-1, 26])
def test_denormalized_out_of_range(value):
    with pytest.raises(InvalidDenormalizedLocation):
        DenormalizedLocation(value)


def test_denormalized_to_index():
    assert DenormalizedLocation(7).to_index() == IndexLocation(6)
    with pytest.raises(InvalidIndexLocation):
        DenormalizedLocation(0).to_index()
    with pytest.raises(InvalidIndexLocation):
        DenormalizedLocation(25).to_index()


def test_denormalized_normalize():
    assert DenormalizedLocation(7).normalize(Player.BLACK) == NormalizedLocation(7, Player.BLACK)
    assert DenormalizedLocation(7).normalize(Player.WHITE) == NormalizedLocation(18, Player.WHITE)


def test_abs_diff():
    assert DenormalizedLocation(25).abs_diff(DenormalizedLocation(19)) == 6
    assert DenormalizedLocation(3).abs_diff(DenormalizedLocation(8)) == 5


# ── IndexLocation ────────────────────────────────────────────────────

@pytest.mark.parametrize("value", [-1, 24])
def test_index_out_of_range(value):
    with pytest.raises(InvalidIndexLocation):
        IndexLocation(value)


def test_index_normalize_with_none_fails():
    with pytest.raises(InvalidNormalizedLocation):
        IndexLocation(4).normalize(Player.NONE)


def test_index_round_trip_for_every_point():
    for i in range(24):
        for player in (Player.BLACK, Player.WHITE):
            normalized = IndexLocation(i).normalize(player)
            assert 1 <= normalized.value <= 24
            assert normalized.to_index() == IndexLocation(i)
        assert IndexLocation(i).denormalize().to_index() == IndexLocation(i)


def test_normalize_denormalize_round_trip():
    for value in range(26):
        for player in (Player.BLACK, Player.WHITE):
            location = NormalizedLocation(value, player)
            assert location.denormalize().normalize(player) == location


def test_index_is_usable_as_sequence_index():
    assert list(range(10, 20))[IndexLocation(3)] == 13


# ── error taxonomy ───────────────────────────────────────────────────

def test_location_errors_carry_code_and_message():
    err = InvalidIndexLocation(25)
    assert isinstance(err, LocationError)
    assert isinstance(err, BackgammonError)
    assert err.code == "INVALID_INDEX_LOCATION"
    assert "25" in err.message
    assert str(err) == err.message
