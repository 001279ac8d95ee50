# =========================================================
# --- core_state_invariants.py ---
# =========================================================

import numpy as np
from typing import Any

from .player import Player

# =========================================================

def assert_stone_invariant(state: Any, where: str = "") -> None:
    """
    Check that the total number of stones for each player is unchanged.

    Stones are only ever moved: a hit stone goes to the bar, a borne off
    stone to the rail, so points + bar + rail must always add up to the
    totals recorded when the state was created.

    Args:
        state: The BackgammonState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the total stones for a player changed.
    """
    board = state.board
    for p in (Player.BLACK, Player.WHITE):
        total = board.totals(p)
        if total != state.totals[p]:
            raise AssertionError(
                f"[STONE LOST] Player {p}: {total}/{state.totals[p]} at {where}\n"
                f"Bar={board.bar(p).count}, Rail={board.rail(p).count}"
            )


def assert_owner_invariant(state: Any, where: str = "") -> None:
    """
    Check that empty points have no owner and occupied points have one.

    Args:
        state: The BackgammonState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If a point's count and owner disagree.
    """
    board = state.board
    empty = board.counts == 0
    unowned = board.owners == int(Player.NONE)
    bad = np.flatnonzero(empty != unowned)
    if bad.size:
        raise AssertionError(
            f"[OWNER DESYNC] points {bad.tolist()} at {where}\n"
            f"Counts={board.counts[bad].tolist()}, Owners={board.owners[bad].tolist()}"
        )
    if (board.counts < 0).any():
        raise AssertionError(f"[NEGATIVE COUNT] at {where}")


def assert_state_invariant(state: Any, where: str = "") -> None:
    """
    Perform full invariant check for a Backgammon state.

    This includes:
    - Stone count conservation
    - Point owner consistency

    Args:
        state: The BackgammonState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If any invariant fails.
    """
    assert_stone_invariant(state, where)
    assert_owner_invariant(state, where)
