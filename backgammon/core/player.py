# =========================================================
# --- core_player.py ---
# =========================================================

from enum import IntEnum

# =========================================================

class Player(IntEnum):
    """
    Identity of a side in the game.

    BLACK is the first player and moves toward decreasing absolute locations,
    WHITE is the second player and moves toward increasing absolute locations.
    NONE is the sentinel used for empty points.

    The integer values double as indices into the per-player constants in
    `core.board`.
    """
    BLACK = 0
    WHITE = 1
    NONE = 2

    @property
    def opponent(self) -> "Player":
        """Return the other player. NONE is its own opponent."""
        if self is Player.NONE:
            return Player.NONE
        return Player(1 - self.value)

    def __invert__(self) -> "Player":
        return self.opponent

    @property
    def direction(self) -> int:
        """
        Step applied to an absolute location when this player moves forward.

        Raises:
            ValueError: For the NONE sentinel, which has no direction.
        """
        if self is Player.NONE:
            raise ValueError("there is no play direction for Player.NONE")
        return -1 if self is Player.BLACK else 1

    def __str__(self) -> str:
        return self.name.capitalize()
