# =========================================================
# --- core_location.py ---
# =========================================================

"""
The three coordinate systems used for the 24 points of the board.

- `DenormalizedLocation`: 0..25, absolute. 0 is BLACK's rail and WHITE's bar,
  1 is BLACK's ace, 24 is WHITE's ace, 25 is BLACK's bar and WHITE's rail.
- `NormalizedLocation`: 0..25 from one player's perspective. 1 is always that
  player's ace, 0 its rail and 25 its bar. Notation is written in it.
- `IndexLocation`: 0..23, the slot used to store a point on the board.

The board is stored in one orientation while plays and notation are always
expressed from the mover's point of view, hence the conversions below.
"""

from dataclasses import dataclass

from .board import BOARD_SIZE, FIRST_LOCATION, LAST_LOCATION
from .errors import InvalidNormalizedLocation, InvalidDenormalizedLocation, InvalidIndexLocation
from .player import Player

# =========================================================

@dataclass(frozen=True)
class NormalizedLocation:
    """
    A location relative to a player's perspective.

    Attributes:
        value (int): Location in 0..25.
        player (Player): Perspective; must not be Player.NONE.

    Raises:
        InvalidNormalizedLocation: If the value is out of range or the
            perspective is the NONE sentinel.
    """
    value: int
    player: Player

    def __post_init__(self) -> None:
        if self.player is Player.NONE or not FIRST_LOCATION <= self.value <= LAST_LOCATION:
            raise InvalidNormalizedLocation(self.value, self.player)

    def denormalize(self) -> "DenormalizedLocation":
        """Convert to the absolute location."""
        if self.player is Player.BLACK:
            return DenormalizedLocation(self.value)
        return DenormalizedLocation(LAST_LOCATION - self.value)

    def to_index(self) -> "IndexLocation":
        """
        Convert to the board index of the point.

        Raises:
            InvalidIndexLocation: For 0 and 25, which are the rail and the bar.
        """
        if self.value in (FIRST_LOCATION, LAST_LOCATION):
            raise InvalidIndexLocation(self.value)

        if self.player is Player.BLACK:
            return IndexLocation(self.value - 1)
        return IndexLocation(BOARD_SIZE - self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class DenormalizedLocation:
    """
    An absolute location, the same for both players.

    Raises:
        InvalidDenormalizedLocation: If the value is outside 0..25.
    """
    value: int

    def __post_init__(self) -> None:
        if not FIRST_LOCATION <= self.value <= LAST_LOCATION:
            raise InvalidDenormalizedLocation(self.value)

    def normalize(self, perspective: Player) -> NormalizedLocation:
        """Convert to the given player's perspective."""
        if perspective is Player.WHITE:
            return NormalizedLocation(LAST_LOCATION - self.value, perspective)
        return NormalizedLocation(self.value, perspective)

    def to_index(self) -> "IndexLocation":
        """
        Convert to the board index of the point.

        Raises:
            InvalidIndexLocation: For 0 and 25, which are bar/rail anchors.
        """
        if self.value in (FIRST_LOCATION, LAST_LOCATION):
            raise InvalidIndexLocation(self.value)
        return IndexLocation(self.value - 1)

    def abs_diff(self, other: "DenormalizedLocation") -> int:
        """Number of pips between two locations."""
        return abs(self.value - other.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class IndexLocation:
    """
    Slot of a point in the board arrays. 0 is BLACK's ace, 23 is WHITE's ace.

    Raises:
        InvalidIndexLocation: If the value is outside 0..23.
    """
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < BOARD_SIZE:
            raise InvalidIndexLocation(self.value)

    def normalize(self, perspective: Player) -> NormalizedLocation:
        """Convert to the given player's perspective; always in 1..24."""
        if perspective is Player.WHITE:
            return NormalizedLocation(BOARD_SIZE - self.value, perspective)
        return NormalizedLocation(self.value + 1, perspective)

    def denormalize(self) -> DenormalizedLocation:
        """Convert to the absolute location; always in 1..24."""
        return DenormalizedLocation(self.value + 1)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
