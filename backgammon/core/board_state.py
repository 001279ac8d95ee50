# =========================================================
# --- core_board_state.py ---
# =========================================================

import numpy as np
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .board import BOARD_SIZE, BAR_FIELD, BEAR_OFF_ANCHOR, HOME_BOUNDARY, DEFAULT_POSITIONS
from .location import DenormalizedLocation, IndexLocation
from .player import Player

from ..utils.bitmask import bits_from_indices, remove_from_mask, set_all_bits

# =========================================================

class SpaceType(Enum):
    """
    Kinds of places a stone can be.

    Attributes:
        BAR: A player's bar, holding stones that were hit.
        RAIL: A player's rail, holding stones that were borne off.
        POINT: One of the 24 playable points.
    """
    BAR = 1
    RAIL = 2
    POINT = 3


@dataclass(frozen=True)
class Space:
    """
    Reference to a slot of the board.

    Attributes:
        kind (SpaceType): Bar, rail or point.
        player (Player): Owner of a bar or rail; NONE for points.
        index (Optional[IndexLocation]): Board index for points, None otherwise.
    """
    kind: SpaceType
    player: Player = Player.NONE
    index: Optional[IndexLocation] = None

    @classmethod
    def bar(cls, player: Player) -> "Space":
        return cls(SpaceType.BAR, player)

    @classmethod
    def rail(cls, player: Player) -> "Space":
        return cls(SpaceType.RAIL, player)

    @classmethod
    def point(cls, index: "IndexLocation | int") -> "Space":
        if not isinstance(index, IndexLocation):
            index = IndexLocation(index)
        return cls(SpaceType.POINT, Player.NONE, index)

    @property
    def is_bar(self) -> bool:
        return self.kind is SpaceType.BAR

    @property
    def is_rail(self) -> bool:
        return self.kind is SpaceType.RAIL

    @property
    def is_point(self) -> bool:
        return self.kind is SpaceType.POINT

    def location(self) -> DenormalizedLocation:
        """Absolute location of the space, used for directions and distances."""
        if self.kind is SpaceType.BAR:
            return DenormalizedLocation(BAR_FIELD[self.player])
        if self.kind is SpaceType.RAIL:
            return DenormalizedLocation(BEAR_OFF_ANCHOR[self.player])
        return self.index.denormalize()

    def __repr__(self) -> str:
        if self.kind is SpaceType.POINT:
            return f"Point({self.index})"
        return f"{self.kind.name.capitalize()}({self.player})"


@dataclass(frozen=True)
class Point:
    """
    Value snapshot of one board slot.

    Attributes:
        location (DenormalizedLocation): Absolute location of the slot.
        count (int): Number of stones.
        player (Player): Owner of the stones; NONE when an empty point.
    """
    location: DenormalizedLocation
    count: int
    player: Player


class Board:
    """
    The 24 points plus a bar and a rail for each player.

    Point counts and owners are held in numpy arrays indexed by
    `IndexLocation`; bar and rail counts in arrays indexed by `Player`.
    Bars and rails always belong to their player, even when empty.

    Attributes:
        counts (np.ndarray): Stones per point.
        owners (np.ndarray): Owner (Player value) per point.
        bar_stones (np.ndarray): Stones on each player's bar.
        rail_stones (np.ndarray): Stones borne off per player.
    """

    def __init__(self) -> None:
        self.counts: np.ndarray = np.zeros(BOARD_SIZE, dtype=np.int8)
        self.owners: np.ndarray = np.full(BOARD_SIZE, int(Player.NONE), dtype=np.int8)
        self.bar_stones: np.ndarray = np.zeros(2, dtype=np.int8)
        self.rail_stones: np.ndarray = np.zeros(2, dtype=np.int8)

    # ---------- Setup / Copy ----------
    @classmethod
    def empty(cls) -> "Board":
        """Return a board without any stones."""
        return cls()

    @classmethod
    def standard(cls) -> "Board":
        """Return a board in the standard starting position."""
        return cls.from_positions(DEFAULT_POSITIONS)

    @classmethod
    def from_positions(cls, positions: Iterable[Iterable[Tuple[int, int]]]) -> "Board":
        """
        Build a board from a list of (absolute location, count) pairs per player.

        Args:
            positions: One iterable per player, BLACK first.

        Returns:
            Board: The populated board.
        """
        board = cls()
        for player, player_positions in zip((Player.BLACK, Player.WHITE), positions):
            for location, count in player_positions:
                index = DenormalizedLocation(location).to_index()
                board.set(Space.point(index), count, player)
        return board

    def copy(self) -> "Board":
        """Return an independent copy of the board."""
        new_board = Board()
        new_board.counts[:] = self.counts
        new_board.owners[:] = self.owners
        new_board.bar_stones[:] = self.bar_stones
        new_board.rail_stones[:] = self.rail_stones
        return new_board

    # ---------- Accessors ----------
    def point(self, index: "IndexLocation | int") -> Point:
        """Return the point stored at a board index."""
        i = int(index)
        return Point(IndexLocation(i).denormalize(), int(self.counts[i]), Player(int(self.owners[i])))

    def bar(self, player: Player) -> Point:
        """Return the bar of a player."""
        return Point(DenormalizedLocation(BAR_FIELD[player]), int(self.bar_stones[player]), player)

    def rail(self, player: Player) -> Point:
        """Return the rail (borne off stones) of a player."""
        return Point(DenormalizedLocation(BEAR_OFF_ANCHOR[player]), int(self.rail_stones[player]), player)

    def get(self, space: Space) -> Point:
        """Return the slot referenced by a space."""
        if space.is_bar:
            return self.bar(space.player)
        if space.is_rail:
            return self.rail(space.player)
        return self.point(space.index)

    def set(self, space: Space, count: int, player: Player) -> None:
        """
        Overwrite the (count, owner) pair of a slot.

        Points with no stones are always owned by Player.NONE. The owner of a
        bar or rail is fixed, so `player` is ignored for those.

        Args:
            space: Slot to change.
            count: New number of stones.
            player: New owner of the stones.
        """
        if count < 0:
            raise ValueError(f"cannot place {count} stones on {space!r}")
        if space.is_bar:
            self.bar_stones[space.player] = count
        elif space.is_rail:
            self.rail_stones[space.player] = count
        else:
            i = int(space.index)
            if count > 0 and player is Player.NONE:
                raise ValueError(f"stones on {space!r} need an owner")
            self.counts[i] = count
            self.owners[i] = int(player) if count > 0 else int(Player.NONE)

    # ---------- Queries ----------
    def occupied_mask(self, player: Player) -> int:
        """Bitmask of board indices holding at least one stone of the player."""
        occ = np.flatnonzero((self.owners == int(player)) & (self.counts > 0))
        return bits_from_indices(occ)

    def pieces_behind(self, index: "IndexLocation | int", player: Player) -> bool:
        """
        Check whether the player has a stone farther from its rail than index.

        Stones on the bar are always behind every point.

        Args:
            index: Board index to compare against.
            player: Player whose stones are looked at.

        Returns:
            bool: True if any stone of the player is behind the index.
        """
        if self.bar_stones[player] > 0:
            return True

        i = int(index)
        if player is Player.BLACK:
            mask_ahead = set_all_bits(0, i)
        else:
            mask_ahead = set_all_bits(i, BOARD_SIZE - 1)

        return remove_from_mask(self.occupied_mask(player), mask_ahead) != 0

    def all_in_home(self, player: Player) -> bool:
        """Return True if every stone of the player not borne off is in its home board."""
        return not self.pieces_behind(HOME_BOUNDARY[player], player)

    def totals(self, player: Player) -> int:
        """Number of stones a player has on points, bar and rail together."""
        on_points = int(self.counts[self.owners == int(player)].sum())
        return on_points + int(self.bar_stones[player]) + int(self.rail_stones[player])

    # ---------- Equality / Hash ----------
    def key(self) -> bytes:
        """Hashable snapshot of the whole board."""
        return (
            self.counts.tobytes() + self.owners.tobytes() +
            self.bar_stones.tobytes() + self.rail_stones.tobytes()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            np.array_equal(self.counts, other.counts) and
            np.array_equal(self.owners, other.owners) and
            np.array_equal(self.bar_stones, other.bar_stones) and
            np.array_equal(self.rail_stones, other.rail_stones)
        )

    __hash__ = None

    def __repr__(self) -> str:
        stones = []
        for i in range(BOARD_SIZE):
            if self.counts[i] > 0:
                stones.append(f"{i}:{self.counts[i]}{Player(int(self.owners[i])).name[0]}")
        return (
            f"<Board {' '.join(stones)} "
            f"bar={self.bar_stones.tolist()} rail={self.rail_stones.tolist()}>"
        )
