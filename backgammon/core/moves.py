# =========================================================
# --- core_moves.py ---
# =========================================================

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .board_state import Space
from .player import Player

# =========================================================

@dataclass(frozen=True)
class Play:
    """
    Represents a single atomic play: one stone moved from one space to another.

    Attributes:
        player (Player): The player making the play.
        from_space (Space): Where the stone is taken from.
        to_space (Space): Where the stone is put.
    """
    player: Player
    from_space: Space
    to_space: Space

    @property
    def is_bear_off(self) -> bool:
        return self.to_space.is_rail

    def distance(self) -> int:
        """Number of pips between origin and destination."""
        return self.from_space.location().abs_diff(self.to_space.location())

    def _render_space(self, space: Space) -> str:
        if space.is_bar:
            return "bar"
        if space.is_rail:
            return "off"
        return str(space.index.normalize(self.player))

    def __str__(self) -> str:
        """
        Return the play in notation, from the player's perspective.

        Raises:
            ValueError: For plays from a rail or onto a bar, which are never legal.
        """
        if self.from_space.is_rail:
            raise ValueError("cannot play a piece after bearing it off")
        if self.to_space.is_bar:
            raise ValueError("cannot play onto the bar")
        return f"{self._render_space(self.from_space)}/{self._render_space(self.to_space)}"


@dataclass(frozen=True, init=False)
class Turn:
    """
    Represents a full turn consisting of zero or more plays.

    Attributes:
        plays (Tuple[Play, ...]): Ordered plays executed during the turn.
    """
    plays: Tuple[Play, ...] = ()

    def __init__(self, plays: Iterable[Play] = ()) -> None:
        object.__setattr__(self, "plays", tuple(plays))

    def __iter__(self) -> Iterator[Play]:
        """
        Return an iterator over the plays.

        Returns:
            Iterator[Play]: Iterator over all plays in the turn.
        """
        return iter(self.plays)

    def __len__(self) -> int:
        """
        Return the number of plays in the turn.

        Returns:
            int: Number of plays.
        """
        return len(self.plays)

    def __str__(self) -> str:
        """
        Return the turn in notation.

        Plays where one ends on the point the next starts from are written as
        a single chain, e.g. `13/8/5` instead of `13/8 8/5`.

        Returns:
            str: Whitespace separated play groups.
        """
        groups: List[str] = []
        for idx, play in enumerate(self.plays):
            text = str(play)
            previous = self.plays[idx - 1] if idx > 0 else None
            if previous is not None and previous.to_space.is_point and previous.to_space == play.from_space:
                groups[-1] += text[text.index("/"):]
            else:
                groups.append(text)
        return " ".join(groups)

    def __repr__(self) -> str:
        return f"Turn({str(self)!r})"
