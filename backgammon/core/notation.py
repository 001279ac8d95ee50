# =========================================================
# --- core_notation.py ---
# =========================================================

import re
from typing import List

from .board_state import Space
from .errors import InvalidNotation
from .location import NormalizedLocation
from .moves import Play, Turn
from .player import Player

# =========================================================

#: One play group: a start (point or bar), any number of intermediate points,
#: and an end (point or off), separated by slashes. e.g. `bar/20/14`, `6/off`
GROUP_REGEX = re.compile(r"^(?:\d+|bar)(?:/\d+)*/(?:\d+|off)$")


class NotationParser:
    """
    Translates move notation into plays for one player.

    A turn is written as whitespace separated groups; a group of N tokens is
    a chain of N-1 plays. Numbers are points from the player's own
    perspective (1 = the player's ace), `bar` is the player's bar and `off`
    the player's rail.
    """

    def __init__(self, player: Player) -> None:
        """
        Args:
            player: The player the notation is written for.
        """
        self.player = player

    def notation_to_space(self, token: str) -> Space:
        """
        Convert one notation token to a board space.

        Args:
            token: `bar`, `off`, or a point number.

        Returns:
            Space: The referenced space.

        Raises:
            InvalidNormalizedLocation: If the number is outside 0..25.
            InvalidIndexLocation: For 0 and 25, which are not points.
        """
        if token == "bar":
            return Space.bar(self.player)
        if token == "off":
            return Space.rail(self.player)
        return Space.point(NormalizedLocation(int(token), self.player).to_index())

    def parse_group(self, group: str) -> List[Play]:
        """
        Convert one play group into its chain of plays.

        Raises:
            InvalidNotation: If the group does not match the grammar.
        """
        if not GROUP_REGEX.match(group):
            raise InvalidNotation(group)

        spaces = [self.notation_to_space(token) for token in group.split("/")]
        return [Play(self.player, start, target) for start, target in zip(spaces, spaces[1:])]

    def parse(self, notation: str) -> Turn:
        """
        Convert a whole turn's notation into a Turn.

        Parsing is all or nothing: the first invalid group fails the turn.

        Args:
            notation: e.g. `"13/8 6/5"`, `"bar/20/14"`, `""` for no plays.

        Returns:
            Turn: The plays in the order they were written.
        """
        plays: List[Play] = []
        for group in notation.split():
            plays.extend(self.parse_group(group))
        return Turn(plays)


def parse_turn(notation: str, player: Player) -> Turn:
    """Parse a turn's notation for the given player."""
    return NotationParser(player).parse(notation)
