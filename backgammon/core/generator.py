# =========================================================
# --- core_generator.py ---
# =========================================================

import logging
from typing import Dict, List, Optional, Tuple

from .board import BEAR_OFF_ANCHOR
from .board_state import Space
from .location import DenormalizedLocation
from .moves import Play, Turn
from .rules import BackgammonRules
from .state import BackgammonState

logger = logging.getLogger(__name__)

# =========================================================

class SinglePlaysGenerator:
    """Generates legal single plays for the current state."""

    def generate_plays(self, state: BackgammonState, rules: BackgammonRules) -> List[Play]:
        """
        Generate all legal single plays for the current player.

        Every allowed start space is combined with every distinct unused
        length; duplicates (e.g. two dice bearing off the same stone) are
        dropped.

        Args:
            state: Current game state.
            rules: Game rules engine.

        Returns:
            List of legal Play instances, start spaces in index order.
        """
        single_plays: Dict[Play, None] = {}

        for start in rules.allowed_start_spaces(state):
            for length in state.dice.distinct():
                play = self._single_play(start, length, rules, state)
                if play is not None:
                    single_plays[play] = None

        return list(single_plays)

    def _single_play(
        self, start: Space, length: int, rules: BackgammonRules, state: BackgammonState
    ) -> Optional[Play]:
        """
        Generate a single legal play from a given start space using a length.

        Args:
            start: Starting space of the play.
            length: Die length to use.
            rules: Game rules engine.
            state: Current game state.

        Returns:
            A Play if legal, otherwise None.
        """
        player = state.current_player
        target = int(start.location()) + length * player.direction

        # Reaching or passing the anchor means bearing off
        if (target - BEAR_OFF_ANCHOR[player]) * player.direction >= 0:
            to_space = Space.rail(player)
        else:
            to_space = Space.point(DenormalizedLocation(target).to_index())

        play = Play(player, start, to_space)
        if rules.is_legal(state, play):
            return play
        return None


class TurnPlaysGenerator:
    """Generates legal sequences of plays (Turn) for the current dice."""

    def __init__(self) -> None:
        self.single = SinglePlaysGenerator()

    def any_play_left(self, state: BackgammonState, rules: BackgammonRules) -> bool:
        """
        Check if any legal play is possible for the current player with remaining dice.

        Args:
            state: Current game state.
            rules: Game rules engine.

        Returns:
            True if at least one play is possible, False otherwise.
        """
        if not state.dice.any_available():
            return False
        return bool(self.single.generate_plays(state, rules))

    def generate_all_turns(self, state: BackgammonState, rules: BackgammonRules) -> List[Tuple[Turn, int]]:
        """
        Generate every sequence of plays that ends with no play left.

        The search applies and undoes plays on one private copy of the
        state; the given state is not touched.

        Args:
            state: Current game state.
            rules: Game rules engine.

        Returns:
            Pairs of (turn, pips consumed by the turn). A state without any
            play yields a single empty turn.
        """
        work = state.copy()

        def dfs() -> List[Tuple[Tuple[Play, ...], int]]:
            single_plays = self.single.generate_plays(work, rules)
            if not single_plays:
                return [((), 0)]

            paths: List[Tuple[Tuple[Play, ...], int]] = []
            for play in single_plays:
                record = work.make_play(play)
                for rest, pips in dfs():
                    paths.append(((play,) + rest, record.consumed + pips))
                work.undo_play(record)
            return paths

        turns = [(Turn(plays), pips) for plays, pips in dfs()]
        logger.debug("enumerated %d play sequences for %s (%s)", len(turns), state.current_player, state.dice)
        return turns

    def max_pips(self, state: BackgammonState, rules: BackgammonRules) -> int:
        """
        Return the most pips any turn can consume from the given state.

        Positions reached by different play orders are only searched once.

        Args:
            state: Current game state.
            rules: Game rules engine.

        Returns:
            Highest total of dice lengths a legal sequence of plays uses.
        """
        work = state.copy()
        best: Dict[tuple, int] = {}

        def dfs() -> int:
            key = work.key()
            if key in best:
                return best[key]

            most = 0
            for play in self.single.generate_plays(work, rules):
                record = work.make_play(play)
                most = max(most, record.consumed + dfs())
                work.undo_play(record)

            best[key] = most
            return most

        return dfs()

    def generate_legal_turns(self, state: BackgammonState, rules: BackgammonRules) -> List[Turn]:
        """
        Generate all legal turns after filtering according to rules.

        Args:
            state: Current game state.
            rules: Game rules engine.

        Returns:
            Turns using the maximum number of pips; all of them are legal.
        """
        all_turns = self.generate_all_turns(state, rules)
        legal = rules.filter_turns(all_turns)
        logger.debug("%d of %d sequences are maximal", len(legal), len(all_turns))
        return legal
