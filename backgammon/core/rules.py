# =========================================================
# --- core_rules.py ---
# =========================================================

from typing import List, Optional, Sequence, Tuple

from .board import NUM_OF_ALL_STONES
from .board_state import Space
from .errors import (
    PlayError,
    PlayMadeOutOfTurn,
    PlayMadeWithBarFilled,
    PlayMadeFromRail,
    PlayMadeToBar,
    InvalidBearOff,
    PlayMadeFromEmptyPoint,
    PlayMadeWithOpposingPiece,
    InvalidPlayDirection,
    PlayMadeOntoOpposingPiece,
    InvalidPlayLength,
)
from .moves import Play, Turn
from .player import Player
from .state import BackgammonState

from ..utils.bitmask import indices_from_bits

# =========================================================

class Rule:
    """Base class for Backgammon rules."""

    def __init__(self, rule_id: str, description: str) -> None:
        """
        Initialize a rule.

        Args:
            rule_id: Unique identifier for the rule.
            description: Human-readable description.
        """
        self.id: str = rule_id
        self.description: str = description

    def check(self, state: BackgammonState, play: Play) -> None:
        """
        Validate a play against the given state.

        Args:
            state: Current game state.
            play: Play to validate.

        Raises:
            PlayError: If the play breaks the rule.
            NotImplementedError: Must be implemented in subclasses.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


# --- Play rules, in the order they are checked ---

class TurnOrderRule(Rule):
    """R1: Only the player whose turn it is may play."""

    def __init__(self) -> None:
        super().__init__("R1", "Only the current player may play.")

    def check(self, state: BackgammonState, play: Play) -> None:
        if play.player != state.current_player:
            raise PlayMadeOutOfTurn()


class BarPriorityRule(Rule):
    """R2: Player must re-enter stones from the bar first."""

    def __init__(self) -> None:
        super().__init__("R2", "Player must re-enter stones from the bar before moving any other stones.")

    def start_spaces(self, state: BackgammonState) -> List[Space]:
        """
        Return the spaces the current player may play from.

        Args:
            state: Current game state.

        Returns:
            The bar if it holds stones, otherwise every point holding the
            player's stones, in index order.
        """
        player = state.current_player
        if state.board.bar(player).count > 0:
            return [Space.bar(player)]
        return [Space.point(i) for i in indices_from_bits(state.board.occupied_mask(player))]

    def check(self, state: BackgammonState, play: Play) -> None:
        if state.board.bar(play.player).count > 0 and not play.from_space.is_bar:
            raise PlayMadeWithBarFilled()


class RailOriginRule(Rule):
    """R3: A borne off stone cannot be played again."""

    def __init__(self) -> None:
        super().__init__("R3", "Stones on the rail cannot be played.")

    def check(self, state: BackgammonState, play: Play) -> None:
        if play.from_space.is_rail:
            raise PlayMadeFromRail()


class BarTargetRule(Rule):
    """R4: Stones only reach the bar by being hit."""

    def __init__(self) -> None:
        super().__init__("R4", "Stones cannot be played onto the bar.")

    def check(self, state: BackgammonState, play: Play) -> None:
        if play.to_space.is_bar:
            raise PlayMadeToBar()


class BearingOffEligibilityRule(Rule):
    """R5: Player may bear off only if all stones are in their home board."""

    def __init__(self) -> None:
        super().__init__("R5", "Player may bear off only if all stones are in their home board.")

    def check(self, state: BackgammonState, play: Play) -> None:
        if play.to_space.is_rail and not state.board.all_in_home(play.player):
            raise InvalidBearOff()


class OriginRule(Rule):
    """R6: The origin must hold a stone of the player."""

    def __init__(self) -> None:
        super().__init__("R6", "The origin must hold at least one of the player's stones.")

    def check(self, state: BackgammonState, play: Play) -> None:
        origin = state.board.get(play.from_space)
        if origin.count == 0:
            raise PlayMadeFromEmptyPoint()
        if origin.player != play.player:
            raise PlayMadeWithOpposingPiece()


class DirectionRule(Rule):
    """R7: Stones only move toward the player's rail."""

    def __init__(self) -> None:
        super().__init__("R7", "Stones only move toward the player's own rail.")

    def check(self, state: BackgammonState, play: Play) -> None:
        step = int(play.to_space.location()) - int(play.from_space.location())
        if step * play.player.direction <= 0:
            raise InvalidPlayDirection()


class BlockedTargetRule(Rule):
    """R8: A point with two or more opposing stones cannot be landed on."""

    def __init__(self) -> None:
        super().__init__("R8", "Target point may hold at most one opponent stone, which is hit.")

    def check(self, state: BackgammonState, play: Play) -> None:
        target = state.board.get(play.to_space)
        if target.player == play.player.opponent and target.count > 1:
            raise PlayMadeOntoOpposingPiece()


class PlayLengthRule(Rule):
    """R9: The distance must be available on the dice, including 'overshoot' bear-off logic."""

    def __init__(self) -> None:
        super().__init__(
            "R9",
            "The play's length must be rolled; a larger die may bear off the last stone.",
        )

    def _overshoot_allowed(self, state: BackgammonState, play: Play, length: int) -> bool:
        """Check if a bear-off may use a die larger than its length."""
        if not play.is_bear_off or not play.from_space.is_point:
            return False
        if state.board.pieces_behind(play.from_space.index, play.player):
            return False
        return state.dice.max_available() > length

    def check(self, state: BackgammonState, play: Play) -> None:
        length = play.distance()
        if state.dice.contains(length):
            return
        if not self._overshoot_allowed(state, play, length):
            raise InvalidPlayLength(length)


# --- Turn rules ---

class FilterTurnsRule(Rule):
    """R10: Keep only turns that play the most pips."""

    def __init__(self) -> None:
        super().__init__("R10", "A turn must use the largest possible number of pips.")

    def check(self, candidates: Sequence[Tuple[Turn, int]]) -> List[Turn]:
        """
        Filter candidate turns according to game rules.

        Args:
            candidates: Pairs of (turn, pips consumed by the turn).

        Returns:
            Turns consuming the maximum number of pips, in candidate order.
        """
        if not candidates:
            return []
        most = max(pips for _, pips in candidates)
        return [turn for turn, pips in candidates if pips == most]


class GameOverRule(Rule):
    """R11: A player who has borne off every stone wins."""

    def __init__(self) -> None:
        super().__init__("R11", "The first player to bear off all stones wins.")

    def check(self, state: BackgammonState) -> Optional[Player]:
        for player in (Player.BLACK, Player.WHITE):
            if state.board.rail(player).count >= NUM_OF_ALL_STONES:
                return player
        return None


class BackgammonRules:
    """Aggregates all rules and provides a convenient interface for game logic."""

    def __init__(self) -> None:
        """Initialize all rule instances."""
        self.R1 = TurnOrderRule()
        self.R2 = BarPriorityRule()
        self.R3 = RailOriginRule()
        self.R4 = BarTargetRule()
        self.R5 = BearingOffEligibilityRule()
        self.R6 = OriginRule()
        self.R7 = DirectionRule()
        self.R8 = BlockedTargetRule()
        self.R9 = PlayLengthRule()
        self.R10 = FilterTurnsRule()
        self.R11 = GameOverRule()

        self.play_rules: List[Rule] = [
            self.R1, self.R2, self.R3, self.R4, self.R5,
            self.R6, self.R7, self.R8, self.R9,
        ]

    def check_play(self, state: BackgammonState, play: Play) -> None:
        """
        Run every play rule in order; the first failing rule raises.

        Raises:
            PlayError: The error of the first rule the play breaks.
        """
        for rule in self.play_rules:
            rule.check(state, play)

    def is_legal(self, state: BackgammonState, play: Play) -> bool:
        """Return True if the play passes every play rule."""
        try:
            self.check_play(state, play)
        except PlayError:
            return False
        return True

    def allowed_start_spaces(self, state: BackgammonState) -> List[Space]:
        """Return spaces the current player may play from (Bar priority)."""
        return self.R2.start_spaces(state)

    def filter_turns(self, candidates: Sequence[Tuple[Turn, int]]) -> List[Turn]:
        """Filter generated turns according to rules."""
        return self.R10.check(candidates)

    def winner(self, state: BackgammonState) -> Optional[Player]:
        """Return the winner if the game is over."""
        return self.R11.check(state)
