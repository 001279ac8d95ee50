# =========================================================
# --- core_engine.py ---
# =========================================================

import logging
import random
from typing import List, Optional

from .board_state import Board
from .dice import DiceRoll
from .errors import IncompleteTurn, NonMaximalTurn
from .generator import TurnPlaysGenerator
from .moves import Play, Turn
from .notation import parse_turn
from .player import Player
from .rules import BackgammonRules
from .state import BackgammonState, PlayRecord

logger = logging.getLogger(__name__)

# ========================================================

class GameEngine:
    """
    Backgammon engine owning one game: state, rules and the dice source.

    Validation never touches the engine's state; a turn is first checked on a
    copy and only applied once every play and the whole-turn rules pass.

    Attributes:
        state (BackgammonState): Current board, dice and player to move.
        rules (BackgammonRules): Rules engine.
        rng (random.Random): Random number generator for dice rolls.
        generator (TurnPlaysGenerator): Play and turn enumeration.
    """

    def __init__(
        self,
        state: Optional[BackgammonState] = None,
        rules: Optional[BackgammonRules] = None,
        rng: Optional[random.Random] = None,
        debug: bool = False,
    ):
        self.rng: random.Random = rng or random.Random()
        self.state: BackgammonState = (
            state if state is not None
            else BackgammonState(Board.standard(), DiceRoll.opening(self.rng), Player.BLACK, debug)
        )
        self.rules: BackgammonRules = rules or BackgammonRules()
        self.generator: TurnPlaysGenerator = TurnPlaysGenerator()

    @classmethod
    def new_game(cls, rng: Optional[random.Random] = None, debug: bool = False) -> "GameEngine":
        """
        Start a game from the standard position.

        Each player rolls one die, doubles are re-rolled; the player with the
        higher die starts and plays the opening roll.

        Args:
            rng: Random source for every roll of the game.
            debug: Enable state invariant assertions.

        Returns:
            GameEngine: Engine ready for the first turn.
        """
        rng = rng or random.Random()
        dice = DiceRoll.opening(rng)
        black_die, white_die = dice.values
        starter = Player.BLACK if black_die > white_die else Player.WHITE
        logger.debug("opening roll %s, %s starts", dice, starter)
        return cls(BackgammonState(Board.standard(), dice, starter, debug), rng=rng)

    # ---------- Properties ----------
    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def dice(self) -> DiceRoll:
        return self.state.dice

    @property
    def board(self) -> Board:
        return self.state.board

    # ---------- Single plays ----------
    def check_play(self, play: Play) -> None:
        """
        Validate a single play against the current state.

        Raises:
            PlayError: The first rule the play breaks.
        """
        self.rules.check_play(self.state, play)

    def make_play(self, play: Play) -> PlayRecord:
        """Apply a play without validating it."""
        return self.state.make_play(play)

    def play(self, play: Play) -> PlayRecord:
        """
        Validate, then apply a single play.

        Raises:
            PlayError: If the play is not legal; the state is unchanged.
        """
        self.check_play(play)
        return self.make_play(play)

    def available_plays(self) -> List[Play]:
        """Return every legal single play with the remaining dice."""
        return self.generator.single.generate_plays(self.state, self.rules)

    def available_turns(self) -> List[Turn]:
        """Return every legal turn for the remaining dice."""
        return self.generator.generate_legal_turns(self.state, self.rules)

    # ---------- Turns ----------
    def check_turn(self, turn: Turn) -> None:
        """
        Validate a whole turn without changing the game.

        Every play is checked on the state left by the plays before it. The
        finished turn must leave no play available and must use as many pips
        as any other turn could.

        Args:
            turn: Plays in the order they are made.

        Raises:
            PlayError: The first play that breaks a rule.
            IncompleteTurn: If a play is still possible after the turn.
            NonMaximalTurn: If another turn would use more pips.
        """
        work = self.state.copy()
        played = 0
        for play in turn:
            self.rules.check_play(work, play)
            played += work.make_play(play).consumed

        if self.generator.any_play_left(work, self.rules):
            logger.debug("rejected %r: plays left with %s", turn, work.dice.available)
            raise IncompleteTurn()

        maximum = self.generator.max_pips(self.state, self.rules)
        if played < maximum:
            logger.debug("rejected %r: %d of %d pips", turn, played, maximum)
            raise NonMaximalTurn(played, maximum)

    def take_turn(self, turn: Turn) -> None:
        """Apply every play of a turn without validating it."""
        for play in turn:
            self.state.make_play(play)

    def play_turn(self, turn: Turn) -> None:
        """
        Validate, then apply a whole turn.

        Raises:
            BackgammonError: If the turn is not legal; the state is unchanged.
        """
        self.check_turn(turn)
        self.take_turn(turn)
        logger.debug("%s played %s", self.current_player, turn)

    def play_notation(self, notation: str) -> Turn:
        """
        Parse a turn written for the current player and play it.

        Args:
            notation: e.g. `"13/8 6/5"`.

        Returns:
            Turn: The parsed turn that was played.

        Raises:
            BackgammonError: If the notation or the turn is not valid.
        """
        turn = parse_turn(notation, self.current_player)
        self.play_turn(turn)
        return turn

    # ---------- Turn Management ----------
    def change_turn(self, dice: Optional[DiceRoll] = None) -> None:
        """
        Hand the turn to the opponent.

        Args:
            dice: Roll for the next turn; rolled with the engine's rng if omitted.
        """
        dice = dice if dice is not None else DiceRoll.roll(self.rng)
        self.state.switch_turn(dice)
        logger.debug("turn passes to %s with %s", self.current_player, dice)

    def winner(self) -> Optional[Player]:
        """Return the player who has borne off every stone, if any."""
        return self.rules.winner(self.state)

    def copy(self) -> "GameEngine":
        """Return an engine on a copy of the state; rules and rng are shared."""
        return GameEngine(self.state.copy(), self.rules, self.rng)
