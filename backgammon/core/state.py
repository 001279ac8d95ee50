# =========================================================
# --- core_state.py ---
# =========================================================

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .board_state import Board, Point, Space
from .dice import DiceRoll
from .moves import Play
from .player import Player
from .state_invariants import assert_state_invariant

# =========================================================

@dataclass(frozen=True)
class PlayRecord:
    """
    Everything needed to take back an applied play.

    Attributes:
        play (Play): The applied play.
        consumed (int): Dice length used by the play.
        hit (bool): Whether an opposing blot was sent to the bar.
        saved (Tuple[Tuple[Space, Point], ...]): Slots as they were before the play.
    """
    play: Play
    consumed: int
    hit: bool
    saved: Tuple[Tuple[Space, Point], ...]


class BackgammonPlaysMixin:
    """
    Mixin class providing the stone-moving operations:
    - applying a validated play (dice, hit, stone transfer)
    - undoing a previously applied play
    """

    def make_play(self, play: Play) -> PlayRecord:
        """
        Apply a play that already passed validation.

        The exact length is taken from the dice when available; otherwise the
        play is an over-length bear-off and the highest die is used. A lone
        opposing stone on the destination is sent to its bar.

        Args:
            play (Play): The play to apply.

        Returns:
            PlayRecord: Record to pass to `undo_play`.
        """
        board: Board = self.board
        player = play.player
        opp = player.opponent
        opp_bar = Space.bar(opp)

        saved = tuple(
            (space, board.get(space))
            for space in (play.from_space, play.to_space, opp_bar)
        )

        length = play.distance()
        if self.dice.contains(length):
            consumed = length
        else:
            assert play.is_bear_off, f"{play} is not a bear-off and needs an exact die"
            consumed = self.dice.max_available()
        self.dice.consume(consumed)

        target = board.get(play.to_space)
        hit = target.player == opp and target.count == 1
        if hit:
            board.set(opp_bar, board.get(opp_bar).count + 1, opp)
            board.set(play.to_space, 0, Player.NONE)
            target = board.get(play.to_space)

        source = board.get(play.from_space)
        board.set(play.from_space, source.count - 1, player)
        board.set(play.to_space, target.count + 1, player)

        self._assert("make_play")
        return PlayRecord(play, consumed, hit, saved)

    def undo_play(self, record: PlayRecord) -> None:
        """
        Undo a previously applied play.

        Args:
            record (PlayRecord): Record returned by `make_play`.
        """
        for space, point in reversed(record.saved):
            self.board.set(space, point.count, point.player)
        self.dice.restore(record.consumed)
        self._assert("undo_play")


class BackgammonState(BackgammonPlaysMixin):
    """
    Represents the complete mutable state of a turn in progress.

    Attributes:
        board (Board): Stones on points, bars and rails.
        dice (DiceRoll): Current roll and its unused lengths.
        current_player (Player): Player whose turn it is.
        debug (bool): Enable state invariant assertions.
        totals (Tuple[int, int]): Stones per player when the state was created.
    """

    def __init__(
        self,
        board: Optional[Board] = None,
        dice: Optional[DiceRoll] = None,
        current_player: Player = Player.BLACK,
        debug: bool = False,
    ):
        self.debug: bool = debug
        self.board: Board = board if board is not None else Board.standard()
        self.dice: DiceRoll = dice if dice is not None else DiceRoll.opening()
        self.current_player: Player = current_player
        self.totals: Tuple[int, int] = (
            self.board.totals(Player.BLACK),
            self.board.totals(Player.WHITE),
        )
        self._assert("__init__")

    # ---------- Setup / Copy ----------
    def copy(self) -> "BackgammonState":
        """Return a deep copy of the current state."""
        new_state = BackgammonState.__new__(BackgammonState)
        new_state.debug = self.debug
        new_state.board = self.board.copy()
        new_state.dice = self.dice.copy()
        new_state.current_player = self.current_player
        new_state.totals = self.totals
        return new_state

    # ---------- Properties ----------
    @property
    def opp(self) -> Player:
        """Return the opponent of the current player."""
        return self.current_player.opponent

    # ---------- Turn ----------
    def switch_turn(self, dice: DiceRoll) -> None:
        """Hand the turn to the other player with a fresh roll."""
        self.current_player = self.current_player.opponent
        self.dice = dice

    # ---------- Equality / Hash ----------
    def key(self) -> Tuple[bytes, Tuple[int, ...], Player]:
        """Hashable snapshot of board, unused dice and player to move."""
        return (self.board.key(), tuple(self.dice.available), self.current_player)

    def __eq__(self, other: Any) -> bool:
        """Check equality with another BackgammonState."""
        if not isinstance(other, BackgammonState):
            return NotImplemented
        return (
            self.board == other.board and
            self.dice == other.dice and
            self.current_player == other.current_player
        )

    __hash__ = None

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert state invariants if debug mode is active."""
        if self.debug:
            assert_state_invariant(self, where)
