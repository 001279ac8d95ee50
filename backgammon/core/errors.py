# =========================================================
# --- core_errors.py ---
# =========================================================

"""
Error hierarchy of the rules engine.

Every error raised while building locations, parsing notation, or validating
plays and turns derives from `BackgammonError`, so callers can catch the whole
taxonomy at once:

    try:
        engine.play_notation("13/8 6/5")
    except BackgammonError as e:
        print(e.message)

Play errors also carry the id of the rule (R1-R9) that rejected the play.
"""

from typing import Optional

from .player import Player

# =========================================================

class BackgammonError(Exception):
    """
    Base exception for all rules-engine errors.

    Attributes:
        code (str): Machine-readable error code.
        message (str): Human-readable description.
    """
    code: str = "BACKGAMMON_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def __str__(self) -> str:
        return self.message


# ---------- Locations ----------

class LocationError(BackgammonError):
    """A location value is outside its valid range."""
    code = "INVALID_LOCATION"


class InvalidNormalizedLocation(LocationError):
    code = "INVALID_NORMALIZED_LOCATION"

    def __init__(self, position: int, player: Player) -> None:
        self.position = position
        self.player = player
        super().__init__(f"cannot create normalized location of `{position}` for `{player}`")


class InvalidDenormalizedLocation(LocationError):
    code = "INVALID_DENORMALIZED_LOCATION"

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"cannot create denormalized location from `{position}`")


class InvalidIndexLocation(LocationError):
    code = "INVALID_INDEX_LOCATION"

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"cannot create index location from `{position}`")


# ---------- Notation ----------

class NotationError(BackgammonError):
    code = "INVALID_NOTATION"


class InvalidNotation(NotationError):
    """A whitespace separated group of the input does not match the grammar."""

    def __init__(self, notation: str) -> None:
        self.notation = notation
        super().__init__(f"notation '{notation}' is not valid")


# ---------- Plays ----------

class PlayError(BackgammonError):
    """
    A single play was rejected.

    Attributes:
        rule_id (str): Id of the rule that rejected the play.
    """
    code = "ILLEGAL_PLAY"
    rule_id: str = ""
    default_message: str = "play is not legal"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class PlayMadeOutOfTurn(PlayError):
    code = "PLAY_MADE_OUT_OF_TURN"
    rule_id = "R1"
    default_message = "play made out of turn"


class PlayMadeWithBarFilled(PlayError):
    code = "PLAY_MADE_WITH_BAR_FILLED"
    rule_id = "R2"
    default_message = "all pieces on the bar must be entered first"


class PlayMadeFromRail(PlayError):
    code = "PLAY_MADE_FROM_RAIL"
    rule_id = "R3"
    default_message = "cannot play a piece that has been borne off"


class PlayMadeToBar(PlayError):
    code = "PLAY_MADE_TO_BAR"
    rule_id = "R4"
    default_message = "cannot play a piece onto the bar"


class InvalidBearOff(PlayError):
    code = "INVALID_BEAR_OFF"
    rule_id = "R5"
    default_message = "cannot bear off while pieces are outside the home table"


class PlayMadeFromEmptyPoint(PlayError):
    code = "PLAY_MADE_FROM_EMPTY_POINT"
    rule_id = "R6"
    default_message = "cannot play from an empty point"


class PlayMadeWithOpposingPiece(PlayError):
    code = "PLAY_MADE_WITH_OPPOSING_PIECE"
    rule_id = "R6"
    default_message = "cannot play an opposing piece"


class InvalidPlayDirection(PlayError):
    code = "INVALID_PLAY_DIRECTION"
    rule_id = "R7"
    default_message = "cannot play a piece backwards"


class PlayMadeOntoOpposingPiece(PlayError):
    code = "PLAY_MADE_ONTO_OPPOSING_PIECE"
    rule_id = "R8"
    default_message = "cannot play onto a point held by two or more opposing pieces"


class InvalidPlayLength(PlayError):
    code = "INVALID_PLAY_LENGTH"
    rule_id = "R9"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"play of length '{length}' is not valid")


# ---------- Turns ----------

class TurnError(BackgammonError):
    code = "ILLEGAL_TURN"


class IncompleteTurn(TurnError):
    code = "INCOMPLETE_TURN"

    def __init__(self) -> None:
        super().__init__("did not use all possible plays")


class NonMaximalTurn(TurnError):
    code = "NON_MAXIMAL_TURN"

    def __init__(self, played: int, maximum: int) -> None:
        self.played = played
        self.maximum = maximum
        super().__init__(f"turn uses {played} pips but {maximum} can be played")
