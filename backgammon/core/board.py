# =========================================================
# --- core_board.py ---
# =========================================================

"""
Board-related constants and initial configuration for Backgammon.

This module defines:
- Board size and the range of absolute locations
- Bar and bear-off anchors
- Home board boundaries
- Stone counts and default starting positions

Per-player tuples are indexed by `Player.value` (0 = BLACK, 1 = WHITE).
"""

#: Number of playable points; indices run 0..23
BOARD_SIZE = 24

#: Absolute (denormalized) locations run 0..25; 0 and 25 are bar/rail anchors
FIRST_LOCATION = 0
LAST_LOCATION = BOARD_SIZE + 1

#: Bar locations for both players
#: BLACK enters from 25, WHITE enters from 0
BAR_FIELD = (25, 0)

#: Bear-off targets for both players
#: BLACK bears off at 0, WHITE at 25
BEAR_OFF_ANCHOR = (0, 25)
# Note: BEAR_OFF_ANCHOR matches the direction of play.
# Each player's bar is the other player's bear-off anchor.

#: Last index outside the home board, seen from the home board.
#: BLACK's home board is indices 0-5, WHITE's is 18-23.
HOME_BOUNDARY = (5, 18)

#: Total number of stones per player
NUM_OF_ALL_STONES = 15

#: Number of sides of each die
DIE_SIDES = 6

#: Default starting positions
#: Each entry: list of (absolute location, number_of_stones) for that player
#: BLACK: 2 stones on 24, 5 on 13, 3 on 8, 5 on 6
#: WHITE: 2 stones on 1, 5 on 12, 3 on 17, 5 on 19
DEFAULT_POSITIONS = (
    ((24, 2), (13, 5), (8, 3), (6, 5)),
    ((1, 2), (12, 5), (17, 3), (19, 5)),
)
