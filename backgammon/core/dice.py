# =========================================================
# --- core_dice.py ---
# =========================================================

import bisect
import random
from collections import Counter
from typing import Iterator, List, Optional, Tuple

from .board import DIE_SIDES
from .errors import InvalidPlayLength

# =========================================================

class DiceRoll:
    """
    A roll of two dice and the pip lengths still usable this turn.

    Doubles can be played four times, so the available lengths are the
    multiset {a, b} for a non-double and {a, a, a, a} for a double.

    Attributes:
        values (Tuple[int, int]): The two values shown by the dice.
        available (List[int]): Remaining usable lengths, sorted ascending.
    """

    def __init__(self, values: Tuple[int, int]) -> None:
        """
        Args:
            values: The two die values, each in 1..6.

        Raises:
            ValueError: If there are not exactly two values in 1..6.
        """
        values = tuple(int(v) for v in values)
        if len(values) != 2 or any(not 1 <= v <= DIE_SIDES for v in values):
            raise ValueError(f"invalid dice values {values}")
        self.values: Tuple[int, int] = values
        self.available: List[int] = self.calculate_available(values)

    # ---------- Constructors ----------
    @classmethod
    def from_values(cls, first: int, second: int) -> "DiceRoll":
        """Create a roll showing the given values."""
        return cls((first, second))

    @classmethod
    def roll(cls, rng: Optional[random.Random] = None) -> "DiceRoll":
        """Roll two independent dice with the given random source."""
        rng = rng or random.Random()
        return cls((rng.randint(1, DIE_SIDES), rng.randint(1, DIE_SIDES)))

    @classmethod
    def opening(cls, rng: Optional[random.Random] = None) -> "DiceRoll":
        """Roll for the opening move. Re-roll doubles."""
        rng = rng or random.Random()
        roll = cls.roll(rng)
        while roll.is_double():
            roll = cls.roll(rng)
        return roll

    @staticmethod
    def calculate_available(values: Tuple[int, ...]) -> List[int]:
        """
        Expand die values into usable lengths.

        A value shown by n > 1 dice can be used 2**n times, which gives four
        uses for a double.
        """
        available: List[int] = []
        for value, count in Counter(values).items():
            available.extend([value] * ((1 << count) if count > 1 else 1))
        return sorted(available)

    def copy(self) -> "DiceRoll":
        new_roll = DiceRoll(self.values)
        new_roll.available = list(self.available)
        return new_roll

    # ---------- Queries ----------
    def is_double(self) -> bool:
        return self.values[0] == self.values[1]

    def contains(self, length: int) -> bool:
        """Check if a length is still available."""
        return length in self.available

    def any_available(self) -> bool:
        """Check if any length is still available."""
        return bool(self.available)

    def max_available(self) -> int:
        """Return the highest available length, or 0 when all are used."""
        return self.available[-1] if self.available else 0

    def total_available(self) -> int:
        """Sum of the remaining lengths."""
        return sum(self.available)

    def distinct(self) -> List[int]:
        """Remaining lengths without repetition, ascending."""
        return sorted(set(self.available))

    # ---------- Consumption ----------
    def consume(self, length: int) -> None:
        """
        Use one instance of a length.

        Raises:
            InvalidPlayLength: If the length is not available.
        """
        try:
            self.available.remove(length)
        except ValueError:
            raise InvalidPlayLength(length) from None

    def restore(self, length: int) -> None:
        """Give back a length taken by `consume`."""
        bisect.insort(self.available, length)

    # ---------- Iteration / Display ----------
    def __iter__(self) -> Iterator[int]:
        """Iterate over a snapshot of the remaining lengths."""
        return iter(list(self.available))

    def __len__(self) -> int:
        return len(self.available)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiceRoll):
            return NotImplemented
        return self.values == other.values and self.available == other.available

    __hash__ = None

    def __str__(self) -> str:
        return "-".join(str(v) for v in self.values)

    def __repr__(self) -> str:
        return f"DiceRoll({self.values[0]}, {self.values[1]}, available={self.available})"
