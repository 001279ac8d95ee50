# backgammon/utils/bitmask.py

from typing import Iterable, List


def bits_from_indices(indices: Iterable[int]) -> int:
    """Build a mask with one bit set per board index (bit 0 = index 0)."""
    mask = 0
    for i in indices:
        mask |= 1 << int(i)
    return mask


def indices_from_bits(mask: int) -> List[int]:
    """Return the indices of all set bits, lowest first."""
    idxs = []
    mask = int(mask)
    while mask:
        lsb = mask & -mask
        idxs.append(lsb.bit_length() - 1)
        mask &= mask - 1
    return idxs


def set_all_bits(start: int, end: int) -> int:
    """Mask with every bit from start to end (inclusive) set; empty if end < start."""
    if end < start:
        return 0
    return ((1 << (end + 1)) - 1) & ~((1 << start) - 1)


def remove_from_mask(mask: int, remove: int) -> int:
    """
    Clear every bit of remove from mask.
    """
    return mask & ~remove
