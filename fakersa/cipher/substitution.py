"""S-box layer of the round function.

Each 6-bit group is addressed by dot products against one shared weight
vector: the row from positions 0 and 5, the column from positions 1..4.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .bits import int_to_bits
from .constants import ROUND_KEY_BITS, SBOX_POSITION_WEIGHTS, SBOXES
from .errors import InvalidLength

_GROUP_BITS = 6
_OUTPUT_BITS = 4


def dot_product(v1: Sequence[int], v2: Sequence[int]) -> int:
    if len(v1) != len(v2):
        raise InvalidLength(f"Invalid length of vector, expected {len(v1)}, got {len(v2)}")
    return sum(a * b for a, b in zip(v1, v2))


def sbox_positions(mixed: Sequence[int]) -> List[Tuple[int, int]]:
    """(row, column) for each of the 8 groups of a 48-bit input."""
    if len(mixed) != ROUND_KEY_BITS:
        raise InvalidLength(f"Invalid length of S-box input, expected {ROUND_KEY_BITS}, got {len(mixed)}")
    w = SBOX_POSITION_WEIGHTS
    positions: List[Tuple[int, int]] = []
    for group in range(len(SBOXES)):
        g = mixed[group * _GROUP_BITS:(group + 1) * _GROUP_BITS]
        row = dot_product((g[0], g[5]), (w[0], w[5]))
        column = dot_product(g[1:5], w[1:5])
        positions.append((row, column))
    return positions


def substitute(mixed: Sequence[int]) -> List[int]:
    """48-bit round input -> 32-bit S-box output."""
    out: List[int] = []
    for group, (row, column) in enumerate(sbox_positions(mixed)):
        out.extend(int_to_bits(SBOXES[group][row][column], _OUTPUT_BITS))
    return out
