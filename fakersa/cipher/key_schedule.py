from __future__ import annotations

from functools import lru_cache
from typing import List, Sequence, Tuple

from .constants import (
    BLOCK_BITS,
    KEY_COMPRESSION,
    KEY_ROTATION_OFFSETS,
    REDUCED_KEY_BITS,
    ROUND_KEY_BITS,
)
from .errors import InvalidLength
from .permutation import permute

_HALF = REDUCED_KEY_BITS // 2


def rotate_left(bits: Sequence[int], offset: int) -> List[int]:
    bits = list(bits)
    return bits[offset:] + bits[:offset]


def reduce_key(key_block: Sequence[int]) -> List[int]:
    """Interleave a 64-bit key block into 56 bits, dropping every 8th column."""
    if len(key_block) != BLOCK_BITS:
        raise InvalidLength(f"Invalid length of key block, expected {BLOCK_BITS}, got {len(key_block)}")
    derived = [0] * REDUCED_KEY_BITS
    for i in range(7):
        for j in range(8):
            derived[i * 8 + j] = key_block[8 * (7 - j) + i]
    return derived


@lru_cache(maxsize=256)
def _round_keys(key_block: Tuple[int, ...]) -> Tuple[Tuple[int, ...], ...]:
    state = reduce_key(key_block)
    keys = []
    for offset in KEY_ROTATION_OFFSETS:
        # Rotation is cumulative: each round rotates the previous round's state.
        state = rotate_left(state[:_HALF], offset) + rotate_left(state[_HALF:], offset)
        keys.append(tuple(permute(KEY_COMPRESSION, state, ROUND_KEY_BITS)))
    return tuple(keys)


def generate_round_keys(key_block: Sequence[int]) -> List[List[int]]:
    """Derive the 16 ordered 48-bit round keys for one 64-bit key block."""
    if len(key_block) != BLOCK_BITS:
        raise InvalidLength(f"Invalid length of key block, expected {BLOCK_BITS}, got {len(key_block)}")
    return [list(k) for k in _round_keys(tuple(key_block))]
