from __future__ import annotations

from typing import List, Sequence, TypeVar

from .constants import (
    BLOCK_BITS,
    EXPANSION_TABLE,
    FINAL_PERMUTATION,
    HALF_BITS,
    INITIAL_PERMUTATION,
    P_PERMUTATION,
    ROUND_KEY_BITS,
)
from .errors import InvalidLength, InvalidPermutationTable

T = TypeVar("T")


def permute(table: Sequence[int], data: Sequence[T], length: int) -> List[T]:
    """Return ``[data[table[i]] for i in range(length)]``.

    The table may repeat source positions (expansion) or skip them
    (contraction); it is validated against ``data`` on every call.
    """
    if table:
        highest = max(table)
        if highest >= len(data):
            raise InvalidPermutationTable(
                f"Invalid permutation table, expected max < {len(data)}, got {highest}"
            )
    if length > len(table):
        raise InvalidLength(f"Permutation table has {len(table)} entries, {length} requested")
    return [data[table[i]] for i in range(length)]


def _check_length(name: str, data: Sequence[int], expected: int) -> None:
    if len(data) != expected:
        raise InvalidLength(f"Invalid length of {name}, expected {expected}, got {len(data)}")


def initial_permute(block: Sequence[int]) -> List[int]:
    _check_length("block", block, BLOCK_BITS)
    return permute(INITIAL_PERMUTATION, block, BLOCK_BITS)


def expand_permute(half: Sequence[int]) -> List[int]:
    _check_length("right half", half, HALF_BITS)
    return permute(EXPANSION_TABLE, half, ROUND_KEY_BITS)


def p_permute(sbox_output: Sequence[int]) -> List[int]:
    _check_length("S-box output", sbox_output, HALF_BITS)
    return permute(P_PERMUTATION, sbox_output, HALF_BITS)


def final_permute(block: Sequence[int]) -> List[int]:
    _check_length("block", block, BLOCK_BITS)
    return permute(FINAL_PERMUTATION, block, BLOCK_BITS)
