from __future__ import annotations

from typing import List, Sequence

from .bits import xor_bits
from .constants import BLOCK_BITS, HALF_BITS, ROUNDS
from .errors import InvalidLength
from .key_schedule import generate_round_keys
from .permutation import expand_permute, final_permute, initial_permute, p_permute
from .substitution import substitute


class BlockCipher:
    def encrypt_block(self, data_block: Sequence[int], key_block: Sequence[int]) -> List[int]:  # pragma: no cover
        raise NotImplementedError

    def decrypt_block(self, cipher_block: Sequence[int], key_block: Sequence[int]) -> List[int]:  # pragma: no cover
        raise NotImplementedError


def round_function(right: Sequence[int], round_key: Sequence[int]) -> List[int]:
    """P(S(E(right) XOR round_key)), 32 bits in and out."""
    return p_permute(substitute(xor_bits(expand_permute(right), round_key)))


class FeistelBlockCipher(BlockCipher):
    """16-round DES-structured network over 64-bit bit-list blocks.

    The halves leave the last round unswapped and are joined right-first
    before the final permutation. Because that permutation inverts the
    initial one, decryption is the same network with the round keys reversed.
    """

    def _run(self, block: Sequence[int], round_keys: List[List[int]]) -> List[int]:
        if len(block) != BLOCK_BITS:
            raise InvalidLength(f"Invalid length of block, expected {BLOCK_BITS}, got {len(block)}")
        permuted = initial_permute(block)
        left, right = permuted[:HALF_BITS], permuted[HALF_BITS:]
        for r in range(ROUNDS):
            left, right = right, xor_bits(round_function(right, round_keys[r]), left)
        return final_permute(right + left)

    def encrypt_block(self, data_block: Sequence[int], key_block: Sequence[int]) -> List[int]:
        return self._run(data_block, generate_round_keys(key_block))

    def decrypt_block(self, cipher_block: Sequence[int], key_block: Sequence[int]) -> List[int]:
        round_keys = generate_round_keys(key_block)
        return self._run(cipher_block, round_keys[::-1])
