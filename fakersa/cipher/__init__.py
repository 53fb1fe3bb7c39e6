"""Bit-level cipher core: codec, permutations, S-boxes, key schedule, Feistel network, cascade."""

from .bits import (
    bits_to_int,
    block_to_hex,
    blocks_to_text,
    hex_to_block,
    int_to_bits,
    text_to_bits,
    text_to_blocks,
    xor_bits,
)
from .cascade import CascadeStringCipher, decrypt_string, encrypt_string, flatten_key_ring
from .errors import CipherError, InvalidCharacter, InvalidLength, InvalidPermutationTable
from .feistel import BlockCipher, FeistelBlockCipher, round_function
from .key_schedule import generate_round_keys, reduce_key, rotate_left
from .permutation import expand_permute, final_permute, initial_permute, p_permute, permute
from .substitution import dot_product, sbox_positions, substitute

__all__ = [
    "bits_to_int",
    "block_to_hex",
    "blocks_to_text",
    "hex_to_block",
    "int_to_bits",
    "text_to_bits",
    "text_to_blocks",
    "xor_bits",
    "CascadeStringCipher",
    "decrypt_string",
    "encrypt_string",
    "flatten_key_ring",
    "CipherError",
    "InvalidCharacter",
    "InvalidLength",
    "InvalidPermutationTable",
    "BlockCipher",
    "FeistelBlockCipher",
    "round_function",
    "generate_round_keys",
    "reduce_key",
    "rotate_left",
    "expand_permute",
    "final_permute",
    "initial_permute",
    "p_permute",
    "permute",
    "dot_product",
    "sbox_positions",
    "substitute",
]
