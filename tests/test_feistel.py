import random

import pytest

from fakersa.cipher.bits import block_to_hex, hex_to_block, text_to_blocks
from fakersa.cipher.errors import InvalidLength
from fakersa.cipher.feistel import FeistelBlockCipher, round_function

ZERO = [0] * 64


@pytest.fixture
def cipher():
    return FeistelBlockCipher()


def test_zero_block_zero_key(cipher):
    # With an all-zero key every round key is zero, so the classic DES vector applies.
    assert block_to_hex(cipher.encrypt_block(ZERO, ZERO)) == "8CA64DE9C1B123A7"


def test_text_block_zero_key(cipher):
    block = text_to_blocks("test")[0]
    assert block_to_hex(cipher.encrypt_block(block, ZERO)) == "098470AA400DC1B0"


def test_text_block_text_key(cipher):
    block = text_to_blocks("test")[0]
    key = text_to_blocks("1")[0]
    assert block_to_hex(cipher.encrypt_block(block, key)) == "235468675FC1F196"


def test_decrypt_inverts_encrypt(cipher):
    rng = random.Random(2026)
    for _ in range(25):
        block = [rng.getrandbits(1) for _ in range(64)]
        key = [rng.getrandbits(1) for _ in range(64)]
        ct = cipher.encrypt_block(block, key)
        assert cipher.decrypt_block(ct, key) == block


def test_decrypt_golden(cipher):
    assert cipher.decrypt_block(hex_to_block("8CA64DE9C1B123A7"), ZERO) == ZERO


def test_encrypt_does_not_mutate_inputs(cipher):
    block = text_to_blocks("abcd")[0]
    key = text_to_blocks("wxyz")[0]
    block_copy, key_copy = list(block), list(key)
    cipher.encrypt_block(block, key)
    assert block == block_copy and key == key_copy


def test_round_function_shape():
    assert len(round_function([0] * 32, [0] * 48)) == 32


@pytest.mark.parametrize("block_len,key_len", [(63, 64), (64, 63), (32, 64)])
def test_length_mismatch_raises(cipher, block_len, key_len):
    with pytest.raises(InvalidLength):
        cipher.encrypt_block([0] * block_len, [0] * key_len)
