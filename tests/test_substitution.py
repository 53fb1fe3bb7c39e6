import pytest

from fakersa.cipher.bits import bits_to_int
from fakersa.cipher.constants import SBOX_POSITION_WEIGHTS, SBOXES
from fakersa.cipher.errors import InvalidLength
from fakersa.cipher.substitution import dot_product, sbox_positions, substitute


def test_dot_product():
    assert dot_product([1, 0, 1], [4, 2, 1]) == 5
    with pytest.raises(InvalidLength):
        dot_product([1, 0], [1])


def test_weights_reproduce_outer_row_inner_column():
    assert SBOX_POSITION_WEIGHTS == (2, 8, 4, 2, 1, 1)


def test_sbox_positions_per_group():
    # group 0 = 100001 -> row 3, column 0; group 1 = 011110 -> row 0, column 15
    mixed = [1, 0, 0, 0, 0, 1, 0, 1, 1, 1, 1, 0] + [0] * 36
    positions = sbox_positions(mixed)
    assert len(positions) == 8
    assert positions[0] == (3, 0)
    assert positions[1] == (0, 15)
    assert positions[2:] == [(0, 0)] * 6


def test_substitute_all_zero():
    assert bits_to_int(substitute([0] * 48)) == 0xEFA72C4D


def test_substitute_all_one():
    assert bits_to_int(substitute([1] * 48)) == 0xD9CE3DCB


def test_substitute_looks_up_each_box():
    out = substitute([1, 0, 0, 0, 0, 1] + [0] * 42)
    assert len(out) == 32
    assert bits_to_int(out[:4]) == SBOXES[0][3][0]
    assert bits_to_int(out[4:8]) == SBOXES[1][0][0]


def test_substitute_requires_48_bits():
    with pytest.raises(InvalidLength):
        substitute([0] * 47)
