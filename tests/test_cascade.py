import math
import random
import string

import pytest

import fakersa
from fakersa.cipher.bits import text_to_blocks
from fakersa.cipher.cascade import (
    CascadeStringCipher,
    decrypt_string,
    encrypt_string,
    flatten_key_ring,
)
from fakersa.cipher.errors import InvalidCharacter, InvalidLength

DEFAULT_RING = ["1", "2", "3"]


@pytest.mark.parametrize(
    "plaintext,ring,expected",
    [
        ("test", DEFAULT_RING, "D8D35E5019288C41"),
        ("test", ["3", "2", "1"], "AAEA9A8E8C93683C"),
        ("hi", DEFAULT_RING, "2058E46050368D2F"),
        ("abcd", ["key"], "7CAB6E3E87D0F77A"),
        ("abcde", DEFAULT_RING, "A9CF2704230383D100DE5835FF643FD8"),
        ("hello world", DEFAULT_RING, "8464FE022385FBA6F1C1B1BA619C5E70DA66082826074694"),
        ("ab", ["longerkey", "x"], "CA2E140B294B8721"),
        ("été", DEFAULT_RING, "ABA9C5B2704B86AD"),
        ("test", ["\0"], "098470AA400DC1B0"),
    ],
)
def test_golden_vectors(plaintext, ring, expected):
    assert encrypt_string(plaintext, ring) == expected


def test_package_level_entry_point():
    assert fakersa.encrypt("test", DEFAULT_RING) == "D8D35E5019288C41"
    assert fakersa.decrypt("D8D35E5019288C41", DEFAULT_RING) == "test"


@pytest.mark.parametrize("n", [0, 1, 3, 4, 5, 8, 9, 17])
def test_output_length(n):
    out = encrypt_string("x" * n, DEFAULT_RING)
    assert len(out) == 16 * math.ceil(n / 4)
    assert set(out) <= set("0123456789ABCDEF")


def test_boundary_four_and_five_characters():
    four = encrypt_string("abcd", DEFAULT_RING)
    five = encrypt_string("abcde", DEFAULT_RING)
    assert len(four) == 16
    assert len(five) == 32
    # The first block is independent of what follows it.
    assert five[:16] == four
    assert five[16:] == encrypt_string("e\0\0\0", DEFAULT_RING)


def test_deterministic():
    assert encrypt_string("same input", DEFAULT_RING) == encrypt_string("same input", DEFAULT_RING)


def test_key_ring_order_matters():
    rng = random.Random(11)
    plaintexts = ["".join(rng.choice(string.ascii_letters) for _ in range(8)) for _ in range(5)]
    assert any(
        encrypt_string(p, ["alpha", "beta"]) != encrypt_string(p, ["beta", "alpha"])
        for p in plaintexts
    )


def test_keys_are_chunked_per_key_string():
    assert flatten_key_ring(["abcdefgh"]) == flatten_key_ring(["abcd", "efgh"])
    assert len(flatten_key_ring(["abcde", "f"])) == 3
    assert flatten_key_ring(["ab", "cd"]) == text_to_blocks("ab") + text_to_blocks("cd")
    assert encrypt_string("secret", ["abcdefgh"]) == "564923C05039F72679AD3B262337FEDD"


def test_padding_is_per_key_not_across_keys():
    assert encrypt_string("test", ["ab", "cd"]) != encrypt_string("test", ["abcd"])


def test_empty_plaintext():
    assert encrypt_string("", DEFAULT_RING) == ""
    assert decrypt_string("", DEFAULT_RING) == ""


def test_decrypt_roundtrip_random():
    rng = random.Random(1337)
    alphabet = string.ascii_letters + string.digits + "-_@"
    for _ in range(20):
        pt = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 13)))
        ring = ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, 6))) for _ in range(rng.randint(1, 3))]
        cipher = CascadeStringCipher(tuple(ring))
        assert cipher.decrypt(cipher.encrypt(pt)) == pt


def test_decrypt_accepts_lowercase_hex():
    assert decrypt_string("d8d35e5019288c41", DEFAULT_RING) == "test"


def test_decrypt_validation():
    with pytest.raises(InvalidLength):
        decrypt_string("D8D35E50", DEFAULT_RING)
    with pytest.raises(InvalidCharacter):
        decrypt_string("D8D35E5019288C4Z", DEFAULT_RING)


def test_invalid_characters_rejected():
    with pytest.raises(InvalidCharacter):
        encrypt_string("\U0001F600", DEFAULT_RING)
    with pytest.raises(InvalidCharacter):
        encrypt_string("ok", ["\U0001F511"])


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        encrypt_string("\U0001F600", DEFAULT_RING)
