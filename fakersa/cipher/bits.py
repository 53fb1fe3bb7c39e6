"""Bit-vector codec: text, integers and hex to and from big-endian bit lists.

A bit vector is a plain ``list`` of 0/1 ints with index 0 the most
significant bit. Text is packed 4 characters per 64-bit block, 16 bits per
character (UTF-16 code units as the legacy browser client produced them).
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .constants import BLOCK_BITS, CHAR_BITS, CHARS_PER_BLOCK
from .errors import InvalidCharacter, InvalidLength

_HEX_GROUP_BITS = 16
_HEX_GROUP_DIGITS = 4
_MAX_CODE_POINT = (1 << CHAR_BITS) - 1
_HEXDIGITS = frozenset("0123456789abcdefABCDEF")


def int_to_bits(value: int, min_length: Optional[int] = None) -> List[int]:
    """Big-endian bits of ``value`` without leading zeros, left-padded to ``min_length``.

    Never truncates: the result has ``max(natural length, min_length)`` bits.
    ``int_to_bits(0)`` is the empty vector.
    """
    if value < 0:
        raise ValueError(f"int_to_bits expects a non-negative integer, got {value}")
    bits = [int(ch) for ch in bin(value)[2:]] if value else []
    if min_length is not None and len(bits) < min_length:
        bits = [0] * (min_length - len(bits)) + bits
    return bits


def bits_to_int(bits: Sequence[int]) -> int:
    """Big-endian value of ``bits``; leading zeros are skipped, the input is not modified."""
    start = next((i for i, b in enumerate(bits) if b), len(bits))
    value = 0
    for b in bits[start:]:
        value = (value << 1) | b
    return value


def xor_bits(a: Sequence[int], b: Sequence[int]) -> List[int]:
    if len(a) != len(b):
        raise InvalidLength(f"xor_bits length mismatch: {len(a)} != {len(b)}")
    return [x ^ y for x, y in zip(a, b)]


def text_to_blocks(s: str) -> List[List[int]]:
    """Split ``s`` into 64-bit blocks of 4 characters, NUL-padding the last one."""
    blocks: List[List[int]] = []
    for start in range(0, len(s), CHARS_PER_BLOCK):
        group = s[start:start + CHARS_PER_BLOCK].ljust(CHARS_PER_BLOCK, "\0")
        block: List[int] = []
        for ch in group:
            code = ord(ch)
            if code > _MAX_CODE_POINT:
                raise InvalidCharacter(
                    f"Character {ch!r} (U+{code:06X}) does not fit in {CHAR_BITS} bits"
                )
            block.extend(int_to_bits(code, CHAR_BITS))
        blocks.append(block)
    return blocks


def text_to_bits(s: str) -> List[int]:
    """All blocks of ``s`` flattened into one vector."""
    return [b for block in text_to_blocks(s) for b in block]


def blocks_to_text(blocks: Iterable[Sequence[int]]) -> str:
    """Inverse of :func:`text_to_blocks`; padding NULs are kept."""
    chars: List[str] = []
    for block in blocks:
        if len(block) != BLOCK_BITS:
            raise InvalidLength(f"Invalid length of block, expected {BLOCK_BITS}, got {len(block)}")
        for i in range(0, BLOCK_BITS, CHAR_BITS):
            chars.append(chr(bits_to_int(block[i:i + CHAR_BITS])))
    return "".join(chars)


def block_to_hex(block: Sequence[int]) -> str:
    """Render a 64-bit block as 16 uppercase hex digits, 4 per 16-bit group."""
    if len(block) != BLOCK_BITS:
        raise InvalidLength(f"Invalid length of data, expected {BLOCK_BITS}, got {len(block)}")
    return "".join(
        f"{bits_to_int(block[i:i + _HEX_GROUP_BITS]):0{_HEX_GROUP_DIGITS}X}"
        for i in range(0, BLOCK_BITS, _HEX_GROUP_BITS)
    )


def hex_to_block(text: str) -> List[int]:
    """Parse 16 hex digits (either case) back into a 64-bit block."""
    digits = BLOCK_BITS // 4
    if len(text) != digits:
        raise InvalidLength(f"Invalid length of hex block, expected {digits}, got {len(text)}")
    bad = [ch for ch in text if ch not in _HEXDIGITS]
    if bad:
        raise InvalidCharacter(f"Not a hex digit: {bad[0]!r}")
    return int_to_bits(int(text, 16), BLOCK_BITS)
