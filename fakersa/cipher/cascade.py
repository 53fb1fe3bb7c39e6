"""String-level cascade over a key ring (the login page's ``strEnc``).

Every 4-character plaintext block is re-encrypted once per key block, in
key-ring order, and the results are concatenated as uppercase hex.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .bits import block_to_hex, blocks_to_text, hex_to_block, text_to_blocks
from .constants import BLOCK_BITS
from .errors import InvalidLength
from .feistel import BlockCipher, FeistelBlockCipher

logger = logging.getLogger(__name__)

_HEX_PER_BLOCK = BLOCK_BITS // 4


def flatten_key_ring(key_ring: Sequence[str]) -> List[List[int]]:
    """Each key string is chunked on its own; the blocks are joined in ring order."""
    return [block for key in key_ring for block in text_to_blocks(key)]


@dataclass(frozen=True)
class CascadeStringCipher:
    key_ring: Sequence[str]
    block_cipher: BlockCipher = field(default_factory=FeistelBlockCipher)

    def key_blocks(self) -> List[List[int]]:
        return flatten_key_ring(self.key_ring)

    def encrypt(self, plaintext: str) -> str:
        data_blocks = text_to_blocks(plaintext)
        key_blocks = self.key_blocks()
        logger.debug("Encrypting %d data blocks under %d key blocks", len(data_blocks), len(key_blocks))
        out: List[str] = []
        for block in data_blocks:
            acc = block
            for key_block in key_blocks:
                acc = self.block_cipher.encrypt_block(acc, key_block)
            out.append(block_to_hex(acc))
        return "".join(out)

    def decrypt(self, ciphertext: str) -> str:
        """Invert :meth:`encrypt`; trailing NUL padding is stripped from the result."""
        if len(ciphertext) % _HEX_PER_BLOCK != 0:
            raise InvalidLength(
                f"Ciphertext length must be a multiple of {_HEX_PER_BLOCK}, got {len(ciphertext)}"
            )
        key_blocks = self.key_blocks()
        logger.debug(
            "Decrypting %d data blocks under %d key blocks",
            len(ciphertext) // _HEX_PER_BLOCK,
            len(key_blocks),
        )
        plain_blocks: List[List[int]] = []
        for start in range(0, len(ciphertext), _HEX_PER_BLOCK):
            acc = hex_to_block(ciphertext[start:start + _HEX_PER_BLOCK])
            for key_block in reversed(key_blocks):
                acc = self.block_cipher.decrypt_block(acc, key_block)
            plain_blocks.append(acc)
        return blocks_to_text(plain_blocks).rstrip("\0")


def encrypt_string(plaintext: str, key_ring: Sequence[str]) -> str:
    """Hex ciphertext of ``plaintext`` cascaded through every block of ``key_ring``."""
    return CascadeStringCipher(tuple(key_ring)).encrypt(plaintext)


def decrypt_string(ciphertext: str, key_ring: Sequence[str]) -> str:
    return CascadeStringCipher(tuple(key_ring)).decrypt(ciphertext)
