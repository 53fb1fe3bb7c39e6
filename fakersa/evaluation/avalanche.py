"""Strict Avalanche Criterion (SAC) for the 64-bit block cipher.

For every input bit, flip it across random (block, key) pairs and record
which output bits change. An ideal cipher flips each output bit with
probability 0.5.

Diagnostic only: passing SAC says nothing about security.
"""
from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from fakersa.cipher.constants import BLOCK_BITS
from fakersa.cipher.feistel import BlockCipher, FeistelBlockCipher

logger = logging.getLogger(__name__)


def _rand_bits(rng: random.Random, n: int) -> List[int]:
    return [rng.getrandbits(1) for _ in range(n)]


def _flip_bit(bits: List[int], index: int) -> List[int]:
    if index < 0 or index >= len(bits):
        raise IndexError("bit index out of range")
    out = list(bits)
    out[index] ^= 1
    return out


@dataclass
class SACResult:
    input_type: str             # "plaintext" or "key"
    num_trials: int
    num_input_bits: int
    num_output_bits: int

    # Mean fraction of output bits flipped, per input bit
    per_input_bit_mean: List[float] = field(default_factory=list)

    global_mean: float = 0.0
    global_std: float = 0.0
    min_bit_prob: float = 0.0
    max_bit_prob: float = 0.0
    sac_deviation: float = 0.0  # mean |per_bit - 0.5| (0.0 = perfect SAC)

    @property
    def passes_sac(self) -> bool:
        """Heuristic: SAC deviation < 0.05 and min_bit_prob > 0.35."""
        return self.sac_deviation < 0.05 and self.min_bit_prob > 0.35

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["passes_sac"] = self.passes_sac
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes_sac else "FAIL"
        return (
            f"[{status}] SAC({self.input_type}): "
            f"mean={self.global_mean:.4f}, std={self.global_std:.4f}, "
            f"deviation={self.sac_deviation:.4f}, "
            f"min={self.min_bit_prob:.4f}, max={self.max_bit_prob:.4f}"
        )


def compute_sac(
    cipher: Optional[BlockCipher] = None,
    *,
    input_type: str = "plaintext",
    trials: int = 64,
    seed: int = 1337,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> SACResult:
    """Compute the flip-probability matrix for every input bit of one input type.

    Args:
        cipher: Block cipher to measure; the Feistel network by default.
        input_type: "plaintext" or "key", the input being perturbed.
        trials: Random (block, key) pairs per input bit.
        seed: Seed for the private ``random.Random``.
        progress_callback: Optional callback(current_bit, total_bits).
    """
    if input_type not in ("plaintext", "key"):
        raise ValueError(f"input_type must be 'plaintext' or 'key', got '{input_type}'")
    if trials < 1:
        raise ValueError("trials must be >= 1")

    cipher = cipher or FeistelBlockCipher()
    rng = random.Random(seed)
    flips = np.zeros((BLOCK_BITS, BLOCK_BITS), dtype=np.int64)

    for bit_i in range(BLOCK_BITS):
        if progress_callback:
            progress_callback(bit_i, BLOCK_BITS)
        for _ in range(trials):
            block = _rand_bits(rng, BLOCK_BITS)
            key = _rand_bits(rng, BLOCK_BITS)
            ct1 = cipher.encrypt_block(block, key)
            if input_type == "plaintext":
                ct2 = cipher.encrypt_block(_flip_bit(block, bit_i), key)
            else:
                ct2 = cipher.encrypt_block(block, _flip_bit(key, bit_i))
            flips[bit_i] += np.bitwise_xor(ct1, ct2)

    prob = flips / trials
    per_bit = prob.mean(axis=1)
    result = SACResult(
        input_type=input_type,
        num_trials=trials,
        num_input_bits=BLOCK_BITS,
        num_output_bits=BLOCK_BITS,
        per_input_bit_mean=[round(float(p), 6) for p in per_bit],
        global_mean=round(float(per_bit.mean()), 6),
        global_std=round(float(per_bit.std(ddof=1)), 6),
        min_bit_prob=round(float(per_bit.min()), 6),
        max_bit_prob=round(float(per_bit.max()), 6),
        sac_deviation=round(float(np.abs(per_bit - 0.5).mean()), 6),
    )
    logger.info(result.summary())
    return result
