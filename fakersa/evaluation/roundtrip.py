"""Roundtrip verification P = D(E(P, R), R) for the string cascade.

Plaintexts and key rings are drawn from a NUL-free alphabet, because
decryption strips the NUL padding the encoder appends.
"""
from __future__ import annotations

import logging
import random
import string
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from fakersa.cipher.cascade import decrypt_string, encrypt_string
from fakersa.cipher.errors import CipherError

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_letters + string.digits + "-_.@!#$%"


@dataclass
class RoundtripFailure:
    vector_index: int
    plaintext: str
    key_ring: List[str]
    ciphertext: str
    decrypted: str
    error: Optional[str]     # Exception message if encrypt/decrypt raised


@dataclass
class RoundtripResult:
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] cascade roundtrip: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def _rand_text(rng: random.Random, min_len: int, max_len: int) -> str:
    return "".join(rng.choice(ALPHABET) for _ in range(rng.randint(min_len, max_len)))


def run_roundtrip_tests(
    *,
    num_vectors: int = 200,
    seed: int = 1337,
    max_plaintext_len: int = 24,
    max_keys: int = 3,
    max_key_len: int = 6,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Encrypt then decrypt random (plaintext, key ring) pairs and compare.

    Args:
        num_vectors: Number of random pairs to test.
        seed: Random seed for deterministic reproducibility.
        max_plaintext_len: Upper bound on plaintext length (lower bound 0).
        max_keys: Upper bound on key-ring size (lower bound 1).
        max_key_len: Upper bound on each key's length (lower bound 1).
        max_failures_recorded: Maximum number of failure details to keep.
    """
    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        pt = _rand_text(rng, 0, max_plaintext_len)
        ring = [_rand_text(rng, 1, max_key_len) for _ in range(rng.randint(1, max_keys))]

        try:
            ct = encrypt_string(pt, ring)
            pt2 = decrypt_string(ct, ring)
        except CipherError as exc:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(i, pt, ring, "<error>", "<error>", str(exc)))
            continue

        if pt == pt2:
            passed += 1
        else:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(i, pt, ring, ct, pt2, None))

    elapsed = time.perf_counter() - start
    result = RoundtripResult(
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )
    logger.info(result.summary())
    return result
