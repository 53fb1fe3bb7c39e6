"""Diagnostics for the cascade cipher: roundtrip verification and SAC.

Diagnostic only. Nothing here measures security.
"""

from .roundtrip import RoundtripResult, RoundtripFailure, run_roundtrip_tests
from .avalanche import SACResult, compute_sac
from .report import EvaluationReport

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "SACResult",
    "compute_sac",
    "EvaluationReport",
]
