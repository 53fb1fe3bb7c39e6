"""Evaluation report: one seeded run of the roundtrip and SAC diagnostics.

Diagnostic only. Nothing here measures security.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from .avalanche import SACResult
from .roundtrip import RoundtripResult


def _utc_stamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


@dataclass
class EvaluationReport:
    seed: int
    roundtrip: RoundtripResult
    sac_results: List[SACResult] = field(default_factory=list)
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = _utc_stamp()

    @property
    def is_perfect(self) -> bool:
        return self.roundtrip.is_perfect

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "timestamp": self.timestamp,
            "roundtrip": self.roundtrip.to_dict(),
            "sac": [s.to_dict() for s in self.sac_results],
        }

    def to_summary(self) -> str:
        lines = [f"Evaluation report {self.timestamp} (seed={self.seed})", self.roundtrip.summary()]
        lines.extend(s.summary() for s in self.sac_results)
        return "\n".join(lines)

    def save(self, runs_dir: str | Path, name: Optional[str] = None) -> Path:
        """Write the report as JSON under ``runs_dir`` and return its path."""
        path = Path(runs_dir) / (name or f"{self.timestamp}_evaluation.json")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, sort_keys=True), encoding="utf-8")
        return path
