from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    # Key ring the login page hard-codes for its form submission
    key_ring: List[str] = Field(default_factory=lambda: ["1", "2", "3"])

    log_level: str = Field(default="WARNING")

    # Evaluation
    global_seed: int = Field(default=1337)
    sac_trials: int = Field(default=64, ge=1, le=10_000)
    roundtrip_vectors: int = Field(default=200, ge=1, le=100_000)

    # Paths
    runs_dir: str = Field(default="runs")

    @field_validator("key_ring")
    @classmethod
    def _non_empty_ring(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("key_ring must contain at least one key")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level


def parse_key_ring(raw: str) -> List[str]:
    return [k for k in raw.split(",") if k]


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        key_ring=parse_key_ring(os.getenv("FAKERSA_KEY_RING", "1,2,3")),
        log_level=os.getenv("FAKERSA_LOG_LEVEL", "WARNING"),
        global_seed=os.getenv("GLOBAL_SEED", "1337"),
        sac_trials=os.getenv("FAKERSA_SAC_TRIALS", "64"),
        roundtrip_vectors=os.getenv("FAKERSA_ROUNDTRIP_VECTORS", "200"),
        runs_dir=os.getenv("FAKERSA_RUNS_DIR", "runs"),
    )
