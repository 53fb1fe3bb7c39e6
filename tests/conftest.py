import pytest

from fakersa.config import load_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in (
        "FAKERSA_KEY_RING",
        "FAKERSA_LOG_LEVEL",
        "GLOBAL_SEED",
        "FAKERSA_SAC_TRIALS",
        "FAKERSA_ROUNDTRIP_VECTORS",
        "FAKERSA_RUNS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
