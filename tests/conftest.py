# tests/conftest.py
import pytest

_ENV_KEYS = (
    "HUMANESORT_NUMERIC_BITS",
    "HUMANESORT_REVERSE",
    "HUMANESORT_UNIQUE",
    "HUMANESORT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # Env overrides from the developer's shell must not leak into tests.
    for k in _ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
