import pytest

from keybench.config import Settings
from keybench.runner import BenchmarkRunner

# Every test gets a clean KEYBENCH_* environment, and runners small enough
# that the whole suite stays fast.

_ENV_VARS = ("KEYBENCH_ITERATIONS", "KEYBENCH_REPEAT", "KEYBENCH_WARMUP", "KEYBENCH_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_keybench_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings():
    return Settings(iterations=1000, repeat=1, warmup=10)


@pytest.fixture
def runner(settings):
    return BenchmarkRunner(settings)


class CountingLookup:
    """Zero-argument lookup stub that counts its calls."""

    def __init__(self, table=None, key=None):
        self.table = table
        self.key = key
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.table is not None:
            return self.table[self.key]


@pytest.fixture
def counting_lookup():
    return CountingLookup()
