"""Global test configuration and lightweight fixtures.

This file provides a minimal 'benchmark' fixture fallback so tests that
time kernels run even when pytest-benchmark is not installed. It also
seeds RNGs so randomized sweeps are reproducible.
"""

import os
import random
from pathlib import Path
from typing import Any, Callable

import pytest


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("C99COMPLEX_TEST_SEED", "12345"))
    random.seed(seed)
    try:
        import numpy as np  # type: ignore
        np.random.seed(seed)
    except ImportError:
        pass


class _DummyBenchmark:
    """Minimal stand-in for pytest-benchmark's fixture.

    Provides a callable interface and a 'pedantic' method that simply
    executes the function without timing.
    """

    def __call__(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    def pedantic(self, func: Callable[[], Any], rounds: int = 1, *args: Any, **kwargs: Any) -> Any:
        result = None
        for _ in range(max(1, int(rounds))):
            result = func()
        return result


@pytest.fixture
def benchmark() -> _DummyBenchmark:
    """Provide a basic benchmark fixture when pytest-benchmark is absent."""
    return _DummyBenchmark()


@pytest.fixture
def rng():
    """Seeded NumPy generator for randomized sweeps."""
    import numpy as np

    return np.random.default_rng(int(os.environ.get("C99COMPLEX_TEST_SEED", "12345")))


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`; files in tests/property do
    not all carry the marker explicitly.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
