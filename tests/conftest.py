import threading
import time

import pytest

from core.errors import FetchFailure
from core.types import Candidate


class FixedCoin:
    """Stand-in rng whose random() always returns the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


class FixedOrderStrategy:
    """Returns candidates in a predetermined id order."""

    def __init__(self, name, order):
        self.name = name
        self.order = list(order)
        self.calls = 0

    def rank(self, candidates):
        self.calls += 1
        by_id = {c.id: c for c in candidates}
        return [by_id[i] for i in self.order if i in by_id]


class StaticSource:
    def __init__(self, candidates, delay=0.0):
        self.candidates = list(candidates)
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def fetch(self, filters):
        with self._lock:
            self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        return list(self.candidates)


class FlakySource:
    """Fails the first ``failures`` fetches, then serves candidates."""

    def __init__(self, candidates, failures=1):
        self.candidates = list(candidates)
        self.failures = failures
        self.calls = 0

    def fetch(self, filters):
        self.calls += 1
        if self.calls <= self.failures:
            raise FetchFailure("backend unavailable")
        return list(self.candidates)


def build_candidates(n, companies=None):
    return [
        Candidate(
            id=i + 1,
            title=f"Posting {i + 1}",
            company=companies[i] if companies else f"Company {i // 5 + 1}",
            score=float((i * 37) % 100),
        )
        for i in range(n)
    ]


@pytest.fixture
def make_candidates():
    return build_candidates


@pytest.fixture
def coin():
    return FixedCoin


@pytest.fixture
def fixed_order():
    return FixedOrderStrategy


@pytest.fixture
def static_source():
    return StaticSource


@pytest.fixture
def flaky_source():
    return FlakySource
