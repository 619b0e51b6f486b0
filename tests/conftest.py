"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from unit_outcome import Outcome


@dataclass
class CountingCallback:
    """Zero-argument callback that records how often it ran."""

    returns: Outcome
    calls: int = 0

    def __call__(self) -> Outcome:
        self.calls += 1
        return self.returns


@pytest.fixture
def returns_success() -> CountingCallback:
    return CountingCallback(Outcome.SUCCESS)


@pytest.fixture
def returns_failure() -> CountingCallback:
    return CountingCallback(Outcome.FAILURE)
