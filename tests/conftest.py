"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from fake_clock.pytest_plugin import clock_state, fake_clock  # noqa: F401
from fake_clock.state import ClockState, bind_state


@pytest.fixture(autouse=True)
def fresh_thread_clock() -> Iterator[ClockState]:
    """Give every test a zeroed default clock on the main thread."""
    with bind_state(ClockState()) as state:
        yield state
