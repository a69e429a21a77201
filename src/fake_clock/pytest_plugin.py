"""pytest fixtures providing isolated fake clocks.

Registered through the pytest11 entry point, so installing the package makes
the fixtures available to every test session.
"""

from collections.abc import Iterator

import pytest

from fake_clock.config import ClockConfig
from fake_clock.integrations.clock.fake import FakeClock
from fake_clock.state import ClockState, bind_state


@pytest.fixture
def clock_state() -> Iterator[ClockState]:
    """Create a fresh ClockState bound as the calling thread's default.

    Starts at FAKE_CLOCK_START_MS (default 0). The previous default is
    restored after the test.
    """
    config = ClockConfig.from_env()
    with bind_state(ClockState(start=config.start_ms)) as state:
        yield state


@pytest.fixture
def fake_clock(clock_state: ClockState) -> FakeClock:
    """Create a FakeClock over the test's clock_state."""
    return FakeClock(clock_state)
