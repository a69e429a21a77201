"""A virtual monotonic clock giving tests full control over the flow of time."""

from fake_clock.config import MAX_TIME, ClockConfig
from fake_clock.duration import Duration
from fake_clock.instant import FakeInstant, InstantOverflowError
from fake_clock.integrations.clock import Clock, FakeClock, RealClock
from fake_clock.state import ClockState, bind_state, thread_state

__version__ = "0.1.0"


def set_time(time: int) -> int:
    """Set the calling thread's fake time, returning the old fake time."""
    return FakeInstant.set_time(time)


def advance_time(millis: int) -> int:
    """Advance the calling thread's fake time, returning the new fake time."""
    return FakeInstant.advance_time(millis)


def current_time() -> int:
    """Return the calling thread's fake time."""
    return FakeInstant.time()


def now() -> FakeInstant:
    """Capture the calling thread's fake time."""
    return FakeInstant.now()


__all__ = [
    # Instants
    "FakeInstant",
    "Duration",
    "InstantOverflowError",
    "MAX_TIME",
    # Thread-level controls
    "set_time",
    "advance_time",
    "current_time",
    "now",
    # Clock state handles
    "ClockState",
    "bind_state",
    "thread_state",
    # Clock Interface
    "Clock",
    "FakeClock",
    "RealClock",
    # Configuration
    "ClockConfig",
]
