"""Fake Clock implementation for testing.

FakeClock reads a ClockState instead of the system clock. sleep() records the
call and advances the state rather than blocking, enabling fast tests.
"""

import math

from fake_clock.config import MAX_TIME
from fake_clock.instant import FakeInstant
from fake_clock.integrations.clock.abc import Clock
from fake_clock.state import ClockState


class FakeClock(Clock):
    """In-memory fake implementation backed by a ClockState.

    Time only moves when sleep() is called or the underlying state is set or
    advanced directly.
    """

    def __init__(self, state: ClockState | None = None) -> None:
        """Create FakeClock over the given state.

        Args:
            state: Counter to read and advance (default: a new one at zero)
        """
        self._state = state if state is not None else ClockState()
        self._sleep_calls: list[float] = []

    @property
    def state(self) -> ClockState:
        """The ClockState this clock reads and advances."""
        return self._state

    @property
    def sleep_calls(self) -> list[float]:
        """Get the list of sleep() calls that were made.

        Returns list of seconds values passed to sleep().

        This property is for test assertions only.
        """
        return self._sleep_calls

    def monotonic_ms(self) -> int:
        return self._state.time()

    def now(self) -> FakeInstant:
        """Capture the current fake time of this clock."""
        return FakeInstant.now(self._state)

    def sleep(self, seconds: float) -> None:
        """Track sleep call and advance fake time without actually sleeping.

        Args:
            seconds: Number of seconds that would have been slept

        Raises:
            ValueError: If seconds is negative, not finite, or advances time
                past MAX_TIME
        """
        if not math.isfinite(seconds) or seconds < 0:
            raise ValueError(f"sleep length must be a finite non-negative number, got {seconds}")
        millis = int(seconds * 1000)
        if millis > MAX_TIME:
            raise ValueError(f"sleep length must be at most {MAX_TIME} ms, got {millis} ms")
        self._state.advance_time(millis)
        self._sleep_calls.append(seconds)
