"""Mutable clock counters and the per-thread default.

Each thread lazily gets its own ClockState starting at zero. Explicit
ClockState handles can be created and passed around, or installed as the
calling thread's default with bind_state().
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from fake_clock.config import MAX_TIME, is_debug_enabled, validate_time

logger = logging.getLogger(__name__)

# Enable debug logging if FAKE_CLOCK_DEBUG environment variable is set
if is_debug_enabled():
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


class ClockState:
    """A millisecond counter representing "now" for one test context.

    The counter only moves when set_time() or advance_time() is called.
    """

    def __init__(self, start: int = 0) -> None:
        """Create a counter.

        Args:
            start: Initial value in milliseconds (default 0)
        """
        self._time = validate_time(start, "start")

    def __repr__(self) -> str:
        return f"ClockState(time={self._time})"

    def time(self) -> int:
        """Return the current counter value."""
        return self._time

    def set_time(self, value: int) -> int:
        """Overwrite the counter.

        Args:
            value: New counter value in milliseconds

        Returns:
            The previous counter value
        """
        validate_time(value, "value")
        previous = self._time
        self._time = value
        logger.debug("set_time: %d -> %d", previous, value)
        return previous

    def advance_time(self, delta: int) -> int:
        """Move the counter forward by delta milliseconds.

        Overflow wraps modulo 2**64 without raising.

        Args:
            delta: Milliseconds to add

        Returns:
            The new counter value
        """
        validate_time(delta, "delta")
        new_time = (self._time + delta) & MAX_TIME
        if new_time < self._time:
            logger.debug("advance_time: counter wrapped past %d", MAX_TIME)
        logger.debug("advance_time: %d + %d -> %d", self._time, delta, new_time)
        self._time = new_time
        return new_time


class _ThreadStates(threading.local):
    def __init__(self) -> None:
        self.state = ClockState()


_thread_states = _ThreadStates()


def thread_state() -> ClockState:
    """Return the calling thread's default ClockState."""
    return _thread_states.state


def resolve_state(state: ClockState | None) -> ClockState:
    """Return state, or the calling thread's default when state is None."""
    if state is None:
        return _thread_states.state
    return state


@contextmanager
def bind_state(state: ClockState) -> Iterator[ClockState]:
    """Install state as the calling thread's default inside a with block.

    The previously bound state is restored on exit, including when the body
    raises. Only the calling thread is affected.

    Example:
        >>> from fake_clock.instant import FakeInstant
        >>> state = ClockState(start=1_000)
        >>> with bind_state(state):
        ...     FakeInstant.now()
        FakeInstant(time_created=1000)
    """
    previous = _thread_states.state
    _thread_states.state = state
    logger.debug("bind_state: %r on thread %s", state, threading.current_thread().name)
    try:
        yield state
    finally:
        _thread_states.state = previous
