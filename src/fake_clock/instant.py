"""Point-in-time values captured from a fake clock.

FakeInstant mirrors the interface of a monotonic instant type. Each instant
stores the counter value it was created at and never changes; only
comparisons against the current counter move as time is set or advanced.
"""

from dataclasses import dataclass
from datetime import timedelta

from fake_clock.config import MAX_TIME
from fake_clock.duration import ZERO, Duration, duration_to_millis
from fake_clock.state import ClockState, resolve_state, thread_state


class InstantOverflowError(OverflowError):
    """Raised when instant arithmetic leaves the representable range."""


@dataclass(frozen=True, order=True)
class FakeInstant:
    """An immutable snapshot of a fake clock counter.

    Equality, ordering and hashing follow time_created.
    """

    time_created: int

    @staticmethod
    def set_time(time: int) -> int:
        """Set the calling thread's fake time, returning the old fake time."""
        return thread_state().set_time(time)

    @staticmethod
    def advance_time(millis: int) -> int:
        """Advance the calling thread's fake time, returning the new fake time.

        Wraps modulo 2**64 on overflow.
        """
        return thread_state().advance_time(millis)

    @staticmethod
    def time() -> int:
        """Return the calling thread's fake time."""
        return thread_state().time()

    @classmethod
    def now(cls, state: ClockState | None = None) -> "FakeInstant":
        """Capture the current fake time.

        Args:
            state: Clock to read (default: the calling thread's clock)

        Returns:
            FakeInstant holding the counter value at the moment of the call
        """
        return cls(time_created=resolve_state(state).time())

    def duration_since(self, earlier: "FakeInstant") -> Duration:
        """Return the time between earlier and self.

        Returns a zero duration when earlier is actually later than self.
        Future versions may raise in that case instead.
        """
        return self.saturating_duration_since(earlier)

    def checked_duration_since(self, earlier: "FakeInstant") -> Duration | None:
        """Return the time between earlier and self, or None if earlier is later."""
        if earlier.time_created > self.time_created:
            return None
        return Duration(millis=self.time_created - earlier.time_created)

    def saturating_duration_since(self, earlier: "FakeInstant") -> Duration:
        """Return the time between earlier and self, or zero if earlier is later."""
        checked = self.checked_duration_since(earlier)
        if checked is None:
            return ZERO
        return checked

    def elapsed(self, state: ClockState | None = None) -> Duration:
        """Return the fake time passed since this instant was created.

        The difference is taken against the clock of the thread that calls
        elapsed(), not the one that created the instant. Handing an instant
        to another thread therefore measures against that thread's counter.
        Returns zero if that counter is behind the instant.

        Args:
            state: Clock to read (default: the calling thread's clock)
        """
        current = resolve_state(state).time()
        return Duration(millis=max(current - self.time_created, 0))

    def checked_add(self, duration: Duration | timedelta) -> "FakeInstant | None":
        """Return self + duration, or None if the result exceeds MAX_TIME."""
        time = self.time_created + duration_to_millis(duration)
        if time > MAX_TIME:
            return None
        return FakeInstant(time_created=time)

    def checked_sub(self, duration: Duration | timedelta) -> "FakeInstant | None":
        """Return self - duration, or None if the result would be negative."""
        time = self.time_created - duration_to_millis(duration)
        if time < 0:
            return None
        return FakeInstant(time_created=time)

    def __add__(self, other: object) -> "FakeInstant":
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise InstantOverflowError("overflow when adding duration to instant")
        return result

    __radd__ = __add__

    def __sub__(self, other: object) -> "FakeInstant | Duration":
        if isinstance(other, FakeInstant):
            return self.duration_since(other)
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise InstantOverflowError("overflow when subtracting duration from instant")
        return result
