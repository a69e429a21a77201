"""Millisecond durations spanning the full counter range.

timedelta cannot hold gaps beyond roughly 8.6e16 ms, while two instants can
be up to MAX_TIME apart, so durations produced by the clock are Duration
values. timedelta is accepted anywhere a duration is taken as input.
"""

from dataclasses import dataclass
from datetime import timedelta

_ONE_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True, order=True)
class Duration:
    """A non-negative span of fake time in whole milliseconds."""

    millis: int

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise TypeError(f"millis must be an int, got {type(self.millis).__name__}")
        if self.millis < 0:
            raise ValueError(f"duration must be non-negative, got {self.millis} ms")

    @staticmethod
    def from_millis(millis: int) -> "Duration":
        return Duration(millis=millis)

    @staticmethod
    def from_timedelta(delta: timedelta) -> "Duration":
        """Convert a timedelta, truncating anything below a millisecond.

        Raises:
            ValueError: If delta is negative
        """
        if delta < timedelta(0):
            raise ValueError(f"duration must be non-negative, got {delta!r}")
        return Duration(millis=delta // _ONE_MILLISECOND)

    def as_seconds(self) -> float:
        return self.millis / 1000

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta.

        Raises:
            OverflowError: If the duration is larger than timedelta.max
        """
        return timedelta(milliseconds=self.millis)


ZERO = Duration(millis=0)


def duration_to_millis(duration: "Duration | timedelta") -> int:
    """Return duration as whole milliseconds.

    Raises:
        TypeError: If duration is neither a Duration nor a timedelta
        ValueError: If duration is a negative timedelta
    """
    if isinstance(duration, Duration):
        return duration.millis
    if isinstance(duration, timedelta):
        return Duration.from_timedelta(duration).millis
    raise TypeError(f"duration must be a Duration or timedelta, got {type(duration).__name__}")
