"""Monotonic clock abstraction for testing.

This module provides an ABC for monotonic time reads and sleeps so code can
depend on a clock and tests can substitute one that never blocks.
"""

from abc import ABC, abstractmethod


class Clock(ABC):
    """Abstract monotonic clock for dependency injection."""

    @abstractmethod
    def monotonic_ms(self) -> int:
        """Return the current monotonic time in whole milliseconds.

        Only differences between two readings are meaningful.
        """
        ...

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...
