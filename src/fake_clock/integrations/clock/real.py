"""Real clock implementation using the process monotonic clock."""

import time

from fake_clock.integrations.clock.abc import Clock


class RealClock(Clock):
    """Production implementation using time.monotonic_ns() and time.sleep()."""

    def monotonic_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000

    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds using time.sleep().

        Args:
            seconds: Number of seconds to sleep
        """
        time.sleep(seconds)
