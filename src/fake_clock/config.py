"""Configuration loaded from environment variables."""

import os
from dataclasses import dataclass

# Largest value a counter can hold (unsigned 64-bit milliseconds).
MAX_TIME = 2**64 - 1

_TRUTHY = frozenset({"1", "true", "yes"})


def is_debug_enabled() -> bool:
    """Check whether FAKE_CLOCK_DEBUG requests debug logging."""
    return os.environ.get("FAKE_CLOCK_DEBUG", "").strip().lower() in _TRUTHY


def validate_time(value: int, name: str) -> int:
    """Ensure value is an integer millisecond count a counter can hold.

    Args:
        value: Candidate counter value or delta
        name: Argument name used in error messages

    Returns:
        The value unchanged

    Raises:
        TypeError: If value is not an int (bool is rejected too)
        ValueError: If value is outside 0..MAX_TIME
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > MAX_TIME:
        raise ValueError(f"{name} must be between 0 and {MAX_TIME}, got {value}")
    return value


@dataclass(frozen=True)
class ClockConfig:
    """Clock configuration loaded from environment variables."""

    start_ms: int

    @staticmethod
    def from_env() -> "ClockConfig":
        """Load configuration from environment variables.

        Raises:
            ValueError: If FAKE_CLOCK_START_MS is not a valid counter value
        """
        raw_start = os.environ.get("FAKE_CLOCK_START_MS", "0").strip()
        try:
            start_ms = int(raw_start)
        except ValueError:
            raise ValueError(
                f"FAKE_CLOCK_START_MS must be an integer number of milliseconds, got {raw_start!r}"
            ) from None

        return ClockConfig(
            start_ms=validate_time(start_ms, "FAKE_CLOCK_START_MS"),
        )
