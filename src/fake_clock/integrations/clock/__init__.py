from fake_clock.integrations.clock.abc import Clock
from fake_clock.integrations.clock.fake import FakeClock
from fake_clock.integrations.clock.real import RealClock

__all__ = [
    "Clock",
    "FakeClock",
    "RealClock",
]
