from ...ports.clock import Clock
from ...ports.local_zone import LocalZone

class FixedClock(Clock):
    """Always reports the same instant."""
    def __init__(self, when_ms: int):
        self.when_ms = when_ms

    def current_time_millis(self) -> int:
        return self.when_ms

class FixedLocalZone(LocalZone):
    def __init__(self, tz_offset: int):
        self.tz_offset = tz_offset

    def offset_minutes_at(self, when_ms: int) -> int:
        return self.tz_offset
