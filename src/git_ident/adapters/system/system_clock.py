import time
from ...ports.clock import Clock

class SystemClock(Clock):
    def current_time_millis(self) -> int:
        return time.time_ns() // 1_000_000
