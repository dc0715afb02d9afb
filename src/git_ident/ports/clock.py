from abc import ABC, abstractmethod

class Clock(ABC):
    """Source of the current time."""
    @abstractmethod
    def current_time_millis(self) -> int: ...
