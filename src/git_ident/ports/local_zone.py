from abc import ABC, abstractmethod

class LocalZone(ABC):
    """The caller's timezone, as minutes east of UTC at a given instant."""
    @abstractmethod
    def offset_minutes_at(self, when_ms: int) -> int: ...
