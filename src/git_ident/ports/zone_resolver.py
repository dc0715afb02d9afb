from abc import ABC, abstractmethod
from datetime import tzinfo

class ZoneResolver(ABC):
    @abstractmethod
    def resolve(self, zone_id: str) -> tzinfo: ...
