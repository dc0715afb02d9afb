# src/git_ident/adapters/system/system_local_zone.py
from datetime import tzinfo
from typing import Optional
from ...domain.time_units import millis_to_datetime, offset_minutes_at
from ...ports.local_zone import LocalZone

class SystemLocalZone(LocalZone):
    """
    Offset of the process' local timezone (TZ / /etc/localtime) at the given
    instant, so DST applies per timestamp. A zone can be pinned explicitly.
    """
    def __init__(self, zone: Optional[tzinfo] = None):
        self._zone = zone

    def offset_minutes_at(self, when_ms: int) -> int:
        if self._zone is not None:
            return offset_minutes_at(self._zone, when_ms)
        local = millis_to_datetime(when_ms).astimezone()
        return offset_minutes_at(local.tzinfo, when_ms)
