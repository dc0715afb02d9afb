# src/git_ident/domain/time_units.py
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (``//`` floors for negatives)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

def millis_to_seconds(when_ms: int) -> int:
    return trunc_div(when_ms, 1000)

def millis_to_datetime(when_ms: int, tz: Optional[tzinfo] = None) -> datetime:
    dt = EPOCH + timedelta(milliseconds=when_ms)
    return dt.astimezone(tz) if tz is not None else dt

def datetime_to_millis(when: datetime) -> int:
    # naive values are local wall time, like datetime.timestamp()
    if when.tzinfo is None:
        when = when.astimezone()
    return (when - EPOCH) // _ONE_MS

def offset_minutes_at(zone: tzinfo, when_ms: int) -> int:
    """UTC offset of ``zone`` at the given instant, in whole minutes."""
    off = millis_to_datetime(when_ms, zone).utcoffset()
    if off is None:
        return 0
    return trunc_div(off // _ONE_MS, 60 * 1000)
