# src/git_ident/adapters/zones/fixed_offset_resolver.py
import logging
import re
from datetime import timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from ...ports.zone_resolver import ZoneResolver

GMT = timezone(timedelta(0), "GMT")

# GMT, GMT+5, GMT-05, GMT+0530, GMT+05:30 (UTC prefix accepted too)
_CUSTOM_ID = re.compile(r"^(?:GMT|UTC)(?:([+-])(\d{1,2})(?::?(\d{2}))?)?$")

class FixedOffsetZoneResolver(ZoneResolver):
    """
    Custom ``GMT±HHMM`` ids become fixed-offset zones; anything else is looked
    up in the IANA database. Unknown ids resolve to GMT, with a warning.
    """
    def resolve(self, zone_id: str) -> tzinfo:
        m = _CUSTOM_ID.match(zone_id)
        if m:
            return self._fixed(zone_id, m)
        try:
            return ZoneInfo(zone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            # OSError: ids naming a tzdata directory, e.g. "America"
            logging.warning("unknown zone id %r, falling back to GMT", zone_id)
            return GMT

    def _fixed(self, zone_id: str, m: "re.Match[str]") -> tzinfo:
        sign, hh, mm = m.groups()
        if sign is None:
            return GMT
        hours, mins = int(hh), int(mm or 0)
        if hours > 23 or mins > 59:
            logging.warning("offset out of range in %r, falling back to GMT", zone_id)
            return GMT
        total = hours * 60 + mins
        if sign == "-":
            total = -total
        return timezone(timedelta(minutes=total), "GMT%s%02d:%02d" % (sign, hours, mins))
