# src/git_ident/services/restamp/restamp.py
from datetime import datetime, tzinfo
from ...domain.person_ident import PersonIdent
from ...domain.time_units import datetime_to_millis, offset_minutes_at

def with_offset_and_time(ident: PersonIdent, when_ms: int, tz_offset: int) -> PersonIdent:
    return PersonIdent(ident.name, ident.email, when_ms, tz_offset)

def with_time_keep_offset(ident: PersonIdent, when: datetime) -> PersonIdent:
    """New timestamp, the original's timezone offset is kept as is."""
    return PersonIdent(ident.name, ident.email, datetime_to_millis(when), ident.tz_offset)

def with_zone_at_instant(ident: PersonIdent, when: datetime, zone: tzinfo) -> PersonIdent:
    """
    Offset is what ``zone`` says at ``when`` (so a summer timestamp in
    Europe/Berlin gets +0200, a winter one +0100), not a fixed offset.
    """
    when_ms = datetime_to_millis(when)
    return PersonIdent(ident.name, ident.email, when_ms, offset_minutes_at(zone, when_ms))
