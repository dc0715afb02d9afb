# src/git_ident/services/encoding/ident_encoder.py
"""
Canonical text form of a person identity, as written into commit and tag
headers:

    A U Thor <author@example.com> 1142878449 -0500

Only produces text, never parses it.
"""
from datetime import tzinfo
from typing import Optional
from ...domain.time_units import millis_to_seconds
from ...ports.zone_resolver import ZoneResolver

_CRUD = frozenset("\n<>")

def sanitize(text: str) -> str:
    """
    Trim every char <= U+0020 from both ends (not Unicode whitespace), then
    drop ``\\n``, ``<`` and ``>`` so the value cannot break out of the
    ``<email>`` delimiters or split the header line.
    """
    start, end = 0, len(text)
    while start < end and text[start] <= " ":
        start += 1
    while end > start and text[end - 1] <= " ":
        end -= 1
    return "".join(c for c in text[start:end] if c not in _CRUD)

def format_timezone(offset: int) -> str:
    """Minutes east of UTC -> ``+HHMM`` / ``-HHMM``."""
    if offset < 0:
        sign = "-"
        offset = -offset
    else:
        sign = "+"
    hours, mins = offset // 60, offset % 60
    return f"{sign}{hours:02d}{mins:02d}"

def timezone_object(offset: int, resolver: Optional[ZoneResolver] = None) -> tzinfo:
    if resolver is None:
        from ...adapters.zones.fixed_offset_resolver import FixedOffsetZoneResolver
        resolver = FixedOffsetZoneResolver()
    return resolver.resolve("GMT" + format_timezone(offset))

def to_external_string(ident) -> str:
    return "%s <%s> %d %s" % (
        sanitize(ident.name),
        sanitize(ident.email),
        millis_to_seconds(ident.when_ms),
        format_timezone(ident.tz_offset),
    )
