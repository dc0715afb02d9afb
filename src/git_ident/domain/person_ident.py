# src/git_ident/domain/person_ident.py
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional
from ..errors import InvalidArgumentError
from ..ports.clock import Clock
from ..ports.config_source import ConfigSource
from ..ports.local_zone import LocalZone
from ..ports.zone_resolver import ZoneResolver
from ..services.encoding.ident_encoder import timezone_object, to_external_string
from .time_units import (
    datetime_to_millis, millis_to_datetime, millis_to_seconds, offset_minutes_at,
)

@dataclass(frozen=True, eq=False, repr=False)
class PersonIdent:
    """
    Who wrote or committed something: name + email + time + timezone.

    Name and email are kept exactly as given (whitespace and all); they are
    only cleaned up by to_external_string(), so the external form of two
    different idents may be identical.
    """
    name: str
    email: str
    when_ms: int
    tz_offset: int          # minutes east of UTC, negative to the west

    def __post_init__(self):
        if self.name is None:
            raise InvalidArgumentError("name of PersonIdent must not be null")
        if self.email is None:
            raise InvalidArgumentError("email address of PersonIdent must not be null")

    # ---------- constructors ----------
    @classmethod
    def create(cls, name: str, email: str, clock: Clock, local_zone: LocalZone) -> "PersonIdent":
        """New ident stamped with the clock's current time and the local offset at that time."""
        when_ms = clock.current_time_millis()
        return cls(name, email, when_ms, local_zone.offset_minutes_at(when_ms))

    @classmethod
    def from_config(cls, source: ConfigSource, clock: Clock, local_zone: LocalZone) -> "PersonIdent":
        return cls.create(source.committer_name(), source.committer_email(), clock, local_zone)

    @classmethod
    def from_datetime(cls, name: str, email: str, when: datetime, zone: tzinfo) -> "PersonIdent":
        when_ms = datetime_to_millis(when)
        return cls(name, email, when_ms, offset_minutes_at(zone, when_ms))

    @classmethod
    def copy_now(cls, ident: "PersonIdent", clock: Clock, local_zone: LocalZone) -> "PersonIdent":
        """Same person, stamped now."""
        return cls.create(ident.name, ident.email, clock, local_zone)

    # ---------- accessors ----------
    @property
    def when(self) -> datetime:
        """Aware UTC datetime; raises OverflowError outside datetime's year range."""
        return millis_to_datetime(self.when_ms)

    @property
    def time_zone(self) -> tzinfo:
        return timezone_object(self.tz_offset)

    def resolve_time_zone(self, resolver: Optional[ZoneResolver]) -> tzinfo:
        return timezone_object(self.tz_offset, resolver)

    def to_external_string(self) -> str:
        return to_external_string(self)

    # ---------- value semantics ----------
    def __eq__(self, other):
        if not isinstance(other, PersonIdent):
            return NotImplemented
        return (self.name == other.name
                and self.email == other.email
                and millis_to_seconds(self.when_ms) == millis_to_seconds(other.when_ms))

    def __hash__(self):
        return hash((self.email, self.name, millis_to_seconds(self.when_ms)))

    def __repr__(self):
        return "PersonIdent[%s, %s, %s]" % (self.name, self.email, self._debug_date())

    def _debug_date(self) -> str:
        try:
            dt = millis_to_datetime(self.when_ms, self.time_zone)
        except OverflowError:
            # outside datetime's year range
            return "%d ms" % self.when_ms
        return "%s %d %s" % (dt.strftime("%a %b"), dt.day, dt.strftime("%H:%M:%S %Y %z"))
