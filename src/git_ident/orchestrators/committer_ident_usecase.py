from typing import Any, Dict
from ..domain.person_ident import PersonIdent
from ..ports.clock import Clock
from ..ports.config_source import ConfigSource
from ..ports.local_zone import LocalZone
from ..services.encoding.ident_encoder import format_timezone

def default_committer(source: ConfigSource, clock: Clock, local_zone: LocalZone) -> PersonIdent:
    return PersonIdent.from_config(source, clock, local_zone)

def _iso_when(ident: PersonIdent) -> str:
    try:
        return ident.when.isoformat()
    except OverflowError:
        return "%d ms" % ident.when_ms

def describe(ident: PersonIdent) -> Dict[str, Any]:
    return {
        "name": ident.name,
        "email": ident.email,
        "when_ms": ident.when_ms,
        "when": _iso_when(ident),
        "tz_offset": ident.tz_offset,
        "tz": format_timezone(ident.tz_offset),
        "external": ident.to_external_string(),
        "debug": repr(ident),
    }

def run(source: ConfigSource, clock: Clock, local_zone: LocalZone) -> Dict[str, Any]:
    return describe(default_committer(source, clock, local_zone))
