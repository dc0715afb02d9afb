# scripts/show_ident_demo.py
import argparse, time

from git_ident.adapters.fixed.fixed_clock import FixedClock, FixedLocalZone
from git_ident.adapters.system.system_local_zone import SystemLocalZone
from git_ident.adapters.zones.fixed_offset_resolver import FixedOffsetZoneResolver
from git_ident.domain.person_ident import PersonIdent
from git_ident.orchestrators.committer_ident_usecase import describe
from git_ident.presenters.json_presenter import JsonPresenter

def now_ms() -> int:
    return int(time.time() * 1000)

def main():
    p = argparse.ArgumentParser(description="Show how a person ident is encoded")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--when-ms", type=int, default=None, help="Timestamp (ms since epoch). Default=now")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--tz", type=int, default=None, help="Offset in minutes east of UTC")
    g.add_argument("--zone", default=None, help="Zone id, e.g. Europe/Berlin or GMT+0530")
    args = p.parse_args()

    when_ms = args.when_ms if args.when_ms is not None else now_ms()
    if args.tz is not None:
        local = FixedLocalZone(args.tz)
    elif args.zone:
        local = SystemLocalZone(FixedOffsetZoneResolver().resolve(args.zone))
    else:
        local = SystemLocalZone()

    ident = PersonIdent.create(args.name, args.email, FixedClock(when_ms), local)
    JsonPresenter(indent=2).render(describe(ident))

if __name__ == "__main__":
    main()
