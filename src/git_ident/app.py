import logging
import sys
from .config import load_config
from .adapters.config_ident_source import ConfigIdentSource
from .adapters.system.system_clock import SystemClock
from .adapters.system.system_local_zone import SystemLocalZone
from .domain.person_ident import PersonIdent
from .orchestrators.committer_ident_usecase import default_committer, run
from .presenters.json_presenter import JsonPresenter

def build_default_ident(cfg=None) -> PersonIdent:
    cfg = cfg or load_config()
    return default_committer(ConfigIdentSource(cfg), SystemClock(), SystemLocalZone())

def main(argv=None) -> int:
    """
    Print the committer ident line, e.g.
      Jane Doe <jane@example.com> 1257600000 +0200
    ``--json`` prints all fields instead.
    """
    argv = sys.argv[1:] if argv is None else argv
    cfg = load_config()
    level = getattr(logging, cfg.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level)
    if "--json" in argv:
        JsonPresenter(indent=2).render(
            run(ConfigIdentSource(cfg), SystemClock(), SystemLocalZone()))
    else:
        print(build_default_ident(cfg).to_external_string())
    return 0

if __name__ == "__main__":
    sys.exit(main())
