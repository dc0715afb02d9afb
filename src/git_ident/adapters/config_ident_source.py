from ..config import Config
from ..ports.config_source import ConfigSource

class ConfigIdentSource(ConfigSource):
    def __init__(self, cfg: Config):
        self._cfg = cfg

    def committer_name(self) -> str:
        return self._cfg.committer_name

    def committer_email(self) -> str:
        return self._cfg.committer_email
