# src/git_ident/ports/config_source.py
from abc import ABC, abstractmethod

class ConfigSource(ABC):
    """Where the default committer identity comes from (user config, env...)."""
    @abstractmethod
    def committer_name(self) -> str: ...
    @abstractmethod
    def committer_email(self) -> str: ...
