# src/git_ident/config.py
import getpass
import logging
import os
import socket
from pydantic import BaseModel, Field

def _env_first(*names: str):
    for n in names:
        v = os.getenv(n)
        if v:
            return v
    return None

def _default_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        # no passwd entry and no LOGNAME/USER (containers)
        return "unknown"

def _default_name() -> str:
    name = _env_first("GIT_COMMITTER_NAME", "GIT_AUTHOR_NAME")
    if name is None:
        name = _default_user()
        logging.debug("committer name not configured, using login name %r", name)
    return name

def _default_email() -> str:
    email = _env_first("GIT_COMMITTER_EMAIL", "GIT_AUTHOR_EMAIL")
    if email is None:
        email = "%s@%s" % (_default_user(), socket.gethostname())
        logging.debug("committer email not configured, using %r", email)
    return email

class Config(BaseModel):
    committer_name: str = Field(default_factory=_default_name)
    committer_email: str = Field(default_factory=_default_email)
    log_level: str = Field(default_factory=lambda: os.getenv("GIT_IDENT_LOG_LEVEL", "WARNING"))

def load_config() -> Config:
    return Config()
