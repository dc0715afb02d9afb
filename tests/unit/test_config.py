# tests/unit/test_config.py
import pytest
from git_ident.config import Config, load_config
from git_ident.adapters.config_ident_source import ConfigIdentSource

_VARS = ("GIT_COMMITTER_NAME", "GIT_AUTHOR_NAME", "GIT_COMMITTER_EMAIL",
         "GIT_AUTHOR_EMAIL", "GIT_IDENT_LOG_LEVEL")

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for v in _VARS:
        monkeypatch.delenv(v, raising=False)
    monkeypatch.setattr("getpass.getuser", lambda: "jdoe")
    monkeypatch.setattr("socket.gethostname", lambda: "box.example.com")

def test_committer_env_wins(monkeypatch):
    monkeypatch.setenv("GIT_COMMITTER_NAME", "C Ommitter")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "A U Thor")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "committer@example.com")
    cfg = load_config()
    assert cfg.committer_name == "C Ommitter"
    assert cfg.committer_email == "committer@example.com"

def test_author_env_is_second_choice(monkeypatch):
    monkeypatch.setenv("GIT_AUTHOR_NAME", "A U Thor")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "author@example.com")
    cfg = load_config()
    assert (cfg.committer_name, cfg.committer_email) == ("A U Thor", "author@example.com")

def test_falls_back_to_login_and_host():
    cfg = load_config()
    assert cfg.committer_name == "jdoe"
    assert cfg.committer_email == "jdoe@box.example.com"
    assert cfg.log_level == "WARNING"

def test_empty_env_is_ignored(monkeypatch):
    monkeypatch.setenv("GIT_COMMITTER_NAME", "")
    assert load_config().committer_name == "jdoe"

def test_explicit_values_and_source():
    cfg = Config(committer_name="Jane", committer_email="jane@example.com")
    src = ConfigIdentSource(cfg)
    assert src.committer_name() == "Jane"
    assert src.committer_email() == "jane@example.com"
