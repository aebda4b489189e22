from __future__ import annotations

import pytest
from pydantic import ValidationError

from fluenthttp.app.config.settings import Settings
from fluenthttp.app.constants import MAX_REDIRECTIONS


def test_defaults(monkeypatch):
    for name in ("FLUENTHTTP_MAX_REDIRECTIONS", "FLUENTHTTP_USER_AGENT", "FLUENTHTTP_VERBOSE", "FLUENTHTTP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.max_redirections == MAX_REDIRECTIONS == 5
    assert settings.user_agent == ""
    assert settings.verbose is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FLUENTHTTP_MAX_REDIRECTIONS", "2")
    monkeypatch.setenv("FLUENTHTTP_USER_AGENT", "agent/1")
    monkeypatch.setenv("FLUENTHTTP_VERBOSE", "true")
    settings = Settings(_env_file=None)
    assert settings.max_redirections == 2
    assert settings.user_agent == "agent/1"
    assert settings.verbose is True


def test_negative_redirect_limit_rejected(monkeypatch):
    monkeypatch.setenv("FLUENTHTTP_MAX_REDIRECTIONS", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
