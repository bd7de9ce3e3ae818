"""Settings parsing and validation."""

import pytest
from pydantic import ValidationError

from notes_api.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.host == "0.0.0.0"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert Settings(_env_file=None).port == 8080


def test_log_level_is_normalized():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="verbose")


def test_port_out_of_range_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, port=70000)


def test_cors_origins_list():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
