import pytest
from pydantic import ValidationError

from config import Settings


def test_missing_api_key_fails(monkeypatch):
    monkeypatch.delenv("TMDB_API_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_api_key_fails(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "   ")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_environment_defaults_to_production(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "key")
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    s = Settings(_env_file=None)
    assert s.ENVIRONMENT == "Production"
    assert s.is_development is False
    assert s.TMDB_TIMEOUT_SECONDS == 10.0


def test_development_environment(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "key")
    monkeypatch.setenv("ENVIRONMENT", "Development")

    assert Settings(_env_file=None).is_development is True


def test_settings_are_immutable(monkeypatch):
    monkeypatch.setenv("TMDB_API_KEY", "key")
    s = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        s.TMDB_API_KEY = "other"
