import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_lists_accept_comma_separated_environment_values(monkeypatch):
    monkeypatch.setenv("ALLOWED_HOSTS", "api.example.com, localhost ,")
    monkeypatch.setenv("CORS_ORIGINS", "https://app.example.com")

    settings = Settings()

    assert settings.ALLOWED_HOSTS == ["api.example.com", "localhost"]
    assert settings.CORS_ORIGINS == ["https://app.example.com"]


def test_bcrypt_rounds_are_bounded(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "3")
    with pytest.raises(ValidationError):
        Settings()
