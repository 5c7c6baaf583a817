"""
Unit tests for environment-driven settings and the NASA POWER config.
"""

import pytest

from climatrack.config.settings import AppSettings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in (
        "CLIMATRACK_API_PREFIX",
        "CLIMATRACK_CORS_ORIGINS",
        "CLIMATRACK_FALLBACK_MAX_STEPS",
        "CLIMATRACK_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.API_PREFIX == ""
    assert settings.BACKEND_CORS_ORIGINS == ["*"]
    assert settings.FALLBACK_MAX_STEPS == 3
    assert settings.LOG_DIR is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CLIMATRACK_FALLBACK_MAX_STEPS", "5")
    monkeypatch.setenv(
        "CLIMATRACK_CORS_ORIGINS", "http://localhost:3000, https://climatrack.app"
    )

    settings = get_settings()

    assert settings.FALLBACK_MAX_STEPS == 5
    assert settings.BACKEND_CORS_ORIGINS == [
        "http://localhost:3000",
        "https://climatrack.app",
    ]


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_fallback_budget_must_be_positive():
    with pytest.raises(ValueError):
        AppSettings(FALLBACK_MAX_STEPS=0)


@pytest.mark.parametrize("raw", ["0", "-2"])
def test_fallback_budget_from_environment_must_be_positive(monkeypatch, raw):
    monkeypatch.setenv("CLIMATRACK_FALLBACK_MAX_STEPS", raw)

    with pytest.raises(ValueError, match="FALLBACK_MAX_STEPS"):
        get_settings()
