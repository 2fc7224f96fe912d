import pytest

import config
from config import _setting


def test_env_value_coerced_to_default_type(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com")

    assert _setting("HTTP_TIMEOUT_SECONDS", 30.0) == 12.5
    assert _setting("API_PORT", 8000) == 9000
    assert _setting("CORS_ORIGINS", ["*"]) == ["https://a.example.com", "https://b.example.com"]


@pytest.mark.parametrize("value,expected", [("true", True), ("On", True), ("0", False), ("no", False)])
def test_env_boolean(monkeypatch, value, expected):
    monkeypatch.setenv("DEV_LOGIN_ENABLED", value)

    assert _setting("DEV_LOGIN_ENABLED", False) is expected


def test_bad_integer_names_the_setting(monkeypatch):
    monkeypatch.setenv("API_PORT", "eighty")

    with pytest.raises(ValueError, match="Setting API_PORT expects int, got 'eighty'"):
        _setting("API_PORT", 8000)


def test_bad_float_names_the_setting(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "30s")

    with pytest.raises(ValueError, match="Setting HTTP_TIMEOUT_SECONDS expects float"):
        _setting("HTTP_TIMEOUT_SECONDS", 30.0)


def test_bad_boolean_names_the_setting(monkeypatch):
    monkeypatch.setenv("DEV_LOGIN_ENABLED", "maybe")

    with pytest.raises(ValueError, match="Setting DEV_LOGIN_ENABLED expects a boolean"):
        _setting("DEV_LOGIN_ENABLED", False)


def test_yaml_value_wins_over_env(monkeypatch):
    monkeypatch.setitem(config.data, "API_PORT", 7000)
    monkeypatch.setenv("API_PORT", "eighty")

    assert _setting("API_PORT", 8000) == 7000
