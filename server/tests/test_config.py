"""Tests for environment configuration."""

import dataclasses

import pytest

from modules.config import AppConfig, convert_to_bool, convert_to_float, convert_to_int, split_origins


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL_NAME", "GEMINI_TEMPERATURE", "PORT", "HOST",
                 "CORS_ALLOW_ORIGINS", "APP_ENV", "VERCEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    config = AppConfig.from_env()

    assert config.gemini_api_key is None
    assert config.api_key_configured is False
    assert config.gemini_model_name == "gemini-2.5-flash"
    assert config.gemini_temperature == 0.1
    assert config.port == 3000
    assert config.cors_origins == ("*",)
    assert config.serverless is False


def test_from_env_overrides(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "secret")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("GEMINI_TEMPERATURE", "0.0")
    clean_env.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    clean_env.setenv("LOG_LEVEL", "debug")

    config = AppConfig.from_env()

    assert config.api_key_configured is True
    assert config.port == 8080
    assert config.gemini_temperature == 0.0
    assert config.cors_origins == ("https://a.example", "https://b.example")
    assert config.log_level == "DEBUG"


def test_empty_key_counts_as_missing(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "")
    assert AppConfig.from_env().api_key_configured is False


@pytest.mark.parametrize("name,value", [("APP_ENV", "production"), ("VERCEL", "1")])
def test_serverless_flag(clean_env, name, value):
    clean_env.setenv(name, value)
    assert AppConfig.from_env().serverless is True


def test_config_is_immutable():
    config = AppConfig(gemini_api_key="secret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.gemini_api_key = "other"


def test_helpers():
    assert convert_to_bool(None) is None
    assert convert_to_bool(" Yes ") is True
    assert convert_to_bool("off") is False
    assert split_origins("") == ("*",)
    assert split_origins(" , ") == ("*",)


@pytest.mark.parametrize("name,value", [("PORT", "abc"), ("GEMINI_TEMPERATURE", "warm")])
def test_invalid_numbers_fall_back_to_defaults(clean_env, caplog, name, value):
    clean_env.setenv(name, value)

    config = AppConfig.from_env()

    assert config.port == 3000
    assert config.gemini_temperature == 0.1
    assert value in caplog.text


def test_numeric_converters():
    assert convert_to_int("8080") == 8080
    assert convert_to_int("8080.5") is None
    assert convert_to_float("0.25") == 0.25
    assert convert_to_float(None) is None
