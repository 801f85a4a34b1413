"""Tests for configuration loading."""

import pytest

from geoscan.config import (
    GeoScanConfig,
    OpenAIConfig,
    ScanSettings,
    _mask_secret,
    get_config,
    reset_config,
)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GEOSCAN_BATCH_SIZE", "5")
    monkeypatch.setenv("GEOSCAN_BATCH_DELAY", "1.5")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    config = GeoScanConfig()

    assert config.scan.batch_size == 5
    assert config.scan.batch_delay == 1.5
    assert config.openai.api_key == "sk-test"
    assert config.get_status()["chatgpt"] is True


def test_default_pacing(monkeypatch):
    for name in ("GEOSCAN_BATCH_SIZE", "GEOSCAN_BATCH_DELAY", "GEOSCAN_ANSWER_MAX_CHARS"):
        monkeypatch.delenv(name, raising=False)

    settings = ScanSettings()

    assert settings.batch_size == 3
    assert settings.batch_delay == 0.5
    assert settings.answer_max_chars == 500


def test_invalid_batch_size():
    with pytest.raises(ValueError):
        ScanSettings(batch_size=0)


def test_is_configured():
    assert not OpenAIConfig(api_key="").is_configured
    assert OpenAIConfig(api_key="x").is_configured


def test_mask_secret():
    assert _mask_secret("") == "<not set>"
    assert _mask_secret("short") == "***"
    assert _mask_secret("sk-1234567890abcd") == "sk-1...abcd"


def test_config_singleton():
    reset_config()
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first
