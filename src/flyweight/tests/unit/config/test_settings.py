# ABOUTME: Unit tests for FlyweightSettings and the cached settings accessor
# ABOUTME: Tests registry options, inheritance, and get_settings caching

import pytest
from pydantic import ValidationError

from flyweight.config._base import BaseFlyweightSettings
from flyweight.config.settings import FlyweightSettings, get_settings


class TestFlyweightSettings:
    """Test suite for FlyweightSettings."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_inherits_base_settings(self):
        settings = FlyweightSettings()

        assert isinstance(settings, BaseFlyweightSettings)
        assert settings.APP_NAME == "FlyweightRegistry"

    @pytest.mark.unit
    @pytest.mark.config
    def test_registry_defaults(self):
        settings = FlyweightSettings()

        assert settings.REGISTRY_STRIP_KEYS is False
        assert settings.REGISTRY_MAX_KEY_LENGTH == 256

    @pytest.mark.unit
    @pytest.mark.config
    @pytest.mark.parametrize("bad_length", [0, -5])
    def test_max_key_length_must_be_positive(self, bad_length):
        with pytest.raises(ValidationError):
            FlyweightSettings(REGISTRY_MAX_KEY_LENGTH=bad_length)

    @pytest.mark.unit
    @pytest.mark.config
    def test_registry_options_from_environment(self, monkeypatch):
        monkeypatch.setenv("REGISTRY_STRIP_KEYS", "1")
        monkeypatch.setenv("registry_max_key_length", "32")

        settings = FlyweightSettings()

        assert settings.REGISTRY_STRIP_KEYS is True
        assert settings.REGISTRY_MAX_KEY_LENGTH == 32


class TestGetSettings:
    """Test the cached accessor."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    @pytest.mark.unit
    @pytest.mark.config
    def test_cache_clear_rereads_environment(self, monkeypatch):
        first = get_settings()

        monkeypatch.setenv("REGISTRY_MAX_KEY_LENGTH", "7")
        assert get_settings().REGISTRY_MAX_KEY_LENGTH == first.REGISTRY_MAX_KEY_LENGTH

        get_settings.cache_clear()
        assert get_settings().REGISTRY_MAX_KEY_LENGTH == 7
