"""Tests for settings and version handling."""

import pytest
from pydantic import ValidationError

from compositor.config import BASE_VERSION, CompositorSettings, get_version
from compositor.core.types import DescriptionOrder
from compositor.state import VerbosityPreferences


class TestVersion:
    """Test build metadata in the version string."""

    def test_main_branch(self, monkeypatch):
        monkeypatch.setenv("GIT_BRANCH", "main")
        monkeypatch.setenv("GIT_SHA", "abc123")
        assert get_version() == BASE_VERSION

    def test_feature_branch_with_sha(self, monkeypatch):
        monkeypatch.setenv("GIT_BRANCH", "dev")
        monkeypatch.setenv("GIT_SHA", "abc123")
        assert get_version() == f"{BASE_VERSION}-dev+abc123"

    def test_feature_branch_without_sha(self, monkeypatch):
        monkeypatch.setenv("GIT_BRANCH", "dev")
        monkeypatch.delenv("GIT_SHA", raising=False)
        assert get_version() == f"{BASE_VERSION}-dev"

    def test_no_branch(self, monkeypatch):
        monkeypatch.delenv("GIT_BRANCH", raising=False)
        assert get_version() == BASE_VERSION

    def test_package_metadata(self):
        """Only the metadata the package exports is defined."""
        import compositor
        from compositor import config

        assert compositor.APP_NAME == "Compositor"
        assert compositor.VERSION == config.VERSION
        assert not hasattr(config, "APP_DESCRIPTION")


class TestCompositorSettings:
    """Test settings validation and environment loading."""

    def test_defaults(self):
        settings = CompositorSettings()
        assert settings.speech_rate == 1.0
        assert settings.speak_passwords is True
        assert settings.flag_max_age is None
        assert settings.verbosity.speak_roles is True

    def test_speech_rate_bounds(self):
        with pytest.raises(ValidationError):
            CompositorSettings(speech_rate=0)
        with pytest.raises(ValidationError):
            CompositorSettings(speech_rate=11)

    def test_negative_flag_max_age(self):
        with pytest.raises(ValidationError):
            CompositorSettings(flag_max_age=-1)

    def test_log_level_pattern(self):
        with pytest.raises(ValidationError):
            CompositorSettings(log_level="LOUD")

    def test_from_env(self):
        """COMPOSITOR_* variables map onto settings, VERBOSITY_ onto the nested model."""
        settings = CompositorSettings.from_env({
            "COMPOSITOR_SPEECH_RATE": "1.5",
            "COMPOSITOR_USE_SINGLE_TAP": "true",
            "COMPOSITOR_FLAG_MAX_AGE": "0.5",
            "COMPOSITOR_LOG_LEVEL": "debug",
            "COMPOSITOR_VERBOSITY_SAY_CAPITAL": "true",
            "COMPOSITOR_VERBOSITY_NOT_A_FIELD": "x",
            "OTHER_SPEECH_RATE": "9",
        })

        assert settings.speech_rate == 1.5
        assert settings.use_single_tap is True
        assert settings.flag_max_age == 0.5
        assert settings.log_level == "DEBUG"
        assert settings.verbosity.say_capital is True

    def test_from_env_description_order(self):
        settings = CompositorSettings.from_env({"COMPOSITOR_VERBOSITY_DESCRIPTION_ORDER": "2"})
        assert settings.verbosity.description_order == DescriptionOrder.NAME_ROLE_STATE_POSITION

    def test_from_env_invalid(self):
        with pytest.raises(ValidationError):
            CompositorSettings.from_env({"COMPOSITOR_SPEECH_RATE": "fast"})

    def test_preferences_from_settings(self):
        settings = CompositorSettings.from_env({"COMPOSITOR_VERBOSITY_SPEAK_ROLES": "false"})

        preferences = VerbosityPreferences.from_settings(settings.verbosity)

        assert preferences.speak_roles is False
        assert preferences.speak_collection_info is True
