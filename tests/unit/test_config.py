"""
Unit tests for environment-driven settings.
"""
import pytest
from pydantic import ValidationError

from practice_scheduler.config import Settings, get_settings
from practice_scheduler.models import BreakType


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.min_session_duration_ms == 600_000
        assert settings.max_session_duration_ms == 900_000
        assert settings.break_duration_ms == 75_000
        assert settings.random_seed is None
        assert settings.questions_per_skill == 3

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PRACTICE_BREAK_DURATION_MS", "90000")
        monkeypatch.setenv("PRACTICE_ENABLE_GAZE_SHIFT", "false")
        monkeypatch.setenv("PRACTICE_RANDOM_SEED", "42")

        settings = get_settings()
        assert settings.break_duration_ms == 90_000
        assert settings.enable_gaze_shift is False
        assert settings.random_seed == 42

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_rejects_non_positive_durations(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, break_duration_ms=0)

    def test_microbreak_config(self):
        settings = Settings(_env_file=None, enable_movement=False, min_session_duration_ms=300_000)
        config = settings.get_microbreak_config()

        assert config.min_session_duration_ms == 300_000
        assert config.enabled_break_types == [
            BreakType.BREATHING,
            BreakType.MINDFULNESS,
            BreakType.GAZE_SHIFT,
        ]
