"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from progressive_quiz.config.settings import Settings, get_settings


class TestSettings:
    """Test settings loading."""

    def test_defaults(self):
        """Test the default values."""
        settings = Settings(_env_file=None)

        assert settings.questions_dir == "data/questions"
        assert settings.certifications_file == "data/certifications.json"
        assert settings.default_question_count == 20
        assert settings.top_candidates == 5
        assert settings.simulated_success_rate == 0.6
        assert settings.random_seed is None

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch):
        """Test reading values from the environment."""
        monkeypatch.setenv("TOP_CANDIDATES", "3")
        monkeypatch.setenv("RANDOM_SEED", "42")
        monkeypatch.setenv("QUESTIONS_DIR", "/srv/questions")

        settings = Settings(_env_file=None)

        assert settings.top_candidates == 3
        assert settings.random_seed == 42
        assert settings.questions_dir == "/srv/questions"

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch):
        """Test that out-of-range values are rejected."""
        monkeypatch.setenv("SIMULATED_SUCCESS_RATE", "1.5")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_similarity_weights(self, monkeypatch: pytest.MonkeyPatch):
        """Test building relevance weights from settings."""
        monkeypatch.setenv("KEYWORD_WEIGHT", "0.7")

        weights = Settings(_env_file=None).similarity_weights()

        assert weights.keywords == 0.7
        assert weights.difficulty == 0.2
        assert weights.length == 0.3

    def test_get_settings_is_cached(self):
        """Test that the same instance is returned."""
        assert get_settings() is get_settings()

    def test_log_level_is_normalised(self, monkeypatch: pytest.MonkeyPatch):
        """Test that level names are case-insensitive."""
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch):
        """Test that an unknown level is a configuration error."""
        monkeypatch.setenv("LOG_LEVEL", "loud")

        with pytest.raises(ValidationError, match="log_level"):
            Settings(_env_file=None)
