"""Tests for reviewer settings."""
import pytest

from src.review.settings import ReviewerSettings


class TestReviewerSettings:
    """Tests for ReviewerSettings."""

    def test_default_settings(self):
        settings = ReviewerSettings()

        assert settings.enabled is True
        assert settings.model == "claude-sonnet-4-20250514"
        assert settings.max_tokens == 1500
        assert settings.rate_limit_per_minute == 20

    def test_custom_settings(self):
        settings = ReviewerSettings(enabled=False, model=" claude-test ", max_tokens=800)

        assert settings.enabled is False
        assert settings.model == "claude-test"
        assert settings.max_tokens == 800

    def test_empty_model_rejected(self):
        with pytest.raises(ValueError):
            ReviewerSettings(model="  ")

    def test_max_tokens_bounds(self):
        with pytest.raises(ValueError):
            ReviewerSettings(max_tokens=50)
        with pytest.raises(ValueError):
            ReviewerSettings(max_tokens=5000)

    def test_rate_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            ReviewerSettings(rate_limit_per_minute=0)
