"""
Tests for Settings configuration validation in config.py.
"""
import pytest
from pydantic import ValidationError

from gradebook.core.config import Settings


class TestSentryTracesSampleRateValidation:
    """Tests for SENTRY_TRACES_SAMPLE_RATE validation."""

    def test_valid_sample_rate_default(self):
        """Test that the default sample rate (0.1) is valid."""
        settings = Settings()
        assert settings.SENTRY_TRACES_SAMPLE_RATE == pytest.approx(0.1)

    @pytest.mark.parametrize("rate", [0.0, 0.5, 1.0])
    def test_valid_sample_rates(self, rate):
        settings = Settings(SENTRY_TRACES_SAMPLE_RATE=rate)
        assert settings.SENTRY_TRACES_SAMPLE_RATE == pytest.approx(rate)

    def test_invalid_sample_rate_negative(self):
        """Test that negative values are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(SENTRY_TRACES_SAMPLE_RATE=-0.1)
        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("SENTRY_TRACES_SAMPLE_RATE",)
        assert "greater than or equal to 0" in errors[0]["msg"]

    def test_invalid_sample_rate_greater_than_one(self):
        """Test that values greater than 1.0 are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Settings(SENTRY_TRACES_SAMPLE_RATE=1.5)
        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("SENTRY_TRACES_SAMPLE_RATE",)
        assert "less than or equal to 1" in errors[0]["msg"]


class TestMaxAnalysisCellsValidation:
    """Tests for MAX_ANALYSIS_CELLS validation."""

    def test_default(self):
        assert Settings().MAX_ANALYSIS_CELLS == 100_000

    def test_zero_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(MAX_ANALYSIS_CELLS=0)
        assert exc_info.value.errors()[0]["loc"] == ("MAX_ANALYSIS_CELLS",)


class TestFinalGradeWeightsValidation:
    """Tests for the final grade weight model validator."""

    def test_defaults_are_valid(self):
        settings = Settings()
        assert settings.FINAL_GRADE_TP_WEIGHT == pytest.approx(0.7)
        assert settings.FINAL_GRADE_EXAM_WEIGHT == pytest.approx(0.3)

    def test_custom_weights_summing_to_one(self):
        settings = Settings(FINAL_GRADE_TP_WEIGHT=0.6, FINAL_GRADE_EXAM_WEIGHT=0.4)
        assert settings.FINAL_GRADE_TP_WEIGHT == pytest.approx(0.6)

    def test_weights_not_summing_to_one_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(FINAL_GRADE_TP_WEIGHT=0.7, FINAL_GRADE_EXAM_WEIGHT=0.4)
        assert "must sum to 1.0" in str(exc_info.value)

    def test_non_positive_weight_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(FINAL_GRADE_TP_WEIGHT=1.0, FINAL_GRADE_EXAM_WEIGHT=0.0)
        assert "must be positive" in str(exc_info.value)


class TestKKMValidation:
    """Tests for FINAL_GRADE_KKM and KKM_WARNING_MARGIN bounds."""

    def test_defaults(self):
        settings = Settings()
        assert settings.FINAL_GRADE_KKM == pytest.approx(75.0)
        assert settings.KKM_WARNING_MARGIN == pytest.approx(15.0)

    def test_kkm_above_100_rejected(self):
        with pytest.raises(ValidationError):
            Settings(FINAL_GRADE_KKM=101)

    def test_negative_margin_rejected(self):
        with pytest.raises(ValidationError):
            Settings(KKM_WARNING_MARGIN=-1)
