"""
Unit tests for post-break recovery evaluation.
"""
import pytest

from practice_scheduler.attention.recovery import measure_post_break_recovery


class TestRecovery:
    def test_clear_speed_up_is_excellent(self):
        result = measure_post_break_recovery([10000, 12000, 11000], [7000, 7500, 8000])

        assert result.improvement == pytest.approx(3500 / 11000)
        assert result.recovery_score == 1.0
        assert result.recommendation.startswith("Excellent recovery!")

    @pytest.mark.parametrize(
        "post_avg, expected_score, phrase",
        [
            (8500, 0.8, "Good recovery"),
            (9500, 0.6, "Moderate recovery"),
            (10500, 0.4, "Minimal change"),
            (12000, 0.2, "Performance still declining"),
        ],
    )
    def test_score_bands(self, post_avg, expected_score, phrase):
        result = measure_post_break_recovery([10000] * 3, [post_avg] * 3)

        assert result.recovery_score == expected_score
        assert result.recommendation.startswith(phrase)

    def test_band_lower_bounds_are_exclusive(self):
        # no change at all is not an improvement
        result = measure_post_break_recovery([10000] * 3, [10000] * 3)
        assert result.improvement == 0.0
        assert result.recovery_score == 0.4

    def test_slower_after_break_is_negative(self):
        result = measure_post_break_recovery([4000] * 3, [5000] * 3)
        assert result.improvement == pytest.approx(-0.25)

    @pytest.mark.parametrize(
        "pre, post",
        [
            ([1000, 2000], [1000, 2000, 3000]),
            ([1000, 2000, 3000], [1000]),
            ([], []),
        ],
    )
    def test_too_few_samples_is_neutral(self, pre, post):
        result = measure_post_break_recovery(pre, post)

        assert result.recovery_score == 0.5
        assert result.improvement == 0.0
        assert result.recommendation == "Not enough data to measure recovery"

    def test_zero_pre_average_is_neutral(self):
        result = measure_post_break_recovery([0, 0, 0], [1000, 1000, 1000])
        assert result.recovery_score == 0.5
