"""Post-break recovery evaluation."""
from __future__ import annotations

from typing import Sequence

from practice_scheduler import constants as C
from practice_scheduler.models import RecoveryResult

_RECOMMENDATIONS = {
    1.0: "Excellent recovery! The break significantly improved your focus.",
    0.8: "Good recovery. Consider taking breaks at this interval.",
    0.6: "Moderate recovery. Try a longer break next time.",
    0.4: "Minimal change. You may benefit from a different break activity.",
    0.2: "Performance still declining. Consider a longer rest period.",
}


def measure_post_break_recovery(
    pre_break_times: Sequence[float],
    post_break_times: Sequence[float],
) -> RecoveryResult:
    """
    Compare response speed before and after a break.

    improvement is the relative speed-up, (pre_avg - post_avg) / pre_avg,
    so positive values mean faster answers after the break.

    Args:
        pre_break_times: Response times (ms) leading up to the break
        post_break_times: Response times (ms) after the break

    Returns:
        RecoveryResult; a neutral 0.5 score when either side has fewer
        than three samples
    """
    if len(pre_break_times) < C.RECOVERY_MIN_SAMPLES or len(post_break_times) < C.RECOVERY_MIN_SAMPLES:
        return RecoveryResult(
            recovery_score=C.RECOVERY_NEUTRAL_SCORE,
            improvement=0.0,
            recommendation="Not enough data to measure recovery",
        )

    pre_avg = sum(pre_break_times) / len(pre_break_times)
    post_avg = sum(post_break_times) / len(post_break_times)
    if pre_avg <= 0:
        return RecoveryResult(
            recovery_score=C.RECOVERY_NEUTRAL_SCORE,
            improvement=0.0,
            recommendation="Not enough data to measure recovery",
        )

    improvement = (pre_avg - post_avg) / pre_avg

    score = C.RECOVERY_FLOOR_SCORE
    for lower_bound, band_score in C.RECOVERY_BANDS:
        if improvement > lower_bound:
            score = band_score
            break

    return RecoveryResult(
        recovery_score=score,
        improvement=improvement,
        recommendation=_RECOMMENDATIONS[score],
    )
