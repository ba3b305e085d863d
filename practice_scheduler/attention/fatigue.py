"""
Attention Fatigue Detection.

Scores attentional decline from the rolling session telemetry:
- Response time trend (recent window slower than the one before it)
- Response time consistency (coefficient of variation)
- Accuracy trend (recent window less accurate than the one before it)
- Time since the last break

Each check contributes independently; the sum is clamped to [0, 1].
"""
from __future__ import annotations

import math
from datetime import datetime
from typing import Optional, Sequence

from loguru import logger

from practice_scheduler import constants as C
from practice_scheduler.models import FatigueAssessment, SessionState


def detect_attention_fatigue(
    session_state: SessionState,
    now: Optional[datetime] = None,
) -> FatigueAssessment:
    """
    Detect attention fatigue from response patterns.

    Args:
        session_state: Current telemetry snapshot
        now: Evaluation time (defaults to the wall clock)

    Returns:
        FatigueAssessment with the clamped level and fired indicators
    """
    now = now or datetime.now()
    score = 0.0
    indicators: list[str] = []

    for check in (
        _check_response_trend(session_state.recent_response_times),
        _check_response_consistency(session_state.recent_response_times),
        _check_accuracy_trend(session_state.recent_correctness),
        _check_time_since_break(session_state.ms_since_break(now)),
    ):
        if check:
            points, indicator = check
            score += points
            indicators.append(indicator)

    fatigue_level = min(1.0, score)
    if indicators:
        logger.debug(f"Fatigue {fatigue_level:.2f}: {indicators}")

    return FatigueAssessment(fatigue_level=fatigue_level, indicators=tuple(indicators))


def _check_response_trend(times: Sequence[float]) -> Optional[tuple[float, str]]:
    if len(times) < C.FATIGUE_WINDOW:
        return None

    recent, older = _split_windows(times)
    if not older:
        return None

    if _mean(recent) > _mean(older) * C.RESPONSE_SLOWDOWN_RATIO:
        return C.RESPONSE_SLOWDOWN_SCORE, "Response times increasing"
    return None


def _check_response_consistency(times: Sequence[float]) -> Optional[tuple[float, str]]:
    if len(times) < C.FATIGUE_WINDOW:
        return None

    recent = list(times[-C.FATIGUE_WINDOW:])
    mean = _mean(recent)
    if mean <= 0:
        return None

    if math.sqrt(_variance(recent)) / mean > C.RESPONSE_CV_THRESHOLD:
        return C.RESPONSE_CV_SCORE, "Inconsistent response times"
    return None


def _check_accuracy_trend(correctness: Sequence[bool]) -> Optional[tuple[float, str]]:
    if len(correctness) < C.FATIGUE_WINDOW:
        return None

    recent, older = _split_windows(correctness)
    if not older:
        return None

    recent_accuracy = sum(1 for c in recent if c) / len(recent)
    older_accuracy = sum(1 for c in older if c) / len(older)

    if older_accuracy - recent_accuracy >= C.ACCURACY_DROP_THRESHOLD - C.ACCURACY_TOLERANCE:
        return C.ACCURACY_DROP_SCORE, "Accuracy declining"
    return None


def _check_time_since_break(elapsed_ms: float) -> Optional[tuple[float, str]]:
    if elapsed_ms > C.EXTENDED_NO_BREAK_MS:
        return C.EXTENDED_NO_BREAK_SCORE, "Extended time without break"
    if elapsed_ms > C.APPROACHING_BREAK_MS:
        return C.APPROACHING_BREAK_SCORE, "Approaching recommended break time"
    return None


def _split_windows(values: Sequence) -> tuple[list, list]:
    """Last FATIGUE_WINDOW values, and up to FATIGUE_WINDOW values before them."""
    window = C.FATIGUE_WINDOW
    values = list(values)
    return values[-window:], values[-2 * window:-window]


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _variance(values: Sequence[float]) -> float:
    """Population variance."""
    mean = _mean(values)
    return sum((v - mean) ** 2 for v in values) / len(values)
