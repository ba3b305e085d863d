"""
Microbreak Scheduler.

Recommends short restorative breaks (60-120 seconds) during practice:
- No break before the minimum focus interval has elapsed
- Urgency escalates with elapsed time and detected fatigue
- Break type follows cognitive load, session length and screen time
- Break duration stretches with fatigue, capped at two minutes
"""
from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from loguru import logger

from practice_scheduler import constants as C
from practice_scheduler.attention.fatigue import detect_attention_fatigue
from practice_scheduler.models import (
    BreakRecommendation,
    BreakType,
    BreakUrgency,
    MicrobreakConfig,
    SessionState,
)


def get_break_recommendation(
    session_state: SessionState,
    config: Optional[MicrobreakConfig] = None,
    now: Optional[datetime] = None,
) -> BreakRecommendation:
    """
    Get a break recommendation for the current session state.

    Args:
        session_state: Current telemetry snapshot
        config: Break configuration (defaults if None)
        now: Evaluation time (defaults to the wall clock)

    Returns:
        BreakRecommendation
    """
    config = config or MicrobreakConfig()
    now = now or datetime.now()
    since_break = session_state.ms_since_break(now)

    if since_break < config.min_session_duration_ms:
        return BreakRecommendation(
            should_break=False,
            urgency=BreakUrgency.NONE,
            reason="Session in progress",
            suggested_break_type=BreakType.BREATHING,
            suggested_duration_ms=config.break_duration_ms,
            time_until_next_check=int(config.min_session_duration_ms - since_break),
        )

    assessment = detect_attention_fatigue(session_state, now=now)
    fatigue = assessment.fatigue_level
    joined = ". ".join(assessment.indicators)

    if since_break >= config.max_session_duration_ms or fatigue >= C.STRONG_FATIGUE_LEVEL:
        urgency = BreakUrgency.STRONGLY_RECOMMENDED
        reason = joined or "Maximum session duration reached"
    elif since_break >= config.min_session_duration_ms or fatigue >= C.RECOMMENDED_FATIGUE_LEVEL:
        urgency = BreakUrgency.RECOMMENDED
        reason = joined or "Optimal break time reached"
    elif fatigue >= C.SUGGESTED_FATIGUE_LEVEL:
        # Unreachable while the early return above covers since_break < min
        urgency = BreakUrgency.SUGGESTED
        reason = joined or "Early signs of fatigue"
    else:
        urgency = BreakUrgency.NONE
        reason = joined or "No fatigue detected"

    break_type = select_break_type(session_state, config, now=now)
    duration = math.floor(
        config.break_duration_ms * (1 + fatigue * C.BREAK_DURATION_FATIGUE_FACTOR)
    )

    logger.debug(
        f"Break check: urgency={urgency.value} fatigue={fatigue:.2f} "
        f"type={break_type.value} since_break={since_break / C.MS_PER_MINUTE:.1f}min"
    )

    return BreakRecommendation(
        should_break=urgency is not BreakUrgency.NONE,
        urgency=urgency,
        reason=reason,
        suggested_break_type=break_type,
        suggested_duration_ms=min(duration, C.MAX_BREAK_DURATION_MS),
        time_until_next_check=(
            C.CHECK_INTERVAL_IDLE_MS if urgency is BreakUrgency.NONE
            else C.CHECK_INTERVAL_ACTIVE_MS
        ),
    )


def select_break_type(
    session_state: SessionState,
    config: Optional[MicrobreakConfig] = None,
    now: Optional[datetime] = None,
) -> BreakType:
    """
    Select the most appropriate break type.

    First matching rule wins:
    1. High cognitive load -> breathing, else mindfulness
    2. Long session -> movement
    3. Full telemetry window (long screen time) -> gaze shift
    4. Rotate through enabled types by breaks taken
    """
    config = config or MicrobreakConfig()
    now = now or datetime.now()
    available = config.enabled_break_types

    if not available:
        return BreakType.BREATHING

    if session_state.current_cognitive_load > C.HIGH_COGNITIVE_LOAD:
        if config.enable_breathing:
            return BreakType.BREATHING
        if config.enable_mindfulness:
            return BreakType.MINDFULNESS

    if session_state.ms_since_start(now) > C.LONG_SESSION_MS and config.enable_movement:
        return BreakType.MOVEMENT

    if (
        len(session_state.recent_response_times) >= C.GAZE_SHIFT_MIN_RESPONSES
        and config.enable_gaze_shift
    ):
        return BreakType.GAZE_SHIFT

    return available[session_state.total_breaks_taken % len(available)]


def calculate_optimal_break_time(
    session_duration_ms: float,
    cognitive_load: float,
    config: Optional[MicrobreakConfig] = None,
) -> int:
    """
    Focus interval before the next break, in milliseconds.

    Starts at the midpoint of the min/max focus durations and shortens
    by up to 30% under full cognitive load. session_duration_ms is
    accepted for callers but does not influence the interval yet.
    """
    config = config or MicrobreakConfig()
    base_interval = (config.min_session_duration_ms + config.max_session_duration_ms) / 2
    load_factor = 1 - cognitive_load * C.BREAK_INTERVAL_LOAD_FACTOR
    return math.floor(base_interval * load_factor)
