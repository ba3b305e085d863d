"""
Attention Management.

Fatigue detection, microbreak recommendations and post-break recovery
scoring, all computed from a rolling SessionState snapshot.
"""
from practice_scheduler.attention.break_content import (
    BreakContent,
    get_break_type_name,
    get_exercise_by_id,
    get_quick_break,
    get_random_exercise,
)
from practice_scheduler.attention.controller import MicrobreakController
from practice_scheduler.attention.fatigue import detect_attention_fatigue
from practice_scheduler.attention.microbreaks import (
    calculate_optimal_break_time,
    get_break_recommendation,
    select_break_type,
)
from practice_scheduler.attention.recovery import measure_post_break_recovery
from practice_scheduler.attention.session_state import (
    create_session_state,
    record_break,
    record_response,
)

__all__ = [
    # Session telemetry
    "create_session_state",
    "record_response",
    "record_break",
    # Detection and recommendation
    "detect_attention_fatigue",
    "get_break_recommendation",
    "select_break_type",
    "calculate_optimal_break_time",
    "measure_post_break_recovery",
    # Break content
    "BreakContent",
    "get_random_exercise",
    "get_exercise_by_id",
    "get_quick_break",
    "get_break_type_name",
    # Host-side coordination
    "MicrobreakController",
]
