"""
Session telemetry lifecycle.

The caller owns durability: these helpers only produce new SessionState
snapshots from old ones.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from practice_scheduler import constants as C
from practice_scheduler.models import SessionState


def create_session_state(now: Optional[datetime] = None) -> SessionState:
    """Start a fresh session clock with empty telemetry windows."""
    return SessionState(
        session_start_time=now or datetime.now(),
        current_cognitive_load=C.DEFAULT_COGNITIVE_LOAD,
    )


def record_response(
    state: SessionState,
    response_time_ms: float,
    is_correct: bool,
    cognitive_load: Optional[float] = None,
) -> SessionState:
    """
    Append an answered question to the telemetry windows.

    Both windows drop their oldest entry together once the cap is
    reached, so they always stay the same length.

    Args:
        state: Current snapshot
        response_time_ms: Time taken to answer
        is_correct: Whether the answer was correct
        cognitive_load: New load estimate, or None to keep the current one

    Returns:
        New SessionState
    """
    keep = C.TELEMETRY_WINDOW_CAP - 1
    return replace(
        state,
        recent_response_times=state.recent_response_times[-keep:] + (response_time_ms,),
        recent_correctness=state.recent_correctness[-keep:] + (is_correct,),
        current_cognitive_load=(
            cognitive_load if cognitive_load is not None else state.current_cognitive_load
        ),
    )


def record_break(
    state: SessionState,
    was_completed: bool,
    now: Optional[datetime] = None,
) -> SessionState:
    """Reset the break clock; count the break as taken or skipped."""
    return replace(
        state,
        last_break_time=now or datetime.now(),
        total_breaks_taken=state.total_breaks_taken + (1 if was_completed else 0),
        total_breaks_skipped=state.total_breaks_skipped + (0 if was_completed else 1),
    )
