"""
Microbreak Controller.

Host-side coordinator for one learner's break flow. Owns the current
SessionState snapshot and the transient UI-facing state (active break,
snooze, dismissal). The recommendation itself is still computed by the
pure functions in microbreaks.py.

Flow:
1. record_response() after every answered question
2. check() on each timer tick
3. start_break() / complete_break() or skip_break()
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from loguru import logger

from practice_scheduler import constants as C
from practice_scheduler.attention import session_state as telemetry
from practice_scheduler.attention.microbreaks import get_break_recommendation
from practice_scheduler.models import (
    BreakRecommendation,
    BreakType,
    MicrobreakConfig,
    SessionState,
)

Clock = Callable[[], datetime]


@dataclass
class ActiveBreak:
    break_type: BreakType
    started_at: datetime


class MicrobreakController:
    """
    Coordinates break suggestions for a single practice session.

    Callbacks:
        on_break_suggested: called when a check first produces should_break
        on_break_completed: called with (break_type, duration_ms)
        on_break_skipped: called when the learner skips a break
    """

    def __init__(
        self,
        config: Optional[MicrobreakConfig] = None,
        clock: Optional[Clock] = None,
        enabled: bool = True,
        on_break_suggested: Optional[Callable[[BreakRecommendation], None]] = None,
        on_break_completed: Optional[Callable[[BreakType, int], None]] = None,
        on_break_skipped: Optional[Callable[[], None]] = None,
    ):
        self.config = config or MicrobreakConfig()
        self.clock = clock or datetime.now
        self.enabled = enabled
        self.on_break_suggested = on_break_suggested
        self.on_break_completed = on_break_completed
        self.on_break_skipped = on_break_skipped

        self.state: SessionState = telemetry.create_session_state(now=self.clock())
        self.recommendation: Optional[BreakRecommendation] = None
        self.active_break: Optional[ActiveBreak] = None
        self.snoozed_until: Optional[datetime] = None
        self.dismissed_until: Optional[datetime] = None

    # =========================================================================
    # Telemetry
    # =========================================================================

    def record_response(
        self,
        response_time_ms: float,
        is_correct: bool,
        cognitive_load: Optional[float] = None,
    ) -> None:
        self.state = telemetry.record_response(
            self.state, response_time_ms, is_correct, cognitive_load
        )

    # =========================================================================
    # Checks
    # =========================================================================

    def check(self) -> Optional[BreakRecommendation]:
        """
        Re-evaluate the break recommendation.

        Returns None without evaluating while disabled, snoozed, dismissed
        or during an active break.
        """
        if not self.enabled or self.active_break:
            return None

        now = self.clock()
        if self.snoozed_until and now < self.snoozed_until:
            return None
        self.snoozed_until = None

        if self.dismissed_until and now < self.dismissed_until:
            return None
        self.dismissed_until = None

        was_suggesting = bool(self.recommendation and self.recommendation.should_break)
        self.recommendation = get_break_recommendation(self.state, self.config, now=now)

        if self.recommendation.should_break and not was_suggesting:
            logger.info(
                f"Break suggested ({self.recommendation.urgency.value}): "
                f"{self.recommendation.reason}"
            )
            if self.on_break_suggested:
                self.on_break_suggested(self.recommendation)

        return self.recommendation

    @property
    def should_show_reminder(self) -> bool:
        return bool(
            self.enabled
            and self.recommendation
            and self.recommendation.should_break
            and not self.active_break
        )

    @property
    def ms_since_last_break(self) -> float:
        return self.state.ms_since_break(self.clock())

    # =========================================================================
    # Break lifecycle
    # =========================================================================

    def start_break(self, break_type: Optional[BreakType] = None) -> BreakType:
        """Begin a break of the given type, or the recommended one."""
        if break_type is None:
            break_type = (
                self.recommendation.suggested_break_type
                if self.recommendation
                else BreakType.BREATHING
            )
        self.active_break = ActiveBreak(break_type=break_type, started_at=self.clock())
        self.dismissed_until = None
        return break_type

    def complete_break(self) -> None:
        now = self.clock()
        if self.active_break:
            duration_ms = int(
                (now - self.active_break.started_at).total_seconds() * C.MS_PER_SECOND
            )
            logger.debug(f"Break completed: {self.active_break.break_type.value} ({duration_ms}ms)")
            if self.on_break_completed:
                self.on_break_completed(self.active_break.break_type, duration_ms)

        self.state = telemetry.record_break(self.state, was_completed=True, now=now)
        self.active_break = None
        self.recommendation = None

    def skip_break(self) -> None:
        self.state = telemetry.record_break(self.state, was_completed=False, now=self.clock())
        self.active_break = None
        self.recommendation = None
        if self.on_break_skipped:
            self.on_break_skipped()

    def snooze(self, minutes: float) -> None:
        self.snoozed_until = self.clock() + timedelta(minutes=minutes)
        self.recommendation = None

    def dismiss(self) -> None:
        """Hide the current recommendation; checks resume after five minutes."""
        self.dismissed_until = self.clock() + timedelta(milliseconds=C.DISMISS_COOLDOWN_MS)
        self.recommendation = None

    def reset(self) -> None:
        self.state = telemetry.create_session_state(now=self.clock())
        self.recommendation = None
        self.active_break = None
        self.snoozed_until = None
        self.dismissed_until = None
