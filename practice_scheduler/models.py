"""
Data models for the practice scheduler.

Skills are owned by the learning graph and only read here. Session
telemetry is a frozen snapshot: every update returns a new SessionState
so callers can hold on to old values safely.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from practice_scheduler import constants as C


class BreakType(str, Enum):
    """Restorative activity offered during a microbreak."""
    BREATHING = "breathing"
    MOVEMENT = "movement"
    MINDFULNESS = "mindfulness"
    GAZE_SHIFT = "gaze_shift"


class BreakUrgency(str, Enum):
    """How strongly a break is being recommended, weakest first."""
    NONE = "none"
    SUGGESTED = "suggested"
    RECOMMENDED = "recommended"
    STRONGLY_RECOMMENDED = "strongly_recommended"

    @property
    def rank(self) -> int:
        return list(BreakUrgency).index(self)


class VariationType(str, Enum):
    """Presentation change applied to a question instance."""
    CONTEXT = "context"
    FORMAT = "format"
    NUMERICAL = "numerical"
    PHRASING = "phrasing"


# =============================================================================
# Learning graph inputs
# =============================================================================

@dataclass(frozen=True)
class Skill:
    """
    A practicable skill from the learning graph.

    Attributes:
        id: Unique key
        name: Display name
        bloom_level: Bloom's Taxonomy level (1 = Remember ... 6 = Create)
        difficulty: 0-1 difficulty estimate
        p_mastery: Current mastery estimate (0-1), if known
        last_practiced: When the skill was last practiced
        interleave_count: How many interleaved sessions included it
    """
    id: str
    name: str
    bloom_level: int = 1
    difficulty: float = 0.5
    p_mastery: Optional[float] = None
    last_practiced: Optional[datetime] = None
    interleave_count: Optional[int] = None


@dataclass(frozen=True)
class LearnerProfile:
    """
    Learner preferences accepted by the mix-ratio calculation.

    Neither field changes the computed weights yet; both are carried so
    callers can start supplying them before the weighting uses them.
    """
    preference_for_challenge: float = 0.5
    attention_span: float = 0.5


# =============================================================================
# Session telemetry
# =============================================================================

@dataclass(frozen=True)
class SessionState:
    """
    Rolling telemetry for one practice session.

    recent_response_times and recent_correctness are parallel windows
    (most recent last) capped at TELEMETRY_WINDOW_CAP entries each.
    """
    session_start_time: datetime
    last_break_time: Optional[datetime] = None
    total_breaks_taken: int = 0
    total_breaks_skipped: int = 0
    recent_response_times: tuple[float, ...] = ()
    recent_correctness: tuple[bool, ...] = ()
    current_cognitive_load: float = C.DEFAULT_COGNITIVE_LOAD

    def ms_since_start(self, now: datetime) -> float:
        return (now - self.session_start_time).total_seconds() * C.MS_PER_SECOND

    def ms_since_break(self, now: datetime) -> float:
        """Time since the last break, or since session start if none was taken."""
        reference = self.last_break_time or self.session_start_time
        return (now - reference).total_seconds() * C.MS_PER_SECOND

    def to_dict(self) -> dict:
        return {
            "session_start_time": self.session_start_time.isoformat(),
            "last_break_time": self.last_break_time.isoformat() if self.last_break_time else None,
            "total_breaks_taken": self.total_breaks_taken,
            "total_breaks_skipped": self.total_breaks_skipped,
            "recent_response_times": list(self.recent_response_times),
            "recent_correctness": list(self.recent_correctness),
            "current_cognitive_load": self.current_cognitive_load,
        }


@dataclass
class MicrobreakConfig:
    """Configuration for break timing and the break types on offer."""
    min_session_duration_ms: int = C.DEFAULT_MIN_SESSION_DURATION_MS
    max_session_duration_ms: int = C.DEFAULT_MAX_SESSION_DURATION_MS
    break_duration_ms: int = C.DEFAULT_BREAK_DURATION_MS

    # Not consumed by any branch yet
    adapt_to_performance: bool = True
    adapt_to_cognitive_load: bool = True

    enable_breathing: bool = True
    enable_movement: bool = True
    enable_mindfulness: bool = True
    enable_gaze_shift: bool = True

    @property
    def enabled_break_types(self) -> list[BreakType]:
        """Enabled break types in canonical rotation order."""
        flags = [
            (BreakType.BREATHING, self.enable_breathing),
            (BreakType.MOVEMENT, self.enable_movement),
            (BreakType.MINDFULNESS, self.enable_mindfulness),
            (BreakType.GAZE_SHIFT, self.enable_gaze_shift),
        ]
        return [break_type for break_type, enabled in flags if enabled]


# =============================================================================
# Scheduler outputs
# =============================================================================

@dataclass(frozen=True)
class InterleavedQuestion:
    """One slot in an interleaved session."""
    question_id: str
    skill_id: str
    skill_name: str
    position: int
    previous_skill_id: Optional[str]
    is_switch_point: bool


@dataclass(frozen=True)
class InterleavedSession:
    """
    A complete interleaved practice sequence.

    Attributes:
        questions: Ordered slots
        skill_mix_ratio: skill_id -> fraction of emitted slots
        blocking_prevented: Pool size minus emitted slots minus forced repeats
        estimated_retention_boost: Switch ratio scaled into [0, 0.3]
    """
    questions: tuple[InterleavedQuestion, ...] = ()
    skill_mix_ratio: dict[str, float] = field(default_factory=dict)
    blocking_prevented: int = 0
    estimated_retention_boost: float = 0.0

    @property
    def switch_count(self) -> int:
        return sum(1 for q in self.questions if q.is_switch_point)

    def to_dict(self) -> dict:
        return {
            "questions": [
                {
                    "question_id": q.question_id,
                    "skill_id": q.skill_id,
                    "skill_name": q.skill_name,
                    "position": q.position,
                    "previous_skill_id": q.previous_skill_id,
                    "is_switch_point": q.is_switch_point,
                }
                for q in self.questions
            ],
            "skill_mix_ratio": dict(self.skill_mix_ratio),
            "blocking_prevented": self.blocking_prevented,
            "estimated_retention_boost": self.estimated_retention_boost,
        }


@dataclass(frozen=True)
class FatigueAssessment:
    """Fatigue score in [0, 1] with the indicators that produced it."""
    fatigue_level: float = 0.0
    indicators: tuple[str, ...] = ()


@dataclass(frozen=True)
class BreakRecommendation:
    """Break advice for the current moment. Recomputed on demand."""
    should_break: bool
    urgency: BreakUrgency
    reason: str
    suggested_break_type: BreakType
    suggested_duration_ms: int
    time_until_next_check: int

    def to_dict(self) -> dict:
        return {
            "should_break": self.should_break,
            "urgency": self.urgency.value,
            "reason": self.reason,
            "suggested_break_type": self.suggested_break_type.value,
            "suggested_duration_ms": self.suggested_duration_ms,
            "time_until_next_check": self.time_until_next_check,
        }


@dataclass(frozen=True)
class RecoveryResult:
    """How much a break restored response speed."""
    recovery_score: float
    improvement: float
    recommendation: str


@dataclass(frozen=True)
class InterleavingEffectiveness:
    effect_size: float
    is_effective: bool
    recommendation: str


@dataclass(frozen=True)
class RetrievalDecision:
    use_retrieval: bool
    reason: str


@dataclass(frozen=True)
class VariationPrompt:
    """Request handed to the content provider to render a variation."""
    variation_type: VariationType
    instruction_text: str


@dataclass(frozen=True)
class VariedQuestion:
    """A rendered variation, as returned by the content provider."""
    original_question: str
    varied_question: str
    variation_type: VariationType
    variation_description: str
