"""
Adaptive Practice Scheduler.

Decides, per learner event, which skill to present next, how to vary it,
whether to insert a microbreak and whether to use retrieval practice.

Packages:
- attention: fatigue detection, break recommendations, recovery scoring
- practice: interleaving, variation and retrieval planning
"""
from practice_scheduler.models import (
    BreakRecommendation,
    BreakType,
    BreakUrgency,
    InterleavedQuestion,
    InterleavedSession,
    LearnerProfile,
    MicrobreakConfig,
    SessionState,
    Skill,
    VariationType,
    VariedQuestion,
)

__version__ = "1.0.0"

__all__ = [
    "BreakRecommendation",
    "BreakType",
    "BreakUrgency",
    "InterleavedQuestion",
    "InterleavedSession",
    "LearnerProfile",
    "MicrobreakConfig",
    "SessionState",
    "Skill",
    "VariationType",
    "VariedQuestion",
]
