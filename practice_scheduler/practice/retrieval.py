"""
Retrieval Practice Planner.

Testing beats re-reading for long-term retention, but only once there is
something to retrieve. This module decides when a pure-recall prompt is
worth more than restudy, produces recall prompt templates of increasing
demand, and scores how strong a retrieval attempt was.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterator, Optional, Sequence

from practice_scheduler import constants as C
from practice_scheduler.models import RetrievalDecision


def should_use_retrieval(
    current_mastery: float,
    last_retrieval_test: Optional[datetime],
    attempt_count: int,
    now: Optional[datetime] = None,
) -> RetrievalDecision:
    """
    Decide between retrieval practice and restudy.

    Rules, first match wins:
    1. Fewer than two attempts -> restudy (initial learning phase)
    2. Never tested -> retrieve
    3. Mid mastery and more than a day since the last test -> retrieve
    4. High mastery tested within three days -> restudy (keep spacing)
    5. Otherwise -> retrieve
    """
    if attempt_count < C.RETRIEVAL_MIN_ATTEMPTS:
        return RetrievalDecision(
            use_retrieval=False,
            reason="Initial learning phase - building foundational knowledge",
        )

    if last_retrieval_test is None:
        return RetrievalDecision(
            use_retrieval=True,
            reason="Retrieval practice not yet attempted - high potential benefit",
        )

    now = now or datetime.now()
    days_since = (now - last_retrieval_test).total_seconds() * C.MS_PER_SECOND / C.MS_PER_DAY

    if (
        C.RETRIEVAL_OPTIMAL_MASTERY_LOW <= current_mastery <= C.RETRIEVAL_OPTIMAL_MASTERY_HIGH
        and days_since > C.RETRIEVAL_OPTIMAL_MIN_DAYS
    ):
        return RetrievalDecision(
            use_retrieval=True,
            reason="Optimal mastery range for retrieval practice benefits",
        )

    if current_mastery > C.RETRIEVAL_OPTIMAL_MASTERY_HIGH and days_since < C.RETRIEVAL_SPACING_DAYS:
        return RetrievalDecision(
            use_retrieval=False,
            reason="High mastery - spacing before next retrieval test",
        )

    return RetrievalDecision(
        use_retrieval=True,
        reason="Regular retrieval practice maintains long-term retention",
    )


def generate_retrieval_prompts(
    skill_name: str,
    key_concepts: Sequence[str],
    previous_attempts: int,
) -> Iterator[str]:
    """
    Yield recall prompt templates for a skill.

    Demand escalates with previous attempts: basic recall (< 3),
    application (3-5), then connection and elaboration (6+). One
    concept-specific prompt follows for each key concept.
    """
    if previous_attempts < C.RETRIEVAL_APPLICATION_ATTEMPTS:
        yield f"Without looking at your notes, what are the key points about {skill_name}?"
        yield f"Explain {skill_name} in your own words."
    elif previous_attempts < C.RETRIEVAL_CONNECTION_ATTEMPTS:
        yield f"Give an example of {skill_name} in practice."
        yield f"How would you use {skill_name} to solve a real problem?"
    else:
        yield f"How does {skill_name} connect to other concepts you've learned?"
        yield f"What would happen if {skill_name} didn't exist or worked differently?"
        yield f"Teach {skill_name} to someone who has never heard of it."

    for concept in key_concepts:
        yield f'What is the role of "{concept}" in {skill_name}?'


def measure_retrieval_strength(
    response_time_ms: float,
    is_correct: bool,
    confidence_rating: int,
    hints_used: int,
) -> float:
    """
    Score a retrieval attempt in [0, 1].

    Args:
        response_time_ms: Time to answer
        is_correct: Whether the recall was correct
        confidence_rating: Self-rated confidence, 1-5
        hints_used: Hints revealed before answering

    Returns:
        Retrieval strength
    """
    strength = C.STRENGTH_BASE_CORRECT if is_correct else C.STRENGTH_BASE_INCORRECT

    if is_correct:
        if response_time_ms < C.STRENGTH_FAST_MS:
            strength += C.STRENGTH_FAST_BONUS
        elif response_time_ms < C.STRENGTH_MODERATE_MS:
            strength += C.STRENGTH_MODERATE_BONUS

        if confidence_rating >= C.STRENGTH_HIGH_CONFIDENCE:
            strength += C.STRENGTH_HIGH_CONFIDENCE_BONUS
        elif confidence_rating >= C.STRENGTH_MID_CONFIDENCE:
            strength += C.STRENGTH_MID_CONFIDENCE_BONUS

    strength -= hints_used * C.STRENGTH_HINT_PENALTY

    return max(0.0, min(1.0, strength))
