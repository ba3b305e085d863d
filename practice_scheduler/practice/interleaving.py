"""
Interleaved Practice Scheduler.

Builds mixed-skill practice sequences (ABCBACBCA) instead of blocked ones
(AAABBBCCC). Interleaving slows immediate performance but improves
long-term retention and discrimination between skills.

The algorithm:
1. Build a flat pool of (skill, index) entries, questions_per_skill per skill
2. For each slot, draw uniformly from remaining entries whose skill differs
   from the previous slot's skill
3. Fall back to any remaining entry only when every remaining entry shares
   the previous skill
"""
from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from practice_scheduler import constants as C
from practice_scheduler.models import (
    InterleavedQuestion,
    InterleavedSession,
    InterleavingEffectiveness,
    LearnerProfile,
    Skill,
)


@dataclass(frozen=True)
class PoolEntry:
    """One potential question slot for a skill."""
    skill_id: str
    skill_name: str
    index: int


def generate_interleaved_session(
    skills: Sequence[Skill],
    questions_per_skill: int,
    total_questions: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> InterleavedSession:
    """
    Generate an interleaved practice session.

    Args:
        skills: Skills to mix
        questions_per_skill: Pool entries per skill
        total_questions: Slots to fill (defaults to the full pool)
        rng: Random source (a fresh unseeded Random if None)

    Returns:
        InterleavedSession; empty when there are no skills
    """
    rng = rng or random.Random()
    pool = tuple(
        PoolEntry(skill_id=skill.id, skill_name=skill.name, index=i)
        for skill in skills
        for i in range(questions_per_skill)
    )
    total = len(pool) if total_questions is None else total_questions

    order = _adjacency_avoiding_order(pool, total, rng)
    picked = [pool[i] for i in order]

    questions = tuple(
        InterleavedQuestion(
            question_id=f"{entry.skill_id}-{entry.index}",
            skill_id=entry.skill_id,
            skill_name=entry.skill_name,
            position=position,
            previous_skill_id=picked[position - 1].skill_id if position > 0 else None,
            is_switch_point=position > 0 and picked[position - 1].skill_id != entry.skill_id,
        )
        for position, entry in enumerate(picked)
    )

    repeats = sum(
        1 for prev, cur in zip(picked, picked[1:]) if prev.skill_id == cur.skill_id
    )
    counts = Counter(entry.skill_id for entry in picked)
    emitted = len(picked)

    session = InterleavedSession(
        questions=questions,
        skill_mix_ratio={skill_id: n / emitted for skill_id, n in counts.items()},
        blocking_prevented=len(pool) - emitted - repeats,
        estimated_retention_boost=calculate_retention_boost(questions),
    )

    logger.info(
        f"Built interleaved session: {emitted} questions across {len(counts)} skills, "
        f"{session.switch_count} switches, {repeats} forced repeats "
        f"(boost {session.estimated_retention_boost:.0%})"
    )
    return session


def _adjacency_avoiding_order(
    pool: tuple[PoolEntry, ...],
    max_items: int,
    rng: random.Random,
) -> list[int]:
    """
    Pick pool indices so the same skill is not drawn twice in a row when avoidable.

    The pool is never modified; drawn entries are tracked by index.
    """
    order: list[int] = []
    removed: set[int] = set()

    while len(order) < max_items and len(removed) < len(pool):
        remaining = [i for i in range(len(pool)) if i not in removed]
        last_skill = pool[order[-1]].skill_id if order else None

        candidates = [i for i in remaining if pool[i].skill_id != last_skill]
        if not candidates:
            candidates = remaining

        chosen = candidates[rng.randrange(len(candidates))]
        order.append(chosen)
        removed.add(chosen)

    return order


def calculate_retention_boost(questions: Sequence[InterleavedQuestion]) -> float:
    """
    Estimated retention boost from interleaving.

    A bounded linear proxy: the fraction of adjacent pairs that switch
    skill, scaled to at most 30%.
    """
    if len(questions) < 2:
        return 0.0

    switches = sum(
        1 for prev, cur in zip(questions, questions[1:]) if prev.skill_id != cur.skill_id
    )
    return switches / (len(questions) - 1) * C.RETENTION_BOOST_CEILING


def calculate_optimal_mix_ratio(
    skills: Sequence[Skill],
    learner_profile: Optional[LearnerProfile] = None,
) -> dict[str, float]:
    """
    Sampling weight per skill, favouring lower mastery.

    Each skill weighs (1 - p_mastery) + 0.3, so mastered skills keep some
    review share. Weights are normalized to sum to 1.

    learner_profile is accepted so callers can pass it today; the weights
    do not depend on it yet.
    """
    if not skills:
        return {}

    weights = {
        skill.id: 1 - (skill.p_mastery if skill.p_mastery is not None else C.DEFAULT_MASTERY)
        + C.MASTERY_WEIGHT_FLOOR
        for skill in skills
    }
    total_weight = sum(weights.values())
    return {skill_id: weight / total_weight for skill_id, weight in weights.items()}


def track_interleaving_effectiveness(
    pre_accuracy: float,
    post_accuracy: float,
    delay_days: float,
) -> InterleavingEffectiveness:
    """
    Estimate whether interleaving is working.

    Longer retention intervals amplify the measured improvement, since a
    gain that survives a delay reflects long-term learning.
    """
    improvement = post_accuracy - pre_accuracy
    time_adjusted = improvement * (1 + delay_days * C.EFFECTIVENESS_DELAY_FACTOR)

    if time_adjusted > C.EFFECTIVENESS_STRONG_THRESHOLD:
        return InterleavingEffectiveness(
            effect_size=time_adjusted,
            is_effective=True,
            recommendation="Interleaving is working well. Continue with this approach.",
        )
    if time_adjusted > 0:
        return InterleavingEffectiveness(
            effect_size=time_adjusted,
            is_effective=True,
            recommendation="Slight improvement detected. Consider increasing interleave intensity.",
        )
    return InterleavingEffectiveness(
        effect_size=time_adjusted,
        is_effective=False,
        recommendation="Interleaving needs adjustment. Try smaller topic mixes first.",
    )
