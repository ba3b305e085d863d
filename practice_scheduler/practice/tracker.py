"""
Desirable Difficulty Tracker.

Host-side state for one practice run that combines the four desirable
difficulties (Bjork & Bjork):
1. Interleaving - mixed-skill session with a cursor
2. Spacing - delegated to the review scheduler, only toggled here
3. Retrieval - per-skill retrieval strength history
4. Variation - variation history feeding the selector

The tracker is the only stateful piece; every decision is delegated to
the pure functions in this package.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from loguru import logger

from practice_scheduler import constants as C
from practice_scheduler.models import (
    InterleavedSession,
    InterleavingEffectiveness,
    LearnerProfile,
    RetrievalDecision,
    Skill,
    VariationPrompt,
    VariationType,
)
from practice_scheduler.practice.interleaving import (
    calculate_optimal_mix_ratio,
    generate_interleaved_session,
    track_interleaving_effectiveness,
)
from practice_scheduler.practice.retrieval import measure_retrieval_strength, should_use_retrieval
from practice_scheduler.practice.variation import generate_variation_prompt, select_variation_type


@dataclass
class DifficultySettings:
    """Which desirable difficulties are switched on."""
    interleaving: bool = True
    spacing: bool = True
    retrieval: bool = True
    variation: bool = True

    def toggle(self, name: str) -> None:
        if name not in ("interleaving", "spacing", "retrieval", "variation"):
            raise ValueError(f"Unknown difficulty setting: {name}")
        setattr(self, name, not getattr(self, name))


@dataclass
class DifficultyStrengths:
    """0-1 strength of each difficulty for the session indicator."""
    interleaving: float = 0.0
    spacing: float = 0.0
    retrieval: float = 0.0
    variation: float = 0.0


class DesirableDifficultyTracker:
    """
    Tracks desirable-difficulty state for a practice run.

    Example:
        tracker = DesirableDifficultyTracker(skills, questions_per_skill=3, rng=Random(7))
        tracker.generate_session()
        while (skill_id := tracker.current_skill_id()) is not None:
            ...
            tracker.advance()
    """

    def __init__(
        self,
        skills: Sequence[Skill],
        questions_per_skill: int = 3,
        total_questions: Optional[int] = None,
        learner_profile: Optional[LearnerProfile] = None,
        settings: Optional[DifficultySettings] = None,
        rng: Optional[random.Random] = None,
    ):
        self.skills = list(skills)
        self.questions_per_skill = questions_per_skill
        self.total_questions = total_questions
        self.learner_profile = learner_profile or LearnerProfile()
        self.settings = settings or DifficultySettings()
        self.rng = rng or random.Random()

        self.session: Optional[InterleavedSession] = None
        self.current_index = 0
        self.variations_used: list[VariationType] = []
        self.current_variation: Optional[VariationType] = None
        self.retrieval_strengths: dict[str, list[float]] = {}
        self.pre_accuracy: Optional[float] = None
        self.post_accuracy: Optional[float] = None

    @property
    def _can_interleave(self) -> bool:
        return self.settings.interleaving and len(self.skills) >= C.MIN_SKILLS_FOR_INTERLEAVING

    # =========================================================================
    # Interleaving
    # =========================================================================

    def generate_session(self) -> Optional[InterleavedSession]:
        """Build a new interleaved session; None when interleaving is off or pointless."""
        if not self._can_interleave:
            self.session = None
            return None

        self.session = generate_interleaved_session(
            self.skills, self.questions_per_skill, self.total_questions, rng=self.rng
        )
        self.current_index = 0
        return self.session

    def current_skill_id(self) -> Optional[str]:
        if not self.session or self.current_index >= len(self.session.questions):
            return None
        return self.session.questions[self.current_index].skill_id

    def advance(self) -> None:
        self.current_index += 1

    @property
    def skill_mix_ratio(self) -> dict[str, float]:
        if not self._can_interleave:
            return {}
        return calculate_optimal_mix_ratio(self.skills, self.learner_profile)

    @property
    def estimated_retention_boost(self) -> float:
        return self.session.estimated_retention_boost if self.session else 0.0

    @property
    def interleave_switches(self) -> int:
        return self.session.switch_count if self.session else 0

    # =========================================================================
    # Variation
    # =========================================================================

    def variation_prompt(self, original_question: str, skill_context: str) -> Optional[VariationPrompt]:
        """
        Choose a variation for a question and build its content request.

        The skill is looked up by name, falling back to the first skill.
        Returns None when variation is off or there are no skills; the
        caller then presents the original question unchanged.
        """
        if not self.settings.variation or not self.skills:
            return None

        skill = next((s for s in self.skills if s.name == skill_context), self.skills[0])
        variation_type = select_variation_type(skill, self.variations_used, rng=self.rng)
        self.current_variation = variation_type
        return generate_variation_prompt(
            original_question, variation_type, skill_context, rng=self.rng
        )

    def record_variation_used(self, variation_type: VariationType) -> None:
        self.variations_used.append(variation_type)
        self.current_variation = variation_type

    # =========================================================================
    # Retrieval
    # =========================================================================

    def should_use_retrieval(
        self,
        current_mastery: float,
        last_retrieval_test: Optional[datetime],
        attempt_count: int,
        now: Optional[datetime] = None,
    ) -> RetrievalDecision:
        if not self.settings.retrieval:
            return RetrievalDecision(use_retrieval=False, reason="Retrieval practice disabled")
        return should_use_retrieval(current_mastery, last_retrieval_test, attempt_count, now=now)

    def record_retrieval_attempt(
        self,
        skill_id: str,
        response_time_ms: float,
        is_correct: bool,
        confidence_rating: int,
        hints_used: int,
    ) -> float:
        """Score a retrieval attempt and append it to the skill's history."""
        strength = measure_retrieval_strength(
            response_time_ms, is_correct, confidence_rating, hints_used
        )
        self.retrieval_strengths.setdefault(skill_id, []).append(strength)
        logger.debug(f"Retrieval strength for {skill_id}: {strength:.2f}")
        return strength

    # =========================================================================
    # Effectiveness
    # =========================================================================

    def effectiveness_report(self, delay_days: float) -> Optional[InterleavingEffectiveness]:
        """None until both pre and post accuracy have been recorded."""
        if self.pre_accuracy is None or self.post_accuracy is None:
            return None
        return track_interleaving_effectiveness(self.pre_accuracy, self.post_accuracy, delay_days)

    @property
    def active_difficulties(self) -> list[str]:
        active = []
        if self._can_interleave:
            active.append("interleaving")
        if self.settings.spacing:
            active.append("spacing")
        if self.settings.retrieval:
            active.append("retrieval")
        if self.settings.variation:
            active.append("variation")
        return active

    @property
    def strengths(self) -> DifficultyStrengths:
        interleaving = 0.0
        if self.settings.interleaving and self.session:
            interleaving = min(
                self.session.estimated_retention_boost / C.RETENTION_BOOST_CEILING, 1.0
            )

        all_strengths = [s for values in self.retrieval_strengths.values() for s in values]
        if all_strengths:
            retrieval = sum(all_strengths) / len(all_strengths)
        else:
            retrieval = C.NEUTRAL_RETRIEVAL_STRENGTH if self.settings.retrieval else 0.0

        variation = 0.0
        if self.settings.variation:
            variation = min(len(set(self.variations_used)) / len(VariationType), 1.0)

        return DifficultyStrengths(
            interleaving=interleaving,
            spacing=C.ASSUMED_SPACING_STRENGTH if self.settings.spacing else 0.0,
            retrieval=retrieval,
            variation=variation,
        )
