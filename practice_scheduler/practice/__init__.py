"""
Desirable Difficulties for Practice.

Based on Bjork & Bjork:
- Interleaving: mix skills instead of blocking them
- Variation: vary the surface form of questions
- Retrieval: prefer recall over restudy once there is something to recall
"""
from practice_scheduler.practice.interleaving import (
    calculate_optimal_mix_ratio,
    calculate_retention_boost,
    generate_interleaved_session,
    track_interleaving_effectiveness,
)
from practice_scheduler.practice.retrieval import (
    generate_retrieval_prompts,
    measure_retrieval_strength,
    should_use_retrieval,
)
from practice_scheduler.practice.tracker import (
    DesirableDifficultyTracker,
    DifficultySettings,
    DifficultyStrengths,
)
from practice_scheduler.practice.variation import (
    generate_variation_prompt,
    select_variation_type,
)

__all__ = [
    # Interleaving
    "generate_interleaved_session",
    "calculate_optimal_mix_ratio",
    "calculate_retention_boost",
    "track_interleaving_effectiveness",
    # Variation
    "select_variation_type",
    "generate_variation_prompt",
    # Retrieval
    "should_use_retrieval",
    "generate_retrieval_prompts",
    "measure_retrieval_strength",
    # Host-side tracking
    "DesirableDifficultyTracker",
    "DifficultySettings",
    "DifficultyStrengths",
]
