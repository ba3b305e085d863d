"""
Variation Selector.

Chooses how a question instance should be re-presented so the learner
meets the same concept in different surface forms:
- context: new scenario (weighted up for higher-order Bloom levels)
- format: new response format
- numerical: new values, same structure (weighted up for harder skills)
- phrasing: new wording (weighted up once mastery is high)

The text itself is produced by the content provider from the
VariationPrompt built here.
"""
from __future__ import annotations

import random
from typing import Optional, Sequence

from loguru import logger

from practice_scheduler import constants as C
from practice_scheduler.models import Skill, VariationPrompt, VariationType

CONTEXT_VARIATIONS = (
    "real-world application",
    "historical example",
    "everyday situation",
    "professional scenario",
    "scientific context",
    "creative/artistic context",
)

FORMAT_VARIATIONS = (
    "multiple choice",
    "fill in the blank",
    "true/false",
    "short answer",
    "matching",
    "ordering/sequencing",
)


def variation_weights(skill: Skill) -> dict[VariationType, float]:
    """Selection weight of each variation type for this skill."""
    high_mastery = skill.p_mastery is not None and skill.p_mastery > C.PHRASING_MASTERY
    return {
        VariationType.CONTEXT: (
            C.CONTEXT_WEIGHT_HIGH if skill.bloom_level >= C.CONTEXT_BLOOM_LEVEL
            else C.BASE_VARIATION_WEIGHT
        ),
        VariationType.FORMAT: C.BASE_VARIATION_WEIGHT,
        VariationType.NUMERICAL: (
            C.NUMERICAL_WEIGHT_HIGH if skill.difficulty > C.NUMERICAL_DIFFICULTY
            else C.BASE_VARIATION_WEIGHT
        ),
        VariationType.PHRASING: (
            C.PHRASING_WEIGHT_HIGH if high_mastery else C.BASE_VARIATION_WEIGHT
        ),
    }


def select_variation_type(
    skill: Skill,
    previous_variations: Sequence[VariationType],
    rng: Optional[random.Random] = None,
) -> VariationType:
    """
    Select a variation type, avoiding the three most recently used.

    Args:
        skill: Skill being practiced
        previous_variations: Variation history, most recent last
        rng: Random source (a fresh unseeded Random if None)

    Returns:
        The chosen VariationType
    """
    rng = rng or random.Random()
    all_types = list(VariationType)

    recently_used = set(previous_variations[-C.VARIATION_HISTORY_WINDOW:])
    pool = [t for t in all_types if t not in recently_used] or all_types

    weights = variation_weights(skill)
    remaining = rng.random() * sum(weights[t] for t in pool)

    for variation_type in pool:
        remaining -= weights[variation_type]
        if remaining <= 0:
            logger.debug(f"Variation for {skill.id}: {variation_type.value}")
            return variation_type

    return pool[0]


def generate_variation_prompt(
    original_question: str,
    variation_type: VariationType,
    skill_context: str,
    rng: Optional[random.Random] = None,
) -> VariationPrompt:
    """
    Build the instruction handed to the content provider.

    Args:
        original_question: Question text to vary
        variation_type: Chosen variation
        skill_context: Skill name or description
        rng: Random source for picking the new context/format

    Returns:
        VariationPrompt
    """
    rng = rng or random.Random()

    if variation_type is VariationType.CONTEXT:
        new_context = rng.choice(CONTEXT_VARIATIONS)
        text = f"""Rewrite this question to use a {new_context} context while testing the same concept:

Original: {original_question}
Skill: {skill_context}

Requirements:
- Keep the same difficulty level
- Test the same underlying concept
- Use the new context naturally
- Maintain clear, unambiguous phrasing"""

    elif variation_type is VariationType.FORMAT:
        new_format = rng.choice(FORMAT_VARIATIONS)
        text = f"""Convert this question to {new_format} format while testing the same concept:

Original: {original_question}
Skill: {skill_context}

Requirements:
- Keep the same difficulty level
- Test the same underlying concept
- Make the new format work naturally
- Provide clear instructions for the new format"""

    elif variation_type is VariationType.NUMERICAL:
        text = f"""Create a numerical variation of this question with different numbers but the same structure:

Original: {original_question}
Skill: {skill_context}

Requirements:
- Change all numerical values
- Keep the same difficulty level
- Ensure the new numbers are realistic
- The solution process should be identical"""

    else:
        text = f"""Rephrase this question using different wording while keeping the same meaning:

Original: {original_question}
Skill: {skill_context}

Requirements:
- Keep the exact same meaning
- Use different vocabulary and syntax
- Maintain the same difficulty
- Preserve or improve clarity"""

    return VariationPrompt(variation_type=variation_type, instruction_text=text)
