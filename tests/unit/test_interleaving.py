"""
Unit tests for the interleaving scheduler and effectiveness tracking.
"""
import random

import pytest

from practice_scheduler.models import LearnerProfile, Skill
from practice_scheduler.practice.interleaving import (
    calculate_optimal_mix_ratio,
    calculate_retention_boost,
    generate_interleaved_session,
    track_interleaving_effectiveness,
)


def _unforced_repeats(questions) -> list[int]:
    """Positions that repeat the previous skill while another skill was still available."""
    bad = []
    for i in range(1, len(questions)):
        prev = questions[i - 1].skill_id
        if questions[i].skill_id == prev:
            if any(q.skill_id != prev for q in questions[i:]):
                bad.append(i)
    return bad


class TestAdjacency:
    @pytest.mark.parametrize("seed", range(25))
    def test_three_skills_four_questions_no_unforced_repeats(self, sample_skills, seed):
        session = generate_interleaved_session(sample_skills, 4, rng=random.Random(seed))

        assert len(session.questions) == 12
        assert _unforced_repeats(session.questions) == []

    def test_single_skill_forces_repeats(self, rng):
        skills = [Skill(id="a", name="A")]
        session = generate_interleaved_session(skills, 3, rng=rng)

        assert [q.skill_id for q in session.questions] == ["a", "a", "a"]
        assert session.switch_count == 0
        assert session.estimated_retention_boost == 0.0

    def test_two_balanced_skills_alternate(self, rng):
        skills = [Skill(id="a", name="A"), Skill(id="b", name="B")]
        session = generate_interleaved_session(skills, 5, rng=rng)

        ids = [q.skill_id for q in session.questions]
        assert all(x != y for x, y in zip(ids, ids[1:]))
        assert session.estimated_retention_boost == pytest.approx(0.3)


class TestSessionShape:
    def test_question_fields(self, sample_skills, rng):
        session = generate_interleaved_session(sample_skills, 2, rng=rng)

        first = session.questions[0]
        assert first.position == 0
        assert first.previous_skill_id is None
        assert first.is_switch_point is False

        for i, q in enumerate(session.questions[1:], start=1):
            assert q.position == i
            assert q.previous_skill_id == session.questions[i - 1].skill_id
            assert q.is_switch_point == (q.skill_id != q.previous_skill_id)

    def test_question_ids_are_unique(self, sample_skills, rng):
        session = generate_interleaved_session(sample_skills, 4, rng=rng)
        ids = [q.question_id for q in session.questions]
        assert len(set(ids)) == len(ids)
        assert all("-" in qid for qid in ids)

    def test_total_questions_truncates(self, sample_skills, rng):
        session = generate_interleaved_session(sample_skills, 4, total_questions=5, rng=rng)

        assert len(session.questions) == 5
        assert sum(session.skill_mix_ratio.values()) == pytest.approx(1.0)
        # pool of 12, 5 emitted, no repeats needed with three skills
        assert session.blocking_prevented == 12 - 5 - 0

    def test_total_larger_than_pool_stops_at_pool(self, sample_skills, rng):
        session = generate_interleaved_session(sample_skills, 1, total_questions=10, rng=rng)
        assert len(session.questions) == 3

    def test_mix_ratio_reflects_counts(self, sample_skills, rng):
        session = generate_interleaved_session(sample_skills, 4, rng=rng)
        assert session.skill_mix_ratio == {
            "fractions": pytest.approx(1 / 3),
            "ratios": pytest.approx(1 / 3),
            "percent": pytest.approx(1 / 3),
        }

    def test_same_seed_same_session(self, sample_skills):
        a = generate_interleaved_session(sample_skills, 4, rng=random.Random(99))
        b = generate_interleaved_session(sample_skills, 4, rng=random.Random(99))
        assert a == b


class TestDegenerateInput:
    def test_empty_skills(self, rng):
        session = generate_interleaved_session([], 3, rng=rng)

        assert session.questions == ()
        assert session.skill_mix_ratio == {}
        assert session.estimated_retention_boost == 0
        assert session.blocking_prevented == 0

    def test_zero_questions_per_skill(self, sample_skills, rng):
        session = generate_interleaved_session(sample_skills, 0, rng=rng)
        assert session.questions == ()

    def test_retention_boost_needs_two_questions(self):
        assert calculate_retention_boost([]) == 0.0


class TestOptimalMixRatio:
    def test_sums_to_one(self, sample_skills):
        ratios = calculate_optimal_mix_ratio(sample_skills, LearnerProfile())
        assert sum(ratios.values()) == pytest.approx(1.0, abs=1e-9)

    def test_lower_mastery_gets_larger_share(self, sample_skills):
        ratios = calculate_optimal_mix_ratio(sample_skills)
        assert ratios["fractions"] > ratios["ratios"] > ratios["percent"]

    def test_exact_weights(self):
        skills = [
            Skill(id="a", name="A", p_mastery=1.0),   # weight 0.3
            Skill(id="b", name="B", p_mastery=0.4),   # weight 0.9
        ]
        ratios = calculate_optimal_mix_ratio(skills)
        assert ratios["a"] == pytest.approx(0.25)
        assert ratios["b"] == pytest.approx(0.75)

    def test_unknown_mastery_defaults_to_half(self):
        skills = [Skill(id="a", name="A"), Skill(id="b", name="B", p_mastery=0.5)]
        ratios = calculate_optimal_mix_ratio(skills)
        assert ratios["a"] == pytest.approx(ratios["b"])

    def test_profile_does_not_change_weights(self, sample_skills):
        eager = LearnerProfile(preference_for_challenge=1.0, attention_span=0.1)
        calm = LearnerProfile(preference_for_challenge=0.0, attention_span=1.0)
        assert calculate_optimal_mix_ratio(sample_skills, eager) == calculate_optimal_mix_ratio(
            sample_skills, calm
        )

    def test_empty_skills(self):
        assert calculate_optimal_mix_ratio([]) == {}


class TestEffectiveness:
    def test_working_well(self):
        result = track_interleaving_effectiveness(0.5, 0.7, 0)
        assert result.is_effective is True
        assert result.effect_size == pytest.approx(0.2)
        assert "working well" in result.recommendation

    def test_delay_amplifies_small_gain(self):
        # 0.08 alone is a slight improvement; after 10 days it becomes 0.12
        assert "Slight improvement" in track_interleaving_effectiveness(0.5, 0.58, 0).recommendation
        result = track_interleaving_effectiveness(0.5, 0.58, 10)
        assert result.effect_size == pytest.approx(0.12)
        assert "working well" in result.recommendation

    def test_no_gain_needs_adjustment(self):
        result = track_interleaving_effectiveness(0.6, 0.55, 3)
        assert result.is_effective is False
        assert "adjustment" in result.recommendation
