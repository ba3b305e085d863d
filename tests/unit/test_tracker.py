"""
Unit tests for the DesirableDifficultyTracker.
"""
import random
from datetime import timedelta

import pytest

from practice_scheduler.models import Skill, VariationType
from practice_scheduler.practice.tracker import DesirableDifficultyTracker, DifficultySettings


@pytest.fixture
def tracker(sample_skills):
    return DesirableDifficultyTracker(sample_skills, questions_per_skill=2, rng=random.Random(5))


class TestSettings:
    def test_toggle(self):
        settings = DifficultySettings()
        settings.toggle("spacing")
        assert settings.spacing is False
        settings.toggle("spacing")
        assert settings.spacing is True

    def test_unknown_setting(self):
        with pytest.raises(ValueError):
            DifficultySettings().toggle("desirability")


class TestInterleavingCursor:
    def test_walks_the_session(self, tracker):
        session = tracker.generate_session()

        seen = []
        while (skill_id := tracker.current_skill_id()) is not None:
            seen.append(skill_id)
            tracker.advance()

        assert seen == [q.skill_id for q in session.questions]
        assert len(seen) == 6

    def test_regenerating_resets_cursor(self, tracker):
        tracker.generate_session()
        tracker.advance()
        tracker.advance()
        tracker.generate_session()
        assert tracker.current_index == 0

    def test_total_questions_passed_through(self, sample_skills):
        tracker = DesirableDifficultyTracker(
            sample_skills, questions_per_skill=4, total_questions=5, rng=random.Random(1)
        )
        assert len(tracker.generate_session().questions) == 5

    def test_single_skill_does_not_interleave(self):
        tracker = DesirableDifficultyTracker([Skill(id="a", name="A")])

        assert tracker.generate_session() is None
        assert tracker.current_skill_id() is None
        assert tracker.skill_mix_ratio == {}
        assert "interleaving" not in tracker.active_difficulties

    def test_disabled_interleaving(self, sample_skills):
        tracker = DesirableDifficultyTracker(
            sample_skills, settings=DifficultySettings(interleaving=False)
        )
        assert tracker.generate_session() is None
        assert tracker.estimated_retention_boost == 0.0
        assert tracker.interleave_switches == 0

    def test_session_metrics(self, tracker):
        session = tracker.generate_session()
        assert tracker.estimated_retention_boost == session.estimated_retention_boost
        assert tracker.interleave_switches == session.switch_count
        assert sum(tracker.skill_mix_ratio.values()) == pytest.approx(1.0)


class TestVariation:
    def test_prompt_sets_current_variation(self, tracker):
        prompt = tracker.variation_prompt("What is 20% of 80?", "Percentages")

        assert prompt is not None
        assert tracker.current_variation is prompt.variation_type
        assert "Skill: Percentages" in prompt.instruction_text

    def test_unknown_skill_name_falls_back_to_first(self, tracker):
        assert tracker.variation_prompt("Q", "Geometry") is not None

    def test_disabled_variation(self, sample_skills):
        tracker = DesirableDifficultyTracker(
            sample_skills, settings=DifficultySettings(variation=False)
        )
        assert tracker.variation_prompt("Q", "Ratios") is None

    def test_no_skills(self):
        assert DesirableDifficultyTracker([]).variation_prompt("Q", "Ratios") is None

    def test_history_steers_selection(self, tracker):
        for variation_type in (VariationType.CONTEXT, VariationType.FORMAT, VariationType.NUMERICAL):
            tracker.record_variation_used(variation_type)

        prompt = tracker.variation_prompt("Q", "Ratios")
        assert prompt.variation_type is VariationType.PHRASING


class TestRetrieval:
    def test_delegates_decision(self, tracker, now):
        decision = tracker.should_use_retrieval(0.6, now - timedelta(days=2), 4, now=now)
        assert decision.use_retrieval is True

    def test_disabled_retrieval(self, sample_skills):
        tracker = DesirableDifficultyTracker(
            sample_skills, settings=DifficultySettings(retrieval=False)
        )
        decision = tracker.should_use_retrieval(0.6, None, 4)
        assert decision.use_retrieval is False
        assert decision.reason == "Retrieval practice disabled"

    def test_attempts_are_recorded_per_skill(self, tracker):
        tracker.record_retrieval_attempt("ratios", 5000, True, 5, 0)
        tracker.record_retrieval_attempt("ratios", 45000, False, 1, 0)

        assert tracker.retrieval_strengths["ratios"] == [pytest.approx(0.9), pytest.approx(0.2)]


class TestEffectivenessAndStrengths:
    def test_report_needs_both_accuracies(self, tracker):
        assert tracker.effectiveness_report(3) is None
        tracker.pre_accuracy = 0.5
        assert tracker.effectiveness_report(3) is None

        tracker.post_accuracy = 0.8
        report = tracker.effectiveness_report(3)
        assert report.is_effective is True

    def test_default_strengths(self, tracker):
        strengths = tracker.strengths

        assert strengths.interleaving == 0.0
        assert strengths.spacing == pytest.approx(0.7)
        assert strengths.retrieval == pytest.approx(0.5)
        assert strengths.variation == 0.0

    def test_strengths_follow_activity(self, tracker):
        tracker.generate_session()
        tracker.record_retrieval_attempt("ratios", 5000, True, 5, 0)
        tracker.record_retrieval_attempt("percent", 5000, True, 5, 2)
        tracker.record_variation_used(VariationType.CONTEXT)
        tracker.record_variation_used(VariationType.CONTEXT)
        tracker.record_variation_used(VariationType.FORMAT)

        strengths = tracker.strengths
        assert 0.0 < strengths.interleaving <= 1.0
        assert strengths.retrieval == pytest.approx(0.8)
        assert strengths.variation == pytest.approx(0.5)

    def test_disabled_difficulties_have_zero_strength(self, sample_skills):
        settings = DifficultySettings(
            interleaving=False, spacing=False, retrieval=False, variation=False
        )
        tracker = DesirableDifficultyTracker(sample_skills, settings=settings)

        strengths = tracker.strengths
        assert (strengths.interleaving, strengths.spacing, strengths.retrieval, strengths.variation) == (
            0.0, 0.0, 0.0, 0.0,
        )
        assert tracker.active_difficulties == []

    def test_active_difficulties(self, tracker):
        assert tracker.active_difficulties == ["interleaving", "spacing", "retrieval", "variation"]
