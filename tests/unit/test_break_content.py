"""
Unit tests for the break content catalog.
"""
import random

import pytest

from practice_scheduler.attention.break_content import (
    BREATHING_EXERCISES,
    CATALOG,
    MOVEMENT_EXERCISES,
    BreathingPattern,
    get_break_type_name,
    get_exercise_by_id,
    get_quick_break,
    get_random_exercise,
)
from practice_scheduler.models import BreakType


class TestCatalog:
    def test_every_type_has_exercises(self):
        assert set(CATALOG) == set(BreakType)
        assert all(CATALOG[t] for t in BreakType)

    def test_ids_are_unique(self):
        ids = [e.id for exercises in CATALOG.values() for e in exercises]
        assert len(ids) == len(set(ids))

    def test_breaks_fit_the_two_minute_window(self):
        for exercises in CATALOG.values():
            for exercise in exercises:
                assert 0 < exercise.duration_ms <= 120_000, exercise.id

    def test_breathing_durations_match_cycles(self):
        for exercise in BREATHING_EXERCISES:
            assert exercise.duration_ms == exercise.pattern.cycle_ms * exercise.cycles

    def test_cycle_length(self):
        assert BreathingPattern(4000, 7000, 8000, 0).cycle_ms == 19000


class TestSelection:
    @pytest.mark.parametrize("break_type", list(BreakType))
    def test_random_exercise_matches_type(self, break_type, rng):
        content = get_random_exercise(break_type, rng=rng)

        assert content.type is break_type
        assert content.exercise in CATALOG[break_type]

    def test_seated_only_excludes_standing(self):
        picks = {
            get_random_exercise(BreakType.MOVEMENT, seated_only=True, rng=random.Random(s)).exercise.id
            for s in range(100)
        }
        assert "standing-stretch" not in picks
        assert picks == {e.id for e in MOVEMENT_EXERCISES if e.seated_friendly}

    def test_seated_only_ignored_for_other_types(self):
        picks = {
            get_random_exercise(BreakType.GAZE_SHIFT, seated_only=True, rng=random.Random(s)).exercise.id
            for s in range(100)
        }
        assert len(picks) == len(CATALOG[BreakType.GAZE_SHIFT])

    def test_lookup_by_id(self):
        content = get_exercise_by_id("palming")
        assert content.type is BreakType.GAZE_SHIFT
        assert content.exercise.name

    def test_unknown_id(self):
        assert get_exercise_by_id("handstand") is None

    @pytest.mark.parametrize(
        "break_type, exercise_id",
        [
            (BreakType.BREATHING, "energizing-breath"),
            (BreakType.MOVEMENT, "shoulder-shrugs"),
            (BreakType.MINDFULNESS, "gratitude-moment"),
            (BreakType.GAZE_SHIFT, "20-20-20"),
        ],
    )
    def test_quick_break(self, break_type, exercise_id):
        content = get_quick_break(break_type)
        assert content.type is break_type
        assert content.exercise.id == exercise_id

    def test_display_names(self):
        assert get_break_type_name(BreakType.GAZE_SHIFT) == "Eye Rest"
        assert get_break_type_name(BreakType.MINDFULNESS) == "Mindfulness Moment"
