"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from practice_scheduler.models import SessionState, Skill  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep loguru output out of test reports."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    yield
    logger.remove()


@pytest.fixture
def rng():
    """Seeded random source for reproducible draws."""
    return random.Random(1234)


@pytest.fixture
def now():
    """Fixed evaluation time."""
    return datetime(2024, 3, 1, 10, 0, 0)


@pytest.fixture
def sample_skills():
    """Three skills with varied mastery."""
    return [
        Skill(id="fractions", name="Adding Fractions", bloom_level=2, difficulty=0.4, p_mastery=0.3),
        Skill(id="ratios", name="Ratios", bloom_level=3, difficulty=0.6, p_mastery=0.6),
        Skill(id="percent", name="Percentages", bloom_level=4, difficulty=0.7, p_mastery=0.9),
    ]


@pytest.fixture
def make_state(now):
    """
    Build a SessionState relative to the fixed clock.

    minutes_since_start / minutes_since_break are measured back from `now`.
    """
    def _make(
        minutes_since_start: float = 0,
        minutes_since_break: float | None = None,
        response_times=(),
        correctness=None,
        cognitive_load: float = 0.5,
        breaks_taken: int = 0,
    ) -> SessionState:
        if correctness is None:
            correctness = tuple(True for _ in response_times)
        return SessionState(
            session_start_time=now - timedelta(minutes=minutes_since_start),
            last_break_time=(
                now - timedelta(minutes=minutes_since_break)
                if minutes_since_break is not None else None
            ),
            total_breaks_taken=breaks_taken,
            recent_response_times=tuple(response_times),
            recent_correctness=tuple(correctness),
            current_cognitive_load=cognitive_load,
        )

    return _make
