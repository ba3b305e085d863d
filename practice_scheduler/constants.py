"""
Tunable constants for the practice scheduler heuristics.

Grouped by component. Time values are milliseconds unless the name
says otherwise.
"""
from __future__ import annotations

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_DAY = 24 * 60 * MS_PER_MINUTE

# =============================================================================
# Telemetry window
# =============================================================================

TELEMETRY_WINDOW_CAP = 20
DEFAULT_COGNITIVE_LOAD = 0.5

# =============================================================================
# Fatigue detection
# =============================================================================

FATIGUE_WINDOW = 5                      # Recent window compared against the one before it
RESPONSE_SLOWDOWN_RATIO = 1.3           # 30% slower than the preceding window
RESPONSE_SLOWDOWN_SCORE = 0.3
RESPONSE_CV_THRESHOLD = 0.5             # Coefficient of variation of the recent window
RESPONSE_CV_SCORE = 0.2
ACCURACY_DROP_THRESHOLD = 0.2
ACCURACY_DROP_SCORE = 0.3
ACCURACY_TOLERANCE = 1e-9               # Absorbs float error in accuracy differences
EXTENDED_NO_BREAK_MS = 15 * MS_PER_MINUTE
EXTENDED_NO_BREAK_SCORE = 0.4
APPROACHING_BREAK_MS = 10 * MS_PER_MINUTE
APPROACHING_BREAK_SCORE = 0.2

# =============================================================================
# Break recommendation
# =============================================================================

DEFAULT_MIN_SESSION_DURATION_MS = 10 * MS_PER_MINUTE
DEFAULT_MAX_SESSION_DURATION_MS = 15 * MS_PER_MINUTE
DEFAULT_BREAK_DURATION_MS = 75 * MS_PER_SECOND

STRONG_FATIGUE_LEVEL = 0.7
RECOMMENDED_FATIGUE_LEVEL = 0.5
SUGGESTED_FATIGUE_LEVEL = 0.3

HIGH_COGNITIVE_LOAD = 0.7
LONG_SESSION_MS = 20 * MS_PER_MINUTE
GAZE_SHIFT_MIN_RESPONSES = 20

BREAK_DURATION_FATIGUE_FACTOR = 0.3
MAX_BREAK_DURATION_MS = 120 * MS_PER_SECOND
CHECK_INTERVAL_IDLE_MS = 60 * MS_PER_SECOND
CHECK_INTERVAL_ACTIVE_MS = 30 * MS_PER_SECOND

BREAK_INTERVAL_LOAD_FACTOR = 0.3        # Full load shortens the interval by 30%

# Controller
DISMISS_COOLDOWN_MS = 5 * MS_PER_MINUTE

# =============================================================================
# Recovery evaluation
# =============================================================================

RECOVERY_MIN_SAMPLES = 3
RECOVERY_NEUTRAL_SCORE = 0.5

# (lower bound on improvement, score) evaluated top-down
RECOVERY_BANDS = (
    (0.2, 1.0),
    (0.1, 0.8),
    (0.0, 0.6),
    (-0.1, 0.4),
)
RECOVERY_FLOOR_SCORE = 0.2

# =============================================================================
# Interleaving
# =============================================================================

RETENTION_BOOST_CEILING = 0.3
MASTERY_WEIGHT_FLOOR = 0.3
DEFAULT_MASTERY = 0.5
EFFECTIVENESS_DELAY_FACTOR = 0.05
EFFECTIVENESS_STRONG_THRESHOLD = 0.1

# =============================================================================
# Variation
# =============================================================================

VARIATION_HISTORY_WINDOW = 3
CONTEXT_BLOOM_LEVEL = 3
CONTEXT_WEIGHT_HIGH = 2.0
NUMERICAL_DIFFICULTY = 0.5
NUMERICAL_WEIGHT_HIGH = 1.5
PHRASING_MASTERY = 0.7
PHRASING_WEIGHT_HIGH = 1.5
BASE_VARIATION_WEIGHT = 1.0

# =============================================================================
# Retrieval practice
# =============================================================================

RETRIEVAL_MIN_ATTEMPTS = 2
RETRIEVAL_OPTIMAL_MASTERY_LOW = 0.4
RETRIEVAL_OPTIMAL_MASTERY_HIGH = 0.8
RETRIEVAL_OPTIMAL_MIN_DAYS = 1
RETRIEVAL_SPACING_DAYS = 3

RETRIEVAL_APPLICATION_ATTEMPTS = 3
RETRIEVAL_CONNECTION_ATTEMPTS = 6

STRENGTH_BASE_CORRECT = 0.6
STRENGTH_BASE_INCORRECT = 0.2
STRENGTH_FAST_MS = 10 * MS_PER_SECOND
STRENGTH_FAST_BONUS = 0.15
STRENGTH_MODERATE_MS = 30 * MS_PER_SECOND
STRENGTH_MODERATE_BONUS = 0.10
STRENGTH_HIGH_CONFIDENCE = 4
STRENGTH_HIGH_CONFIDENCE_BONUS = 0.15
STRENGTH_MID_CONFIDENCE = 3
STRENGTH_MID_CONFIDENCE_BONUS = 0.05
STRENGTH_HINT_PENALTY = 0.10

# =============================================================================
# Desirable-difficulty tracking
# =============================================================================

MIN_SKILLS_FOR_INTERLEAVING = 2
ASSUMED_SPACING_STRENGTH = 0.7          # Spacing is delegated to the review scheduler
NEUTRAL_RETRIEVAL_STRENGTH = 0.5
