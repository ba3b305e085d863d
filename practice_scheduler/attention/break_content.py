"""
Break Content Catalog.

Guided activities offered during microbreaks, one catalog per BreakType.
The session UI renders these; this module only selects them.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Union

from practice_scheduler.models import BreakType


@dataclass(frozen=True)
class BreathingPattern:
    inhale_ms: int
    hold_after_inhale_ms: int
    exhale_ms: int
    hold_after_exhale_ms: int

    @property
    def cycle_ms(self) -> int:
        return self.inhale_ms + self.hold_after_inhale_ms + self.exhale_ms + self.hold_after_exhale_ms


@dataclass(frozen=True)
class BreathingExercise:
    id: str
    name: str
    description: str
    pattern: BreathingPattern
    duration_ms: int
    cycles: int


@dataclass(frozen=True)
class MovementExercise:
    id: str
    name: str
    description: str
    instructions: tuple[str, ...]
    duration_ms: int
    muscle_groups: tuple[str, ...]
    seated_friendly: bool


@dataclass(frozen=True)
class MindfulnessExercise:
    id: str
    name: str
    description: str
    prompts: tuple[str, ...]
    duration_ms: int
    focus_type: str  # awareness, gratitude, body_scan, visualization


@dataclass(frozen=True)
class GazeShiftExercise:
    id: str
    name: str
    description: str
    instructions: tuple[str, ...]
    duration_ms: int


Exercise = Union[BreathingExercise, MovementExercise, MindfulnessExercise, GazeShiftExercise]


@dataclass(frozen=True)
class BreakContent:
    """An exercise tagged with its break type."""
    type: BreakType
    exercise: Exercise


# =============================================================================
# Catalogs
# =============================================================================

BREATHING_EXERCISES: tuple[BreathingExercise, ...] = (
    BreathingExercise(
        id="box-breathing",
        name="Box Breathing",
        description="Equal-count breathing to calm the nervous system",
        pattern=BreathingPattern(4000, 4000, 4000, 4000),
        duration_ms=64000,
        cycles=4,
    ),
    BreathingExercise(
        id="4-7-8-breathing",
        name="4-7-8 Relaxing Breath",
        description="Long hold and slow exhale for relaxation",
        pattern=BreathingPattern(4000, 7000, 8000, 0),
        duration_ms=76000,
        cycles=4,
    ),
    BreathingExercise(
        id="energizing-breath",
        name="Energizing Breath",
        description="Quick breaths to boost alertness",
        pattern=BreathingPattern(2000, 1000, 2000, 0),
        duration_ms=50000,
        cycles=10,
    ),
    BreathingExercise(
        id="calm-breath",
        name="Calming Breath",
        description="Extended exhale for relaxation",
        pattern=BreathingPattern(3000, 0, 6000, 0),
        duration_ms=72000,
        cycles=8,
    ),
)

MOVEMENT_EXERCISES: tuple[MovementExercise, ...] = (
    MovementExercise(
        id="neck-rolls",
        name="Gentle Neck Rolls",
        description="Release tension in neck and shoulders",
        instructions=(
            "Drop your chin to your chest",
            "Slowly roll your head to the right",
            "Continue rolling to look up",
            "Roll to the left and back down",
            "Repeat in the opposite direction",
        ),
        duration_ms=60000,
        muscle_groups=("neck", "upper back"),
        seated_friendly=True,
    ),
    MovementExercise(
        id="shoulder-shrugs",
        name="Shoulder Shrugs",
        description="Release shoulder tension",
        instructions=(
            "Raise both shoulders toward your ears",
            "Hold for 3 seconds",
            "Release and let them drop",
            "Repeat 5 times",
            "Roll shoulders forward, then backward",
        ),
        duration_ms=45000,
        muscle_groups=("shoulders", "upper back"),
        seated_friendly=True,
    ),
    MovementExercise(
        id="wrist-stretches",
        name="Wrist and Hand Stretches",
        description="Relief for typing fatigue",
        instructions=(
            "Extend your right arm, palm up",
            "Use your left hand to gently pull the fingers down",
            "Hold for 10 seconds",
            "Turn the palm down and pull the fingers up",
            "Repeat with the left arm",
        ),
        duration_ms=60000,
        muscle_groups=("wrists", "forearms", "hands"),
        seated_friendly=True,
    ),
    MovementExercise(
        id="standing-stretch",
        name="Standing Stretch",
        description="Full body stretch",
        instructions=(
            "Stand up from your chair",
            "Reach both arms overhead",
            "Interlace your fingers and stretch upward",
            "Lean gently to each side",
            "Shake out your arms and legs",
        ),
        duration_ms=75000,
        muscle_groups=("full body",),
        seated_friendly=False,
    ),
    MovementExercise(
        id="desk-twist",
        name="Seated Spinal Twist",
        description="Gentle back rotation",
        instructions=(
            "Sit up straight in your chair",
            "Place your right hand on your left knee",
            "Twist gently to the left",
            "Hold for 15 seconds",
            "Repeat on the other side",
        ),
        duration_ms=60000,
        muscle_groups=("spine", "core"),
        seated_friendly=True,
    ),
)

MINDFULNESS_EXERCISES: tuple[MindfulnessExercise, ...] = (
    MindfulnessExercise(
        id="breath-awareness",
        name="Breath Awareness",
        description="Simply notice your breathing",
        prompts=(
            "Close your eyes or soften your gaze",
            "Notice the natural rhythm of your breath",
            "Feel the air entering through your nose",
            "Notice your chest and belly rising",
            "There is nothing to change, just observe",
            "When your mind wanders, gently return to the breath",
        ),
        duration_ms=60000,
        focus_type="awareness",
    ),
    MindfulnessExercise(
        id="gratitude-moment",
        name="Gratitude Moment",
        description="Quick appreciation practice",
        prompts=(
            "Take a deep breath",
            "Think of one thing you are grateful for right now",
            "It can be something small, like this moment of rest",
            "Feel the appreciation in your body",
            "Carry this feeling back to your work",
        ),
        duration_ms=45000,
        focus_type="gratitude",
    ),
    MindfulnessExercise(
        id="body-scan-mini",
        name="Quick Body Scan",
        description="Notice sensations in your body",
        prompts=(
            "Notice your feet on the floor",
            "Feel where your body meets the chair",
            "Notice any tension in your shoulders",
            "Relax your jaw and face muscles",
            "Soften your eyes",
            "Take one deep breath",
        ),
        duration_ms=60000,
        focus_type="body_scan",
    ),
    MindfulnessExercise(
        id="mental-reset",
        name="Mental Reset",
        description="Clear your mind briefly",
        prompts=(
            "Imagine your thoughts as clouds",
            "Watch them drift across the sky",
            "You do not need to hold onto any thought",
            "Let each one pass naturally",
            "Notice the clear sky behind the clouds",
            "Return with a fresh perspective",
        ),
        duration_ms=75000,
        focus_type="visualization",
    ),
)

GAZE_SHIFT_EXERCISES: tuple[GazeShiftExercise, ...] = (
    GazeShiftExercise(
        id="20-20-20",
        name="20-20-20 Rule",
        description="Look at something 20 feet away for 20 seconds",
        instructions=(
            "Look away from your screen",
            "Find something about 20 feet (6 meters) away",
            "Focus on it for 20 seconds",
            "Let your eye muscles relax",
            "Blink naturally several times",
        ),
        duration_ms=30000,
    ),
    GazeShiftExercise(
        id="window-gaze",
        name="Window Gazing",
        description="Look out a window if available",
        instructions=(
            "Look toward a window",
            "Focus on the farthest point you can see",
            "Let your eyes adjust naturally",
            "Notice colors, movement, or clouds",
            "Take three slow breaths",
        ),
        duration_ms=45000,
    ),
    GazeShiftExercise(
        id="eye-circles",
        name="Eye Circles",
        description="Gentle eye movement exercise",
        instructions=(
            "Look up without moving your head",
            "Slowly circle your eyes clockwise",
            "Complete 3 circles",
            "Reverse direction for 3 more circles",
            "Close your eyes and rest for a moment",
        ),
        duration_ms=45000,
    ),
    GazeShiftExercise(
        id="palming",
        name="Eye Palming",
        description="Rest your eyes in darkness",
        instructions=(
            "Rub your palms together to warm them",
            "Cup your palms over your closed eyes",
            "Do not press on your eyes",
            "Enjoy the darkness for 30 seconds",
            "Slowly remove your hands and open your eyes",
        ),
        duration_ms=60000,
    ),
)

CATALOG: dict[BreakType, tuple[Exercise, ...]] = {
    BreakType.BREATHING: BREATHING_EXERCISES,
    BreakType.MOVEMENT: MOVEMENT_EXERCISES,
    BreakType.MINDFULNESS: MINDFULNESS_EXERCISES,
    BreakType.GAZE_SHIFT: GAZE_SHIFT_EXERCISES,
}

# Shortest useful exercise per type
_QUICK_BREAK_IDS = {
    BreakType.BREATHING: "energizing-breath",
    BreakType.MOVEMENT: "shoulder-shrugs",
    BreakType.MINDFULNESS: "gratitude-moment",
    BreakType.GAZE_SHIFT: "20-20-20",
}

_DISPLAY_NAMES = {
    BreakType.BREATHING: "Breathing Exercise",
    BreakType.MOVEMENT: "Movement Break",
    BreakType.MINDFULNESS: "Mindfulness Moment",
    BreakType.GAZE_SHIFT: "Eye Rest",
}


# =============================================================================
# Selection
# =============================================================================

def get_random_exercise(
    break_type: BreakType,
    seated_only: bool = False,
    rng: Optional[random.Random] = None,
) -> BreakContent:
    """
    Pick a random exercise of the given type.

    seated_only only narrows movement exercises; the other catalogs are
    all seated-friendly.
    """
    rng = rng or random.Random()
    exercises = CATALOG[break_type]
    if break_type is BreakType.MOVEMENT and seated_only:
        exercises = tuple(e for e in exercises if e.seated_friendly)
    return BreakContent(type=break_type, exercise=rng.choice(exercises))


def get_exercise_by_id(exercise_id: str) -> Optional[BreakContent]:
    for break_type, exercises in CATALOG.items():
        for exercise in exercises:
            if exercise.id == exercise_id:
                return BreakContent(type=break_type, exercise=exercise)
    return None


def get_quick_break(break_type: BreakType) -> BreakContent:
    """Shortest exercise for the given type."""
    content = get_exercise_by_id(_QUICK_BREAK_IDS[break_type])
    if content is None:
        raise KeyError(f"No quick break registered for {break_type.value}")
    return content


def get_break_type_name(break_type: BreakType) -> str:
    return _DISPLAY_NAMES[break_type]
