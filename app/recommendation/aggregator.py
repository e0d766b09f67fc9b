from collections import Counter
from typing import Callable, Sequence

from app.models.imagery import Classification, ExerciseDescriptor
from app.recommendation.catalog import normalise_label
from app.recommendation.classifier import classify_exercise
from app.utils.log import logger
from app.utils.taxonomy import (
    CARDIO_TERMS,
    DEFAULT_MUSCLE_GROUP,
    MUSCLE_GROUPS,
    TEXT_TRIGGERS,
    WORKOUT_CATEGORIES,
    MuscleGroup,
)

CARDIO_SHARE_THRESHOLD = 0.5
FULL_BODY_GROUP_THRESHOLD = 3

SYNTHETIC_EXERCISE_NAMES: dict[MuscleGroup, str] = {
    "chest": "Chest Exercise",
    "back": "Back Exercise",
    "shoulders": "Shoulder Exercise",
    "arms": "Arm Exercise",
    "legs": "Leg Exercise",
    "glutes": "Glute Exercise",
    "core": "Core Exercise",
    "cardio": "Cardio Exercise",
    "full_body": "Full Body Exercise",
}

WorkoutStrategy = Callable[
    [Sequence[ExerciseDescriptor], Sequence[Classification]], MuscleGroup | None
]


def is_cardio_name(name: str | None) -> bool:
    lowered = (name or "").lower()
    return any(term in lowered for term in CARDIO_TERMS)


# ─────────────────────────────────────────────────────────
# Operation A: dominant group from an exercise list
# ─────────────────────────────────────────────────────────


def mostly_cardio(
    exercises: Sequence[ExerciseDescriptor], classified: Sequence[Classification]
) -> MuscleGroup | None:
    cardio_count = sum(1 for ex in exercises if is_cardio_name(ex.name))
    if cardio_count > len(exercises) * CARDIO_SHARE_THRESHOLD:
        return "cardio"
    return None


def spans_many_groups(
    exercises: Sequence[ExerciseDescriptor], classified: Sequence[Classification]
) -> MuscleGroup | None:
    distinct = {c.category for c in classified}
    if len(distinct) >= FULL_BODY_GROUP_THRESHOLD:
        return "full_body"
    return None


def most_frequent(
    exercises: Sequence[ExerciseDescriptor], classified: Sequence[Classification]
) -> MuscleGroup | None:
    counts = Counter(c.category for c in classified)
    if not counts:
        return None

    top = max(counts.values())
    # ties go to whichever group comes first in the catalog
    return next(group for group in MUSCLE_GROUPS if counts[group] == top)


# Overrides decided by the shape of the workout rather than any one exercise
STRUCTURAL_STRATEGIES: Sequence[WorkoutStrategy] = (
    mostly_cardio,
    spans_many_groups,
)

WORKOUT_STRATEGIES: Sequence[WorkoutStrategy] = (
    *STRUCTURAL_STRATEGIES,
    most_frequent,
)


def structural_category(
    exercises: Sequence[ExerciseDescriptor], classified: Sequence[Classification]
) -> MuscleGroup | None:
    """Return cardio or full_body if a structural override applies, else None."""
    if not exercises:
        return None

    for strategy in STRUCTURAL_STRATEGIES:
        category = strategy(exercises, classified)
        if category is not None:
            return category
    return None


def dominant_category(
    exercises: Sequence[ExerciseDescriptor], classified: Sequence[Classification]
) -> MuscleGroup:
    """Pick the dominant group for exercises that are already classified."""
    if not exercises:
        return DEFAULT_MUSCLE_GROUP

    for strategy in WORKOUT_STRATEGIES:
        category = strategy(exercises, classified)
        if category is not None:
            logger.debug(
                f"Workout of {len(exercises)} exercises is {category} via {strategy.__name__}"
            )
            return category

    return DEFAULT_MUSCLE_GROUP  # pragma: no cover


def aggregate_by_exercises(exercises: Sequence[ExerciseDescriptor]) -> MuscleGroup:
    """
    Work out the muscle group that best represents a whole workout.

    - More than half cardio-style exercise names: cardio
    - Three or more distinct groups: full_body
    - Otherwise the most common group, ties broken by catalog order
    """
    classified = [classify_exercise(ex) for ex in exercises]
    return dominant_category(exercises, classified)


# ─────────────────────────────────────────────────────────
# Operation B: groups inferred from free text
# ─────────────────────────────────────────────────────────


def infer_from_text(
    workout_name: str | None = None, description: str | None = None
) -> list[MuscleGroup]:
    """
    Return every group whose trigger phrases appear in the name/description,
    in trigger order. Empty when nothing matches.
    """
    text = f"{workout_name or ''} {description or ''}".lower()

    return [
        category
        for phrases, category in TEXT_TRIGGERS
        if any(phrase in text for phrase in phrases)
    ]


def synthetic_exercises(categories: Sequence[MuscleGroup]) -> list[ExerciseDescriptor]:
    return [
        ExerciseDescriptor(name=SYNTHETIC_EXERCISE_NAMES[category], muscle_group=category)
        for category in categories
    ]


# ─────────────────────────────────────────────────────────
# Operation C: legacy workout category labels
# ─────────────────────────────────────────────────────────


def by_category_label(category: str | None) -> MuscleGroup:
    return WORKOUT_CATEGORIES.get(normalise_label(category), DEFAULT_MUSCLE_GROUP)
