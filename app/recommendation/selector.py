import random
from dataclasses import dataclass
from typing import Callable, Sequence

from app.models.imagery import ExerciseDescriptor, WorkoutContext
from app.recommendation.aggregator import (
    by_category_label,
    dominant_category,
    infer_from_text,
    structural_category,
    synthetic_exercises,
)
from app.recommendation.catalog import (
    default_image,
    fallback_image,
    get_image_set,
    normalise_label,
)
from app.recommendation.classifier import classify_exercise, resolve
from app.settings import settings
from app.utils.log import logger
from app.utils.taxonomy import FITNESS_GOAL_MUSCLE_GROUPS, MuscleGroup

# (goal, category fragments, result). Empty fragments match any category.
GOAL_CATEGORY_OVERRIDES: tuple[tuple[str, tuple[str, ...], MuscleGroup], ...] = (
    ("weight-loss", ("cardio", "hiit"), "cardio"),
    ("muscle-building", ("strength",), "chest"),
    ("weight-gain", ("strength",), "chest"),
    ("strength-training", ("strength",), "back"),
    ("endurance", (), "cardio"),
    ("mobility", (), "core"),
)


@dataclass(frozen=True)
class Selection:
    """
    The group chosen for a workout and, if an exercise name confirmed it,
    the keyword that did. Only confirmed selections draw from the pool.
    """

    category: MuscleGroup
    reason: str
    keyword: str | None = None


SelectionStrategy = Callable[[WorkoutContext], Selection | None]


def _goals(context: WorkoutContext) -> list[str]:
    return [normalise_label(goal) for goal in context.fitness_goals or [] if goal]


def _confirming_keyword(
    category: MuscleGroup, exercises: Sequence[ExerciseDescriptor]
) -> str | None:
    image_set = get_image_set(category)
    for ex in exercises:
        keyword = image_set.matched_keyword(ex.name)
        if keyword:
            return keyword
    return None


def align_with_goals(
    exercises: Sequence[ExerciseDescriptor], goals: Sequence[str]
) -> Selection:
    """
    Prefer an exercise that serves one of the user's goals, but only if the
    workout actually contains one. Otherwise use the workout's dominant group.
    """
    classified = [classify_exercise(ex) for ex in exercises]

    for goal in goals:
        preferred = FITNESS_GOAL_MUSCLE_GROUPS.get(goal)
        if preferred is None:
            continue

        for classification in classified:
            if classification.category == preferred:
                return Selection(
                    category=preferred,
                    reason=f"goal:{goal}",
                    keyword=classification.keyword,
                )

    dominant = dominant_category(exercises, classified)
    return Selection(
        category=dominant,
        reason="exercises",
        keyword=_confirming_keyword(dominant, exercises),
    )


# ─────────────────────────────────────────────────────────
# Strategies, most specific first
# ─────────────────────────────────────────────────────────


def from_exercises(context: WorkoutContext) -> Selection | None:
    if not context.exercises:
        return None
    return align_with_goals(context.exercises, _goals(context))


def from_text(context: WorkoutContext) -> Selection | None:
    if not (context.workout_name or context.description):
        return None

    categories = infer_from_text(context.workout_name, context.description)
    if not categories:
        return None

    return align_with_goals(synthetic_exercises(categories), _goals(context))


def from_category(context: WorkoutContext) -> Selection | None:
    if not context.category:
        return None

    category = normalise_label(context.category)
    goals = _goals(context)

    for goal, fragments, preferred in GOAL_CATEGORY_OVERRIDES:
        if goal not in goals:
            continue
        if not fragments or any(fragment in category for fragment in fragments):
            return Selection(category=preferred, reason=f"category+goal:{goal}")

    return Selection(category=by_category_label(category), reason="category")


SELECTION_STRATEGIES: Sequence[SelectionStrategy] = (
    from_exercises,
    from_text,
    from_category,
)


# ─────────────────────────────────────────────────────────
# Selector
# ─────────────────────────────────────────────────────────


class ImageSelector:
    """
    Picks a single image for a workout or exercise.

    Holds the random source used for pool images; everything else is
    read from module-level tables, so one instance can serve every request.
    """

    def __init__(self, rng: random.Random | None = None):
        if rng is None:
            rng = random.Random(settings.IMAGE_RANDOM_SEED)
        self._rng = rng

    def pick(self, selection: Selection) -> str:
        image_set = get_image_set(selection.category)
        if selection.keyword:
            return self._rng.choice(image_set.images)
        return image_set.fallback_image

    def select_image(self, context: WorkoutContext | None = None) -> str:
        if context is None:
            context = WorkoutContext()

        for strategy in SELECTION_STRATEGIES:
            selection = strategy(context)
            if selection is not None:
                logger.debug(
                    f"Selected {selection.category} image via {selection.reason} "
                    f"(keyword={selection.keyword!r})"
                )
                return self.pick(selection)

        logger.debug("Nothing to go on; using default image")
        return default_image()

    def image_for_exercise(
        self, muscle_group: str | None, exercise_name: str | None = None
    ) -> str:
        classification = resolve(muscle_group, exercise_name)
        return self.pick(
            Selection(
                category=classification.category,
                reason=classification.strategy,
                keyword=classification.keyword,
            )
        )

    def image_for_workout(self, exercises: Sequence[ExerciseDescriptor] | None) -> str:
        """
        Image for a saved workout from its exercise list alone.

        A mostly-cardio or many-group workout always gets that group's
        fallback image; otherwise the dominant group goes through the usual pick.
        """
        if not exercises:
            return default_image()

        classified = [classify_exercise(ex) for ex in exercises]
        category = structural_category(exercises, classified)
        if category is not None:
            logger.debug(f"Workout is {category} by shape; using fallback image")
            return fallback_image(category)

        return self.pick(align_with_goals(exercises, goals=()))

    def image_for_category(self, label: str | None) -> str:
        return self.pick(Selection(category=by_category_label(label), reason="category"))


default_selector = ImageSelector()


def select_image(context: WorkoutContext | None = None) -> str:
    return default_selector.select_image(context)


def image_for_exercise(muscle_group: str | None, exercise_name: str | None = None) -> str:
    return default_selector.image_for_exercise(muscle_group, exercise_name)


def image_for_workout(exercises: Sequence[ExerciseDescriptor] | None) -> str:
    return default_selector.image_for_workout(exercises)


def image_for_category(label: str | None) -> str:
    return default_selector.image_for_category(label)
