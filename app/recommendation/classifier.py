from typing import Callable, Sequence

from app.models.imagery import Classification, ExerciseDescriptor
from app.recommendation.catalog import CATALOG, get_image_set, normalise_label
from app.utils.log import logger
from app.utils.taxonomy import DEFAULT_MUSCLE_GROUP, MUSCLE_GROUP_ALIASES, MuscleGroup

ClassifierStrategy = Callable[[str, str], Classification | None]


def _confirmed(category: MuscleGroup, strategy: str, name: str) -> Classification:
    """Record which of the category's own keywords, if any, the name contains."""
    keyword = get_image_set(category).matched_keyword(name)
    return Classification(category=category, strategy=strategy, keyword=keyword)


# ---------------------- Strategies ---------------------------


def by_exact_label(label: str, name: str) -> Classification | None:
    if label in CATALOG:
        return _confirmed(label, "label", name)  # type: ignore[arg-type]
    return None


def by_alias(label: str, name: str) -> Classification | None:
    category = MUSCLE_GROUP_ALIASES.get(label)
    if category is None:
        return None
    return _confirmed(category, "alias", name)


def by_name_keyword(label: str, name: str) -> Classification | None:
    if not name:
        return None

    for category, image_set in CATALOG.items():
        keyword = image_set.matched_keyword(name)
        if keyword:
            return Classification(category=category, strategy="keyword", keyword=keyword)
    return None


def by_default(label: str, name: str) -> Classification:
    return Classification(category=DEFAULT_MUSCLE_GROUP, strategy="default")


# Label beats alias beats name; the first strategy to answer wins.
STRATEGIES: Sequence[ClassifierStrategy] = (
    by_exact_label,
    by_alias,
    by_name_keyword,
)


# ---------------------- Public API ---------------------------


def resolve(
    muscle_group_label: str | None = None, exercise_name: str | None = None
) -> Classification:
    """
    Resolve an exercise to one canonical muscle group.

    Never raises: anything unrecognised becomes full_body.
    """
    label = normalise_label(muscle_group_label)
    name = (exercise_name or "").lower()

    for strategy in STRATEGIES:
        result = strategy(label, name)
        if result is not None:
            logger.debug(
                f"Classified exercise name={exercise_name!r} label={muscle_group_label!r} "
                f"as {result.category} via {result.strategy}"
            )
            return result

    return by_default(label, name)


def classify(
    muscle_group_label: str | None = None, exercise_name: str | None = None
) -> MuscleGroup:
    return resolve(muscle_group_label, exercise_name).category


def classify_exercise(exercise: ExerciseDescriptor) -> Classification:
    return resolve(exercise.muscle_group, exercise.name)
