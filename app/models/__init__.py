from .imagery import (
    CategoryImageSet,
    Classification,
    ExerciseDescriptor,
    WorkoutContext,
)

__all__ = [
    "CategoryImageSet",
    "Classification",
    "ExerciseDescriptor",
    "WorkoutContext",
]
