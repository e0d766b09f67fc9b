# app/utils/taxonomy.py

from types import MappingProxyType
from typing import Literal, Mapping

MuscleGroup = Literal[
    "chest",
    "back",
    "shoulders",
    "arms",
    "legs",
    "glutes",
    "core",
    "cardio",
    "full_body",
]

# Catalog order. full_body stays last: it is the default for everything.
MUSCLE_GROUPS: tuple[MuscleGroup, ...] = (
    "chest",
    "back",
    "shoulders",
    "arms",
    "legs",
    "glutes",
    "core",
    "cardio",
    "full_body",
)

DEFAULT_MUSCLE_GROUP: MuscleGroup = "full_body"

# Anatomical synonyms people type into the muscle group field
MUSCLE_GROUP_ALIASES: Mapping[str, MuscleGroup] = MappingProxyType(
    {
        "pecs": "chest",
        "lats": "back",
        "delts": "shoulders",
        "deltoids": "shoulders",
        "biceps": "arms",
        "triceps": "arms",
        "quads": "legs",
        "quadriceps": "legs",
        "hamstrings": "legs",
        "calves": "legs",
        "abs": "core",
        "abdominals": "core",
        "glute": "glutes",
        "gluteus": "glutes",
    }
)

FITNESS_GOALS: tuple[str, ...] = (
    "weight-loss",
    "weight-gain",
    "muscle-building",
    "strength-training",
    "endurance",
    "mobility",
)

FITNESS_GOAL_MUSCLE_GROUPS: Mapping[str, MuscleGroup] = MappingProxyType(
    {
        "weight-loss": "cardio",
        "weight-gain": "full_body",
        "muscle-building": "chest",
        "strength-training": "back",
        "endurance": "cardio",
        "mobility": "core",
    }
)

# Legacy workout categories from before workouts were tagged by muscle group
WORKOUT_CATEGORIES: Mapping[str, MuscleGroup] = MappingProxyType(
    {
        "strength": "full_body",
        "cardio": "cardio",
        "flexibility": "core",
        "hiit": "cardio",
        "yoga": "core",
        "powerlifting": "full_body",
        "bodyweight": "full_body",
        "crossfit": "full_body",
        "running": "cardio",
        "cycling": "cardio",
        "swimming": "cardio",
    }
)

# Exercise names that make a workout count as cardio
CARDIO_TERMS: tuple[str, ...] = (
    "running",
    "jump",
    "burpee",
    "mountain climber",
    "high knees",
    "jumping jacks",
)

# Phrases in a workout name/description, checked in this order
TEXT_TRIGGERS: tuple[tuple[tuple[str, ...], MuscleGroup], ...] = (
    (("chest", "push"), "chest"),
    (("back", "pull"), "back"),
    (("leg", "squat"), "legs"),
    (("arm", "bicep", "tricep"), "arms"),
    (("shoulder",), "shoulders"),
    (("core", "abs"), "core"),
    (("glute", "hip"), "glutes"),
    (("cardio", "hiit", "endurance"), "cardio"),
    (("full body", "total body"), "full_body"),
)
