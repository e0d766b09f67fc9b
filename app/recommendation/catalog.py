from types import MappingProxyType
from typing import Mapping

from app.models.imagery import CategoryImageSet
from app.utils.taxonomy import DEFAULT_MUSCLE_GROUP, MUSCLE_GROUPS, MuscleGroup

UNSPLASH_BASE_URL = "https://images.unsplash.com"
UNSPLASH_PARAMS = (
    "ixlib=rb-4.0.3"
    "&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
    "&auto=format&fit=crop"
)


def unsplash_url(photo_id: str, width: int = 2340) -> str:
    """
    Build a cropped Unsplash image URL, e.g.:
    https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?...&w=2340&q=80
    """
    return f"{UNSPLASH_BASE_URL}/photo-{photo_id}?{UNSPLASH_PARAMS}&w={width}&q=80"


GYM_FLOOR = unsplash_url("1571019613454-1cb2f99b2d8b")
DUMBBELL_RACK = unsplash_url("1583454110551-21f2fa2afe61")
BARBELL_LIFT = unsplash_url("1605296867424-35fc25c9212a")
BENCH_WORK = unsplash_url("1541534741688-6078c6bfb5c5")
MAT_WORK = unsplash_url("1594737625785-a6cbdabd333c")
TREADMILL = unsplash_url("1538805060514-97d9cc17730c")
STUDIO_CARDIO = unsplash_url("1571019614242-c5c5dee9f50b")
OUTDOOR_RUN = unsplash_url("1544367567-0f2fcb009e0b", width=2320)


# ─────────────────────────────────────────────────────────
# Catalog
# ─────────────────────────────────────────────────────────

CATALOG: Mapping[MuscleGroup, CategoryImageSet] = MappingProxyType(
    {
        "chest": CategoryImageSet(
            keywords=("chest", "pecs", "push", "press", "bench", "fly", "dip"),
            images=(GYM_FLOOR, DUMBBELL_RACK, BARBELL_LIFT, BENCH_WORK),
            fallback_image=GYM_FLOOR,
        ),
        "back": CategoryImageSet(
            keywords=("back", "lat", "pull", "row", "deadlift", "rhomboids", "traps"),
            images=(GYM_FLOOR, DUMBBELL_RACK, BARBELL_LIFT),
            fallback_image=GYM_FLOOR,
        ),
        "shoulders": CategoryImageSet(
            keywords=(
                "shoulder",
                "deltoid",
                "press",
                "raise",
                "lateral",
                "rear",
                "front",
            ),
            images=(GYM_FLOOR, DUMBBELL_RACK),
            fallback_image=GYM_FLOOR,
        ),
        "arms": CategoryImageSet(
            keywords=("bicep", "tricep", "arm", "curl", "extension", "hammer", "dip"),
            images=(GYM_FLOOR, DUMBBELL_RACK),
            fallback_image=GYM_FLOOR,
        ),
        "legs": CategoryImageSet(
            keywords=(
                "legs",
                "quad",
                "hamstring",
                "squat",
                "lunge",
                "leg press",
                "calf",
            ),
            images=(GYM_FLOOR, DUMBBELL_RACK),
            fallback_image=GYM_FLOOR,
        ),
        "glutes": CategoryImageSet(
            keywords=(
                "glute",
                "hip thrust",
                "bridge",
                "bulgarian",
                "split squat",
                "clamshell",
            ),
            images=(GYM_FLOOR, DUMBBELL_RACK),
            fallback_image=GYM_FLOOR,
        ),
        "core": CategoryImageSet(
            keywords=(
                "core",
                "abs",
                "plank",
                "crunch",
                "twist",
                "mountain climber",
                "abdominal",
            ),
            images=(GYM_FLOOR, MAT_WORK),
            fallback_image=MAT_WORK,
        ),
        "cardio": CategoryImageSet(
            keywords=(
                "cardio",
                "running",
                "treadmill",
                "bike",
                "cycling",
                "elliptical",
                "jump rope",
                "burpee",
                "high knees",
            ),
            images=(TREADMILL, STUDIO_CARDIO, OUTDOOR_RUN),
            fallback_image=TREADMILL,
        ),
        "full_body": CategoryImageSet(
            keywords=(
                "full body",
                "compound",
                "deadlift",
                "burpee",
                "thruster",
                "clean",
                "snatch",
                "circuit",
            ),
            images=(GYM_FLOOR, MAT_WORK, DUMBBELL_RACK),
            fallback_image=GYM_FLOOR,
        ),
    }
)


# ─────────────────────────────────────────────────────────
# Lookups
# ─────────────────────────────────────────────────────────


def get_image_set(category: MuscleGroup) -> CategoryImageSet:
    return CATALOG[category]


def normalise_label(label: str | None) -> str:
    return (label or "").strip().lower()


def is_supported_category(label: str | None) -> bool:
    """Case-insensitive check against the canonical muscle groups."""
    return normalise_label(label) in CATALOG


def list_categories() -> list[MuscleGroup]:
    return list(MUSCLE_GROUPS)


def fallback_image(category: MuscleGroup) -> str:
    return CATALOG[category].fallback_image


def default_image() -> str:
    """The image used when nothing about a workout is recognised."""
    return fallback_image(DEFAULT_MUSCLE_GROUP)


def list_images(label: str | None) -> list[str]:
    """
    Every pool image for a category label.

    Unknown labels get the default fallback image on its own.
    """
    key = normalise_label(label)
    if key not in CATALOG:
        return [default_image()]
    return list(CATALOG[key].images)  # type: ignore[index]
