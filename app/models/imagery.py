from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from app.utils.taxonomy import MuscleGroup

ImageStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
KeywordStr = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=1)
]


class CategoryImageSet(BaseModel):
    """
    Keywords and images for one muscle group.

    `images` is the pool used when an exercise name confirms the group;
    `fallback_image` is returned for every other match.
    """

    model_config = ConfigDict(frozen=True)

    keywords: tuple[KeywordStr, ...]
    images: tuple[ImageStr, ...] = Field(min_length=1)
    fallback_image: ImageStr

    def matched_keyword(self, exercise_name: str | None) -> str | None:
        """Return the first keyword contained in the exercise name, if any."""
        if not exercise_name:
            return None

        name = exercise_name.lower()
        for keyword in self.keywords:
            if keyword in name:
                return keyword
        return None


class ExerciseDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    muscle_group: str | None = None


class WorkoutContext(BaseModel):
    """
    Everything known about a workout. Every field is optional and accepts
    null; JSON bodies may use snake_case or camelCase keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    exercises: list[ExerciseDescriptor] | None = None
    category: str | None = None
    fitness_goals: list[str] | None = None
    workout_name: str | None = None
    description: str | None = None


class Classification(BaseModel):
    """Outcome of classifying a single exercise."""

    model_config = ConfigDict(frozen=True)

    category: MuscleGroup
    strategy: str
    keyword: str | None = None


# ---------------------- Responses ---------------------------


class ImageResponse(BaseModel):
    image: str


class CategorySummary(BaseModel):
    category: MuscleGroup
    keywords: list[str]
    pool_size: int
    fallback_image: str
