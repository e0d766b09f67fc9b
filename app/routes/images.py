from fastapi import APIRouter, Depends

from app.models.imagery import CategorySummary, ImageResponse, WorkoutContext
from app.recommendation import catalog
from app.recommendation.selector import ImageSelector, default_selector
from app.utils.log import logger

router = APIRouter(prefix="/images", tags=["images"])


def get_image_selector() -> ImageSelector:  # pragma: no cover
    """Fetch the process-wide image selector"""
    return default_selector


# ---------------------- Catalog ---------------------------


@router.get("/categories", response_model=list[CategorySummary])
def get_categories():
    """List every muscle group in catalog order"""
    summaries = []
    for category in catalog.list_categories():
        image_set = catalog.get_image_set(category)
        summaries.append(
            CategorySummary(
                category=category,
                keywords=list(image_set.keywords),
                pool_size=len(image_set.images),
                fallback_image=image_set.fallback_image,
            )
        )
    return summaries


@router.get("/categories/{label}", response_model=list[str])
def get_category_images(label: str):
    if not catalog.is_supported_category(label):
        logger.info(f"Unknown category {label!r}; returning default image")
    return catalog.list_images(label)


# ---------------------- Recommendations ---------------------------


@router.post("/workout", response_model=ImageResponse)
def recommend_workout_image(
    context: WorkoutContext,
    selector: ImageSelector = Depends(get_image_selector),
):
    logger.info(
        f"Recommending image for workout name={context.workout_name!r} "
        f"exercises={len(context.exercises or [])} goals={context.fitness_goals}"
    )
    return ImageResponse(image=selector.select_image(context))


@router.get("/exercise", response_model=ImageResponse)
def recommend_exercise_image(
    muscle_group: str | None = None,
    name: str | None = None,
    selector: ImageSelector = Depends(get_image_selector),
):
    logger.info(f"Recommending image for exercise {name!r} ({muscle_group!r})")
    return ImageResponse(image=selector.image_for_exercise(muscle_group, name))


@router.get("/category", response_model=ImageResponse)
def recommend_category_image(
    label: str | None = None,
    selector: ImageSelector = Depends(get_image_selector),
):
    return ImageResponse(image=selector.image_for_category(label))
