from .aggregator import aggregate_by_exercises, by_category_label, infer_from_text
from .catalog import (
    get_image_set,
    is_supported_category,
    list_categories,
    list_images,
)
from .classifier import classify
from .selector import (
    ImageSelector,
    image_for_category,
    image_for_exercise,
    image_for_workout,
    select_image,
)

__all__ = [
    "ImageSelector",
    "aggregate_by_exercises",
    "by_category_label",
    "classify",
    "get_image_set",
    "image_for_category",
    "image_for_exercise",
    "image_for_workout",
    "infer_from_text",
    "is_supported_category",
    "list_categories",
    "list_images",
    "select_image",
]
